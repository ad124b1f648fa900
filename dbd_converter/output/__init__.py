"""Schema serialization components."""

from .schema_writer import SchemaWriter

__all__ = ['SchemaWriter']
