"""Schema translation components."""

from .schema_translator import SchemaTranslator
from .type_mapping import resolve_column_type, is_known_type, ResolvedType

__all__ = ['SchemaTranslator', 'resolve_column_type', 'is_known_type', 'ResolvedType']
