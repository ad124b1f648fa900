"""
Processing components for schema conversion.
"""

from .conversion_pipeline import SchemaConverter

__all__ = ['SchemaConverter']
