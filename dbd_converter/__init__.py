"""
DBDesigner to Doctrine Schema Conversion System

Converts DBDesigner 4 XML models (tables, columns, foreign keys, unique
constraints) into Doctrine YAML schema definitions.
"""

__version__ = "1.0.0"

# Import core models and interfaces for easy access
from .models import (
    SchemaModel,
    TableDefinition,
    ColumnDefinition,
    RelationDefinition,
    IndexDefinition,
    TranslationWarning,
    TranslationResult,
    ConversionResult,
    WarningKind
)

from .interfaces import (
    DocumentLoaderInterface,
    SchemaTranslatorInterface,
    SchemaWriterInterface
)

from .exceptions import (
    ConversionError,
    SourceDocumentError,
    TransformTemplateError,
    XMLParsingError,
    TransformError,
    SchemaTranslationError,
    SchemaWriteError,
    ConfigurationError
)

from .mapping.schema_translator import SchemaTranslator
from .processing.conversion_pipeline import SchemaConverter

__all__ = [
    # Core models
    "SchemaModel",
    "TableDefinition",
    "ColumnDefinition",
    "RelationDefinition",
    "IndexDefinition",
    "TranslationWarning",
    "TranslationResult",
    "ConversionResult",
    "WarningKind",

    # Interfaces
    "DocumentLoaderInterface",
    "SchemaTranslatorInterface",
    "SchemaWriterInterface",

    # Components
    "SchemaTranslator",
    "SchemaConverter",

    # Exceptions
    "ConversionError",
    "SourceDocumentError",
    "TransformTemplateError",
    "XMLParsingError",
    "TransformError",
    "SchemaTranslationError",
    "SchemaWriteError",
    "ConfigurationError"
]
