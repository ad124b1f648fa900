"""
Custom exceptions for the DBDesigner schema conversion system.

This module defines specific exception types for the error conditions
that can occur while loading, transforming, translating and writing schemas.
"""


class ConversionError(Exception):
    """Base exception for all schema conversion related errors."""

    def __init__(self, message: str, source_path: str = None):
        """
        Initialize conversion error.

        Args:
            message: Error description
            source_path: Optional path of the file that caused the error
        """
        super().__init__(message)
        self.source_path = source_path


class SourceDocumentError(ConversionError):
    """Exception raised when the DBDesigner source document does not exist."""
    pass


class TransformTemplateError(ConversionError):
    """Exception raised when the XSL template is missing or is not a valid stylesheet."""
    pass


class XMLParsingError(ConversionError):
    """Exception raised when XML parsing fails."""

    def __init__(self, message: str, xml_content: str = None, source_path: str = None):
        """
        Initialize XML parsing error.

        Args:
            message: Error description
            xml_content: Optional XML content that failed to parse (truncated for logging)
            source_path: Optional path of the document
        """
        super().__init__(message, source_path)
        self.xml_content = xml_content[:500] + "..." if xml_content and len(xml_content) > 500 else xml_content


class TransformError(ConversionError):
    """Exception raised when applying the XSL template fails."""
    pass


class SchemaTranslationError(ConversionError):
    """Exception raised when the relational document cannot be translated at all."""
    pass


class SchemaWriteError(ConversionError):
    """Exception raised when the schema file cannot be written."""

    def __init__(self, message: str, output_path: str = None):
        super().__init__(message)
        self.output_path = output_path


class ConfigurationError(ConversionError):
    """Exception raised when configuration is invalid or missing."""
    pass
