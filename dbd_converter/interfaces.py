"""
Abstract interfaces for the DBDesigner schema conversion system.

This module defines the contracts the pipeline components implement
so the SchemaConverter can be assembled from replaceable parts.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from .models import SchemaModel, TranslationResult


PathLike = Union[str, Path]


class DocumentLoaderInterface(ABC):
    """Abstract interface for loading and normalizing source documents."""

    @abstractmethod
    def load_source(self, source_path: PathLike) -> etree._ElementTree:
        """
        Load the DBDesigner XML file.

        Args:
            source_path: Path to the source document

        Returns:
            Parsed document tree

        Raises:
            SourceDocumentError: If the file does not exist
            XMLParsingError: If the file is not well-formed XML
        """
        pass

    @abstractmethod
    def load_transform(self, transform_path: PathLike) -> etree.XSLT:
        """
        Load the XSL template that normalizes a source document.

        Raises:
            TransformTemplateError: If the template is missing or invalid
        """
        pass

    @abstractmethod
    def apply_transform(self, document: etree._ElementTree, transform: etree.XSLT) -> etree._ElementTree:
        """
        Apply a loaded template to a document.

        Returns:
            A freshly parsed relational document

        Raises:
            TransformError: If the transformation fails
        """
        pass

    @abstractmethod
    def load(self, source_path: PathLike, transform_path: Optional[PathLike] = None) -> etree._ElementTree:
        """Check preconditions, load the source and apply the optional template."""
        pass


class SchemaTranslatorInterface(ABC):
    """Abstract interface for relational document to schema translation."""

    @abstractmethod
    def translate(self, document) -> TranslationResult:
        """
        Translate a relational document into a schema model.

        Args:
            document: lxml element or element tree holding table elements

        Returns:
            TranslationResult with the schema and any warnings
        """
        pass


class SchemaWriterInterface(ABC):
    """Abstract interface for schema serialization."""

    @abstractmethod
    def dump(self, schema: SchemaModel) -> str:
        """Render the schema as text."""
        pass

    @abstractmethod
    def write(self, schema: SchemaModel, output_path: PathLike) -> Path:
        """
        Write the schema to a file, replacing any existing file.

        Returns:
            Path of the written file

        Raises:
            SchemaWriteError: If the file cannot be written
        """
        pass
