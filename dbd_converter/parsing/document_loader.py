"""
Source document loading and XSL normalization.

This module loads DBDesigner XML exports with lxml, loads the XSL template that
normalizes them into the canonical relational document, and applies it. Both
files are checked before any work starts so a missing template fails fast,
before the source is parsed or transformed.
"""

import logging

from pathlib import Path
from typing import Optional

from lxml import etree

from ..interfaces import DocumentLoaderInterface, PathLike
from ..exceptions import (
    SourceDocumentError,
    TransformError,
    TransformTemplateError,
    XMLParsingError,
)


class DocumentLoader(DocumentLoaderInterface):
    """
    Loads source documents and applies the normalizing XSL template.

    The parser is hardened the same way for every file it reads: external
    entities are not resolved and network access is disabled.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _create_parser() -> etree.XMLParser:
        return etree.XMLParser(
            resolve_entities=False,  # Security: don't resolve external entities
            no_network=True,  # Security: disable network access
            remove_blank_text=True
        )

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
        path = self._require_file(source_path, SourceDocumentError, "The DBDesigner file does not exist")

        try:
            document = etree.parse(str(path), self._create_parser())
        except etree.XMLSyntaxError as e:
            raise XMLParsingError(f"XML syntax error in {path}: {e}", source_path=str(path))

        self.logger.info(f"Loaded DBDesigner file {path}")
        return document

    def load_transform(self, transform_path: PathLike) -> etree.XSLT:
        """
        Load the XSL template.

        Raises:
            TransformTemplateError: If the template is missing or is not a valid stylesheet
        """
        path = self._require_file(transform_path, TransformTemplateError, "The XSL template does not exist")

        try:
            stylesheet = etree.parse(str(path), self._create_parser())
            transform = etree.XSLT(stylesheet)
        except (etree.XMLSyntaxError, etree.XSLTParseError) as e:
            raise TransformTemplateError(f"Invalid XSL template {path}: {e}", source_path=str(path))

        self.logger.info(f"Loaded transformation file {path}")
        return transform

    def apply_transform(self, document: etree._ElementTree, transform: etree.XSLT) -> etree._ElementTree:
        """
        Apply the template and re-parse its output into a fresh document.

        Raises:
            TransformError: If the transformation fails or produces no XML
        """
        self.logger.info("Processing XSL template")
        try:
            result = transform(document)
        except etree.XSLTApplyError as e:
            raise TransformError(f"XSL transformation failed: {e}")

        xml_schema = str(result)
        if not xml_schema.strip():
            raise TransformError("XSL transformation produced an empty document")

        self.logger.info("Transforming to XML")
        return self.parse_string(xml_schema)

    def parse_string(self, xml_content: str) -> etree._ElementTree:
        """
        Parse XML content held in memory.

        Raises:
            XMLParsingError: If the content is empty or malformed
        """
        if not xml_content or not xml_content.strip():
            raise XMLParsingError("XML content is empty or None")

        try:
            # Strip the declaration so encoding declarations don't clash with str input
            if xml_content.lstrip().startswith('<?xml'):
                xml_content = xml_content.split('?>', 1)[1]
            root = etree.fromstring(xml_content.encode('utf-8'), self._create_parser())
        except etree.XMLSyntaxError as e:
            raise XMLParsingError(f"XML syntax error: {e}", xml_content)

        return etree.ElementTree(root)

    def load(self, source_path: PathLike, transform_path: Optional[PathLike] = None) -> etree._ElementTree:
        """
        Load the source document and normalize it with the optional template.

        Both files are checked for existence before either is parsed.

        Args:
            source_path: DBDesigner XML file
            transform_path: Optional XSL template; None when the source already is canonical

        Returns:
            The relational document ready for translation
        """
        self._require_file(source_path, SourceDocumentError, "The DBDesigner file does not exist")
        if transform_path is not None:
            self._require_file(transform_path, TransformTemplateError, "The XSL template does not exist")

        document = self.load_source(source_path)
        if transform_path is None:
            self.logger.debug("No XSL template given, using source document as is")
            return document

        transform = self.load_transform(transform_path)
        return self.apply_transform(document, transform)

    @staticmethod
    def _require_file(file_path: PathLike, error_class, message: str) -> Path:
        path = Path(file_path)
        if not path.is_file():
            raise error_class(f"{message}: {path}", source_path=str(path))
        return path
