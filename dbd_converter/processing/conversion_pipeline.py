"""
Schema conversion pipeline.

Wires the document loader, schema translator and schema writer together:
load the DBDesigner file, normalize it with the XSL template, translate the
relational document and write the Doctrine schema.
"""

import logging
import time
from typing import Optional

from ..interfaces import (
    DocumentLoaderInterface,
    SchemaTranslatorInterface,
    SchemaWriterInterface,
    PathLike,
)
from ..parsing.document_loader import DocumentLoader
from ..mapping.schema_translator import SchemaTranslator
from ..output.schema_writer import SchemaWriter
from ..models import ConversionResult


class SchemaConverter:
    """
    Single pass DBDesigner to Doctrine conversion.

    Precondition failures (missing source file or template) are raised before
    any translation work starts. Translation anomalies do not stop the run;
    they are returned on the ConversionResult.
    """

    def __init__(self,
                 loader: Optional[DocumentLoaderInterface] = None,
                 translator: Optional[SchemaTranslatorInterface] = None,
                 writer: Optional[SchemaWriterInterface] = None):
        """
        Initialize the converter.

        Args:
            loader: Document loader, defaults to DocumentLoader
            translator: Schema translator, defaults to SchemaTranslator
            writer: Schema writer, defaults to SchemaWriter
        """
        self.logger = logging.getLogger(__name__)
        self.loader = loader or DocumentLoader()
        self.translator = translator or SchemaTranslator()
        self.writer = writer or SchemaWriter()

    def convert(self, source_path: PathLike, output_path: PathLike,
                transform_path: Optional[PathLike] = None) -> ConversionResult:
        """
        Convert a DBDesigner file to a Doctrine schema file.

        Args:
            source_path: DBDesigner XML export
            output_path: Schema file to write; an existing file is replaced
            transform_path: Optional XSL template normalizing the export

        Returns:
            ConversionResult with the table count and translation warnings
        """
        start_time = time.time()

        document = self.loader.load(source_path, transform_path)

        translation = self.translator.translate(document)
        if translation.has_warnings:
            self.logger.warning(
                f"{len(translation.warnings)} translation warnings, review the generated schema"
            )

        written_path = self.writer.write(translation.schema, output_path)

        result = ConversionResult(
            source_path=str(source_path),
            output_path=str(written_path),
            tables_converted=len(translation.schema),
            warnings=translation.warnings,
            processing_time_seconds=time.time() - start_time
        )
        self.logger.info(
            f"Converted {result.tables_converted} tables in {result.processing_time_seconds:.2f}s"
        )
        return result
