"""
YAML rendering of the Doctrine schema model.

Keys are written in source order so consecutive runs over the same document
produce byte-identical files.
"""

import logging

from pathlib import Path

import yaml

from ..interfaces import SchemaWriterInterface, PathLike
from ..exceptions import SchemaWriteError
from ..models import SchemaModel, ColumnSize
from ..config.conversion_defaults import ConversionDefaults


class SchemaDumper(yaml.SafeDumper):
    """SafeDumper with indented block sequences."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def _represent_column_size(dumper: yaml.SafeDumper, data: ColumnSize) -> yaml.ScalarNode:
    # Only sizes become integers; every other string is written as is
    if data.isdigit() and data.isascii() and (data == "0" or not data.startswith("0")):
        return dumper.represent_scalar('tag:yaml.org,2002:int', str(data))
    return dumper.represent_str(str(data))


SchemaDumper.add_representer(ColumnSize, _represent_column_size)


class SchemaWriter(SchemaWriterInterface):
    """Writes a SchemaModel as a Doctrine YAML schema file."""

    def __init__(self, indent: int = ConversionDefaults.YAML_INDENT):
        self.indent = indent
        self.logger = logging.getLogger(__name__)

    def dump(self, schema: SchemaModel) -> str:
        """Render the schema as YAML text."""
        return yaml.dump(
            schema.to_dict(),
            Dumper=SchemaDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=self.indent,
        )

    def write(self, schema: SchemaModel, output_path: PathLike) -> Path:
        """
        Write the schema, replacing any file already at the path.

        Args:
            schema: Schema model to write
            output_path: Destination file

        Returns:
            Path of the written file

        Raises:
            SchemaWriteError: If the existing file cannot be removed or the new one written
        """
        path = Path(output_path)
        content = self.dump(schema)

        try:
            if path.exists():
                path.unlink()
                self.logger.debug(f"Removed existing schema file {path}")
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise SchemaWriteError(f"Failed to write schema file {path}: {e}", output_path=str(path))

        self.logger.info(f"file+ {path}")
        return path
