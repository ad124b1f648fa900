"""
Unit tests for the command-line interface.
"""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import yaml

from dbd_converter.cli import main, build_parser
from dbd_converter.config.config_manager import reset_config_manager


RELATIONAL_XML = """<?xml version="1.0" encoding="UTF-8"?>
<database>
  <table name="users">
    <column name="id" type="INTEGER" primaryKey="true"/>
  </table>
</database>
"""


class TestCli(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)
        self.source = self.temp_path / "model.xml"
        self.source.write_text(RELATIONAL_XML, encoding="utf-8")
        self.env_patcher = patch.dict(os.environ, {'DBD_CONVERTER_BASE_PATH': str(self.temp_path)})
        self.env_patcher.start()
        reset_config_manager()

    def tearDown(self):
        self.env_patcher.stop()
        reset_config_manager()
        self.temp_dir.cleanup()

    def test_converts_relational_document(self):
        output = self.temp_path / "schema.yml"
        exit_code = main([str(self.source), str(output), "--no-transform", "--log-level", "WARNING"])

        self.assertEqual(exit_code, 0)
        self.assertEqual(yaml.safe_load(output.read_text(encoding="utf-8")), {
            'Users': {'tableName': 'users', 'columns': {'id': {'type': 'integer', 'size': 4, 'primary': True}}}
        })

    def test_debug_level_logs_configuration(self):
        output = self.temp_path / "schema.yml"
        with self.assertLogs("dbd_converter.cli", level="DEBUG") as captured:
            exit_code = main([str(self.source), str(output), "--no-transform", "--log-level", "DEBUG"])

        self.assertEqual(exit_code, 0)
        messages = "\n".join(captured.output)
        self.assertIn("Conversion Configuration Defaults", messages)
        self.assertIn("Effective configuration", messages)
        self.assertIn(str(self.temp_path), messages)

    def test_configuration_is_not_logged_above_debug(self):
        output = self.temp_path / "schema.yml"
        with self.assertLogs("dbd_converter.cli", level="INFO") as captured:
            main([str(self.source), str(output), "--no-transform", "--log-level", "INFO"])
        self.assertNotIn("Conversion Configuration Defaults", "\n".join(captured.output))

    def test_default_output_path_is_relative_to_base_path(self):
        exit_code = main([str(self.source), "--no-transform", "--log-level", "ERROR"])

        self.assertEqual(exit_code, 0)
        self.assertTrue((self.temp_path / "config" / "doctrine" / "schema.yml").is_file())

    def test_missing_source_returns_error_code(self):
        exit_code = main([str(self.temp_path / "missing.xml"), "--log-level", "CRITICAL"])
        self.assertEqual(exit_code, 1)

    def test_missing_template_returns_error_code(self):
        output = self.temp_path / "schema.yml"
        exit_code = main([str(self.source), str(output), "--transform",
                          str(self.temp_path / "missing.xsl"), "--log-level", "CRITICAL"])
        self.assertEqual(exit_code, 1)
        self.assertFalse(output.exists())

    def test_interrupt_returns_130(self):
        with patch("dbd_converter.cli.SchemaConverter.convert", side_effect=KeyboardInterrupt):
            exit_code = main([str(self.source), "--no-transform", "--log-level", "CRITICAL"])
        self.assertEqual(exit_code, 130)

    def test_transform_options_are_exclusive(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["model.xml", "--transform", "a.xsl", "--no-transform"])

    def test_invalid_log_level_is_rejected(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["model.xml", "--log-level", "LOUD"])


if __name__ == '__main__':
    unittest.main()
