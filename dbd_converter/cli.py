"""
Command-line interface for the DBDesigner schema conversion system.

Usage:
    dbd_converter model.xml [config/doctrine/schema.yml] [--transform doctrine.xsl | --no-transform]
"""

import sys
import logging
import argparse

from typing import Optional

from . import __version__
from .config.config_manager import get_config_manager, LOG_LEVELS
from .config.conversion_defaults import ConversionDefaults
from .exceptions import ConversionError
from .processing.conversion_pipeline import SchemaConverter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbd_converter",
        description="Convert a DBDesigner XML file to a Doctrine YAML schema"
    )
    parser.add_argument("dbdfile", help="The DBDesigner XML file")
    parser.add_argument("output", nargs="?",
                        help="The doctrine schema file (default: DBD_CONVERTER_OUTPUT_PATH or config/doctrine/schema.yml)")

    transform_group = parser.add_mutually_exclusive_group()
    transform_group.add_argument("--transform",
                                 help="The XSL transformation template (default: bundled doctrine.xsl)")
    transform_group.add_argument("--no-transform", action="store_true",
                                 help="Treat the input as an already normalized relational document")

    parser.add_argument("--log-level", choices=list(LOG_LEVELS),
                        help="Logging level (default: DBD_CONVERTER_LOG_LEVEL or INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(log_level: str) -> None:
    # Set up logging without reconfiguring root if already configured
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level))
    logging.getLogger('dbd_converter').setLevel(getattr(logging, log_level))


def main(args: Optional[list] = None) -> int:
    """
    Main entry point for the CLI application.

    Args:
        args: Optional command line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for conversion errors, 130 when interrupted)
    """
    if args is None:
        args = sys.argv[1:]

    options = build_parser().parse_args(args)
    logger = logging.getLogger(__name__)

    try:
        config_manager = get_config_manager()
        _configure_logging(config_manager.get_log_level(options.log_level))
        if logger.isEnabledFor(logging.DEBUG):
            ConversionDefaults.log_summary(logger)
            logger.debug(f"Effective configuration: {config_manager.get_configuration_summary()}")

        output_path = config_manager.get_output_path(options.output)
        transform_path = config_manager.get_transform_path(options.transform, disabled=options.no_transform)

        converter = SchemaConverter()
        result = converter.convert(options.dbdfile, output_path, transform_path)

        for warning in result.warnings:
            logger.debug(f"Warning: {warning}")
        logger.info(f"Schema written to {result.output_path} ({result.tables_converted} classes, "
                    f"{result.warning_count} warnings)")
        return 0

    except KeyboardInterrupt:
        logger.error("Conversion interrupted by user")
        return 130
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
