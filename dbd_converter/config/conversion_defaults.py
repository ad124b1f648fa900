"""
Centralized configuration defaults for schema conversion.

CLI arguments and environment variables can override these defaults at runtime.
"""

from pathlib import Path


class ConversionDefaults:
    """
    Centralized operational configuration for schema conversion.

    All values are defaults that can be overridden:
    - dbd_converter model.xml config/doctrine/schema.yml --transform my.xsl
    - DBD_CONVERTER_LOG_LEVEL=DEBUG dbd_converter model.xml
    """

    # Output
    OUTPUT_PATH = "config/doctrine/schema.yml"  # Relative to the base path
    YAML_INDENT = 2

    # Normalizing template shipped with the package
    TRANSFORM_PATH = str(Path(__file__).resolve().parent.parent / "data" / "doctrine.xsl")

    # Logging
    LOG_LEVEL = "INFO"  # CRITICAL, ERROR, WARNING, INFO, DEBUG

    @classmethod
    def to_dict(cls) -> dict:
        """
        Export all defaults as a dictionary.

        Returns:
            Dictionary of all ConversionDefaults class attributes.
        """
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if not key.startswith('_') and key.isupper()
        }

    @classmethod
    def log_summary(cls, logger=None):
        """
        Log a summary of all conversion defaults.

        Args:
            logger: Optional logger instance. If None, prints to stdout.
        """
        config_dict = cls.to_dict()
        summary = "\n".join([f"  {key}: {value}" for key, value in sorted(config_dict.items())])
        message = f"Conversion Configuration Defaults:\n{summary}"

        if logger:
            logger.info(message)
        else:
            print(message)
