"""
Centralized configuration management for the DBDesigner schema conversion system.

This module provides the ConfigManager class that resolves output and template
paths and the logging level from CLI overrides, environment variables and the
ConversionDefaults, in that order of precedence.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field

from .conversion_defaults import ConversionDefaults
from ..exceptions import ConfigurationError


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class ConversionPaths:
    """Conversion file paths with environment variable support."""
    base_path: Path = field(default_factory=lambda: Path.cwd())
    output_path: str = ConversionDefaults.OUTPUT_PATH
    transform_path: str = ConversionDefaults.TRANSFORM_PATH

    @classmethod
    def from_environment(cls, base_path: Optional[Union[str, Path]] = None) -> 'ConversionPaths':
        """Create conversion paths from environment variables."""
        if base_path:
            resolved_base = Path(base_path)
        else:
            resolved_base = Path(os.environ.get('DBD_CONVERTER_BASE_PATH', Path.cwd()))

        return cls(
            base_path=resolved_base,
            output_path=os.environ.get('DBD_CONVERTER_OUTPUT_PATH', cls.output_path),
            transform_path=os.environ.get('DBD_CONVERTER_TRANSFORM_PATH', cls.transform_path)
        )

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path against the base path unless it is absolute."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.base_path / candidate


class ConfigManager:
    """
    Centralized configuration manager serving as single source of truth.

    Values given on the command line win over environment variables, which win
    over ConversionDefaults.
    """

    def __init__(self, base_path: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            base_path: Base path for relative output and template paths. If None, uses
                       DBD_CONVERTER_BASE_PATH or the current directory.
        """
        self.logger = logging.getLogger(__name__)
        self.paths = ConversionPaths.from_environment(base_path)
        self.logger.debug(f"ConfigManager initialized with base path: {self.paths.base_path}")

    def get_output_path(self, override: Optional[Union[str, Path]] = None) -> Path:
        """Destination schema file."""
        return self.paths.resolve(override if override else self.paths.output_path)

    def get_transform_path(self, override: Optional[Union[str, Path]] = None,
                           disabled: bool = False) -> Optional[Path]:
        """
        XSL template to normalize the source with.

        Args:
            override: Template given on the command line
            disabled: Skip the transformation; the source already is canonical

        Returns:
            Template path, or None when the transformation is disabled
        """
        if disabled:
            return None
        return self.paths.resolve(override if override else self.paths.transform_path)

    def get_log_level(self, override: Optional[str] = None) -> str:
        """
        Logging level name.

        Raises:
            ConfigurationError: If the level is not a known logging level
        """
        level = (override or os.environ.get('DBD_CONVERTER_LOG_LEVEL', ConversionDefaults.LOG_LEVEL)).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level '{level}', expected one of {', '.join(LOG_LEVELS)}")
        return level

    def get_configuration_summary(self) -> Dict[str, Any]:
        """Summary of the effective configuration for logging."""
        return {
            'base_path': str(self.paths.base_path),
            'output_path': str(self.get_output_path()),
            'transform_path': str(self.get_transform_path()),
            'log_level': self.get_log_level(),
        }


# Global configuration manager instance
_global_config_manager: Optional[ConfigManager] = None


def get_config_manager(base_path: Optional[Union[str, Path]] = None) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        base_path: Base path for configuration files. Only used on first call.

    Returns:
        Global ConfigManager instance
    """
    global _global_config_manager

    if _global_config_manager is None:
        _global_config_manager = ConfigManager(base_path)

    return _global_config_manager


def reset_config_manager() -> None:
    """Reset the global configuration manager instance."""
    global _global_config_manager
    _global_config_manager = None
