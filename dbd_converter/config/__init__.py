"""Configuration management components."""

from .config_manager import ConfigManager, get_config_manager, reset_config_manager
from .conversion_defaults import ConversionDefaults

__all__ = ['ConfigManager', 'ConversionDefaults', 'get_config_manager', 'reset_config_manager']
