"""
Configuration - YAML configuration for the standard streams and diagnostics.
"""

from ._config_loader import load_config, validate_config, DEFAULT_CONFIG_PATH

__all__ = ["load_config", "validate_config", "DEFAULT_CONFIG_PATH"]
