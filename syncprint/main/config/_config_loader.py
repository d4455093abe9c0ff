"""
Configuration loading for syncprint.

Configuration is read from YAML. The packaged default config is always
loaded first and the user's file, when given, is merged on top of it, so
a user file only needs the keys it changes.
"""

import codecs
import os
from pathlib import Path
from typing import Optional

import yaml
from loguru import logger

from .._aux import iter_update_dict

DEFAULT_CONFIG_PATH = Path(__file__).parent / "_default_config.yaml"

STREAM_NAMES = ("stdout", "stderr")
ERROR_POLICIES = ("strict", "ignore", "replace", "backslashreplace", "xmlcharrefreplace")


def _read_yaml(path) -> dict:
    with open(path, "r") as file:
        return yaml.safe_load(file) or {}


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Load the configuration, falling back to the packaged default.

    If config_path is not provided, or does not point to an existing file,
    only the default configuration is used.

    Args:
        config_path (Optional[str]): Path to a YAML configuration file. Defaults to None.

    Returns:
        dict: The merged and validated configuration.

    Raises:
        ValueError: If the configuration holds invalid values.
    """
    config = _read_yaml(DEFAULT_CONFIG_PATH)

    if not config_path:
        logger.debug("Config file not provided, using default config.")
    elif not os.path.isfile(config_path):
        logger.warning(f"Config file {config_path} does not exist or is not a file, using default config.")
    else:
        user_config = _read_yaml(config_path)
        if not isinstance(user_config, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping at the top level.")
        iter_update_dict(config, user_config)
        logger.debug(f"Loaded config file {config_path}.")

    validate_config(config)
    return config


def validate_config(config: dict) -> None:
    """
    Check the 'streams' and 'logging' sections of a configuration.

    Args:
        config (dict): Configuration dictionary.

    Raises:
        ValueError: If a stream name, capacity, encoding or error policy is invalid.
    """
    streams = config.get("streams") or {}
    if not isinstance(streams, dict):
        raise ValueError("'streams' section must be a mapping.")

    for name, stream_conf in streams.items():
        if name not in STREAM_NAMES:
            raise ValueError(f"Unknown stream '{name}' in config. Expected one of {STREAM_NAMES}.")
        stream_conf = stream_conf or {}
        capacity = stream_conf.get("capacity")
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Stream '{name}' capacity must be a positive integer, got {capacity!r}.")
        encoding = stream_conf.get("encoding")
        if encoding is not None and not isinstance(encoding, str):
            raise ValueError(f"Stream '{name}' encoding must be a string or null, got {encoding!r}.")
        if encoding is not None:
            try:
                codecs.lookup(encoding)
            except LookupError:
                raise ValueError(f"Stream '{name}' encoding {encoding!r} is not a known codec.") from None
        errors = stream_conf.get("errors")
        if errors is not None and errors not in ERROR_POLICIES:
            raise ValueError(f"Stream '{name}' errors must be one of {ERROR_POLICIES} or null, got {errors!r}.")

    logging_conf = config.get("logging") or {}
    if not isinstance(logging_conf, dict):
        raise ValueError("'logging' section must be a mapping.")
    if "level" in logging_conf and not isinstance(logging_conf["level"], str):
        raise ValueError(f"Logging level must be a string, got {logging_conf['level']!r}.")
