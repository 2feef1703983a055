"""Configuration management module."""

from .manager import ConfigStore
from .loader import load_config, load_or_create_config, parse_config, save_config
from .defaults import get_default_config_path

__all__ = [
    "ConfigStore",
    "load_config",
    "load_or_create_config",
    "parse_config",
    "save_config",
    "get_default_config_path",
]
