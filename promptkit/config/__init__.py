"""
Configuration Management

YAML-based configuration with environment variable overrides.
"""

from promptkit.config.settings import Settings, get_settings, reset_settings
from promptkit.config.loader import load_yaml

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "load_yaml",
]
