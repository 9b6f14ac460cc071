"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import DEFAULT_SET_NAME, ConfigurationError, load_allowed_values
from .runtime_settings import AllowedValuesDocument

__all__ = [
    "AllowedValuesDocument",
    "ConfigurationError",
    "DEFAULT_SET_NAME",
    "load_allowed_values",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
