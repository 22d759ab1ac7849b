"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_SETTINGS_FILENAME,
    build_placeholder_settings,
    write_placeholder_settings,
)
from .loader import ConfigurationError, load_settings, save_settings
from .runtime_settings import (
    DATABASE_TYPES,
    DEFAULT_RUNNER_COMMAND,
    DatabaseProfile,
    GlobalSettings,
    LicenseServerSettings,
)

__all__ = [
    "GlobalSettings",
    "LicenseServerSettings",
    "DatabaseProfile",
    "DEFAULT_RUNNER_COMMAND",
    "DATABASE_TYPES",
    "ConfigurationError",
    "load_settings",
    "save_settings",
    "DEFAULT_SETTINGS_FILENAME",
    "build_placeholder_settings",
    "write_placeholder_settings",
]
