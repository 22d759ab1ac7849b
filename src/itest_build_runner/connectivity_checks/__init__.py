"""Settings probe exports."""

from .probe_outcomes import ValidationKind, ValidationMessage
from .settings_probes import (
    DEFAULT_LICENSE_SERVER_PORT,
    check_database_connection,
    check_executable_path,
    check_license_server,
    database_dialect,
    database_url,
)

__all__ = [
    "ValidationKind",
    "ValidationMessage",
    "DEFAULT_LICENSE_SERVER_PORT",
    "check_executable_path",
    "check_license_server",
    "check_database_connection",
    "database_dialect",
    "database_url",
]
