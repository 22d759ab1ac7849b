"""Global settings domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_RUNNER_COMMAND = "itestrt"
DATABASE_TYPES = ("MySQL", "PostgreSQL")


@dataclass(frozen=True)
class LicenseServerSettings:
    """License server address handed to the runner."""

    host: str = ""
    port: str = ""

    @property
    def address(self) -> str:
        """Return `host` or `host:port` when a port is configured."""
        if self.port:
            return f"{self.host}:{self.port}"
        return self.host


@dataclass(frozen=True)
class DatabaseProfile:  # pylint: disable=too-many-instance-attributes
    """Test report database connection profile.

    Either `uri` is set, or the individual host/port/name/type fields are.
    When both are configured the URI wins.
    """

    uri: str = ""
    host: str = ""
    port: str = ""
    name: str = ""
    db_type: str = ""
    username: str = ""
    password: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.username)

    @property
    def uses_uri(self) -> bool:
        return bool(self.uri)


@dataclass(frozen=True)
class GlobalSettings:
    """Process-wide settings shared read-only by every build."""

    runner_executable_path: str = ""
    license_server: LicenseServerSettings = field(default_factory=LicenseServerSettings)
    database: DatabaseProfile = field(default_factory=DatabaseProfile)

    @property
    def runner_command(self) -> str:
        """Executable token for the command line, quoted when it contains whitespace."""
        path = self.runner_executable_path.strip()
        if not path:
            return DEFAULT_RUNNER_COMMAND
        if any(character.isspace() for character in path):
            return f'"{path}"'
        return path
