"""Global settings loader and writer service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DatabaseProfile, GlobalSettings, LicenseServerSettings


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_settings(settings_path: Path | str) -> GlobalSettings:
    """Load and validate the global settings file."""
    path = Path(settings_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    runner = _optional_mapping(parsed.get("runner"), "runner")
    license_server = _parse_license_server_section(parsed.get("license_server"))
    database = _parse_database_section(parsed.get("database"))

    return GlobalSettings(
        runner_executable_path=_optional_string(
            runner.get("executable_path"), "runner.executable_path"
        ),
        license_server=license_server,
        database=database,
    )


def save_settings(settings: GlobalSettings, settings_path: Path | str) -> Path:
    """Persist settings as YAML and return the resolved destination."""
    destination = Path(settings_path)
    document = {
        "runner": {"executable_path": settings.runner_executable_path},
        "license_server": {
            "host": settings.license_server.host,
            "port": settings.license_server.port,
        },
        "database": {
            "uri": settings.database.uri,
            "host": settings.database.host,
            "port": settings.database.port,
            "name": settings.database.name,
            "type": settings.database.db_type,
            "username": settings.database.username,
            "password": settings.database.password,
        },
    }
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
    return destination.resolve()


def _parse_license_server_section(value: Any) -> LicenseServerSettings:
    section = _optional_mapping(value, "license_server")
    return LicenseServerSettings(
        host=_optional_string(section.get("host"), "license_server.host"),
        port=_optional_port(section.get("port"), "license_server.port"),
    )


def _parse_database_section(value: Any) -> DatabaseProfile:
    section = _optional_mapping(value, "database")
    return DatabaseProfile(
        uri=_optional_string(section.get("uri"), "database.uri"),
        host=_optional_string(section.get("host"), "database.host"),
        port=_optional_port(section.get("port"), "database.port"),
        name=_optional_string(section.get("name"), "database.name"),
        db_type=_optional_string(section.get("type"), "database.type"),
        username=_optional_string(section.get("username"), "database.username"),
        password=_optional_string(section.get("password"), "database.password"),
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Settings section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value.strip()


def _optional_port(value: Any, field_name: str) -> str:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a string or an integer.")
    if isinstance(value, int):
        if value <= 0:
            raise ConfigurationError(f"{field_name} must be greater than zero.")
        return str(value)
    return _optional_string(value, field_name)
