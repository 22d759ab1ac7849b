"""Settings loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from itest_build_runner.configuration import (
    ConfigurationError,
    DatabaseProfile,
    GlobalSettings,
    LicenseServerSettings,
    load_settings,
    save_settings,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_settings(tmp_path: Path) -> None:
    settings_path = _write_file(
        tmp_path / "settings.yaml",
        """
runner:
  executable_path: " /opt/itest/bin/itestrt "
license_server:
  host: lic.example.com
  port: 27000
database:
  host: db.example.com
  port: "3306"
  name: reports
  type: MySQL
  username: qa
  password: secret
""",
    )

    settings = load_settings(settings_path)

    assert settings.runner_executable_path == "/opt/itest/bin/itestrt"
    assert settings.license_server.address == "lic.example.com:27000"
    assert settings.database.port == "3306"
    assert settings.database.db_type == "MySQL"
    assert settings.database.is_configured is True
    assert settings.database.uses_uri is False


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    settings = load_settings(_write_file(tmp_path / "settings.yaml", ""))

    assert settings == GlobalSettings()
    assert settings.runner_command == "itestrt"
    assert settings.license_server.address == ""


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Settings file not found"):
        load_settings(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- a\n- b\n", "Settings root must be a mapping."),
        ("runner: text\n", "Settings section 'runner' must be a mapping."),
        ("license_server:\n  port: 0\n", "license_server.port must be greater than zero."),
        ("license_server:\n  port: true\n", "license_server.port must be a string or an integer."),
        ("database:\n  username: [qa]\n", "database.username must be a string."),
        ("runner: {executable_path: [\n", "Failed to parse settings file"),
    ],
)
def test_invalid_settings_raise(tmp_path: Path, contents: str, message: str) -> None:
    settings_path = _write_file(tmp_path / "settings.yaml", contents)

    with pytest.raises(ConfigurationError) as error:
        load_settings(settings_path)

    assert message in str(error.value)


def test_saved_settings_load_back_unchanged(tmp_path: Path) -> None:
    settings = GlobalSettings(
        runner_executable_path="C:\\Program Files\\Spirent\\itestrt.exe",
        license_server=LicenseServerSettings(host="lic.example.com", port="27000"),
        database=DatabaseProfile(
            uri="jdbc:mysql://db.example.com/reports", username="qa", password="secret"
        ),
    )

    written_path = save_settings(settings, tmp_path / "nested" / "settings.yaml")

    assert load_settings(written_path) == settings


def test_runner_command_quotes_paths_with_whitespace() -> None:
    spaced = GlobalSettings(runner_executable_path="C:\\Program Files\\itestrt.exe")

    assert spaced.runner_command == '"C:\\Program Files\\itestrt.exe"'
