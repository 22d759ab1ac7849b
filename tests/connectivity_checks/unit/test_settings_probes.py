"""Settings probe tests."""

from __future__ import annotations

import socket
from collections.abc import Iterator

import pytest
from itest_build_runner.configuration import DATABASE_TYPES, DatabaseProfile
from itest_build_runner.connectivity_checks import (
    ValidationKind,
    check_database_connection,
    check_executable_path,
    check_license_server,
    database_dialect,
    database_url,
)
from sqlalchemy.exc import OperationalError


class _FakeConnection:
    def __enter__(self) -> _FakeConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


class _FakeEngine:
    def __init__(self, error: Exception | None = None) -> None:
        self.disposed = False
        self._error = error

    def connect(self) -> _FakeConnection:
        if self._error is not None:
            raise self._error
        return _FakeConnection()

    def dispose(self) -> None:
        self.disposed = True


def _fields_profile(**overrides: str) -> DatabaseProfile:
    values = {
        "name": "reports",
        "db_type": "MySQL",
        "host": "db.example.com",
        "port": "3306",
        "username": "qa",
        "password": "secret",
    }
    values.update(overrides)
    return DatabaseProfile(**values)


@pytest.fixture
def listening_port() -> Iterator[int]:
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    try:
        yield server.getsockname()[1]
    finally:
        server.close()


def _closed_port() -> int:
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


@pytest.mark.parametrize("path", ["", "   ", "/opt/itest/bin/itestrt", "C:\\Spirent\\itestrt.exe"])
def test_executable_path_accepts_empty_or_itestrt(path: str) -> None:
    assert check_executable_path(path).is_ok


def test_executable_path_rejects_other_binaries() -> None:
    message = check_executable_path("/usr/bin/python")

    assert message.kind is ValidationKind.ERROR
    assert message.message == "RT path does not end at executable"


def test_license_server_requires_host() -> None:
    assert check_license_server("  ").message == "Must specify license server"


def test_license_server_rejects_non_numeric_port() -> None:
    message = check_license_server("lic.example.com", "abc")

    assert message.kind is ValidationKind.ERROR
    assert message.message == "Invalid license server port: abc"


def test_license_server_reachable(listening_port: int) -> None:
    message = check_license_server("127.0.0.1", str(listening_port))

    assert message.is_ok
    assert message.message == "Connected to license server"


def test_license_server_unreachable() -> None:
    message = check_license_server("127.0.0.1", str(_closed_port()), timeout=0.5)

    assert message.kind is ValidationKind.ERROR
    assert message.message == "Cannot reach license server"


def test_database_fields_are_all_or_nothing_without_uri() -> None:
    message = check_database_connection(_fields_profile(host=""))

    assert message.message == "Missing required field"


def test_database_uri_still_needs_credentials() -> None:
    profile = DatabaseProfile(uri="mysql://db.example.com/reports", username="qa")

    assert check_database_connection(profile).message == "Please specify username and password"


def test_database_connection_success_disposes_engine() -> None:
    engine = _FakeEngine()
    seen_urls = []

    def factory(url):
        seen_urls.append(url)
        return engine

    message = check_database_connection(_fields_profile(), engine_factory=factory)

    assert message.is_ok
    assert message.message == "Success"
    assert engine.disposed is True
    assert seen_urls[0].drivername == "mysql"


def test_database_connection_failure_reports_credentials() -> None:
    engine = _FakeEngine(error=OperationalError("SELECT 1", {}, Exception("denied")))

    message = check_database_connection(_fields_profile(), engine_factory=lambda url: engine)

    assert message.kind is ValidationKind.ERROR
    assert message.message == "Please check database credentials"
    assert engine.disposed is True


def test_missing_database_driver_is_reported() -> None:
    def factory(url):
        raise ImportError("No module named 'MySQLdb'")

    message = check_database_connection(_fields_profile(), engine_factory=factory)

    assert message.message == "No module named 'MySQLdb'"


def test_invalid_port_reports_settings_problem() -> None:
    message = check_database_connection(
        _fields_profile(port="not-a-port"), engine_factory=lambda url: _FakeEngine()
    )

    assert message.message == "Please check database settings"


def test_database_url_prefers_uri_and_strips_jdbc_prefix() -> None:
    profile = DatabaseProfile(
        uri="jdbc:postgresql://db.example.com:5432/reports",
        host="ignored.example.com",
        username="qa",
        password="secret",
    )

    url = database_url(profile)

    assert url.drivername == "postgresql"
    assert url.host == "db.example.com"
    assert url.port == 5432
    assert url.database == "reports"
    assert url.username == "qa"
    assert url.password == "secret"


def test_database_url_from_fields() -> None:
    url = database_url(_fields_profile(db_type="PostgreSQL", port="5432"))

    assert url.drivername == "postgresql"
    assert url.host == "db.example.com"
    assert url.port == 5432
    assert url.database == "reports"


@pytest.mark.parametrize(
    ("db_type", "dialect"),
    [("MySQL", "mysql"), ("mysql", "mysql"), ("PostgreSQL", "postgresql"), ("", "postgresql")],
)
def test_database_dialect(db_type: str, dialect: str) -> None:
    assert database_dialect(db_type) == dialect


def test_license_server_host_rejected_by_resolver_is_unreachable() -> None:
    message = check_license_server("a..b", "27000")

    assert message.kind is ValidationKind.ERROR
    assert message.message == "Cannot reach license server"


@pytest.mark.parametrize("port", ["0", "70000", "-1"])
def test_license_server_rejects_out_of_range_port(port: str) -> None:
    message = check_license_server("lic.example.com", port)

    assert message.message == f"Invalid license server port: {port}"


def test_database_type_must_be_supported_without_uri() -> None:
    message = check_database_connection(
        _fields_profile(db_type="Oracle"), engine_factory=lambda url: _FakeEngine()
    )

    assert message.kind is ValidationKind.ERROR
    assert message.message == "Unsupported database type: Oracle"


@pytest.mark.parametrize("db_type", DATABASE_TYPES)
def test_every_listed_database_type_is_accepted(db_type: str) -> None:
    message = check_database_connection(
        _fields_profile(db_type=db_type.upper()), engine_factory=lambda url: _FakeEngine()
    )

    assert message.is_ok
