"""Best-effort probes backing the global settings validation messages.

Probes never raise and never run during a build: the runner opens its own
license and database connections.
"""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError

from itest_build_runner.configuration import (
    DATABASE_TYPES,
    DEFAULT_RUNNER_COMMAND,
    DatabaseProfile,
)

from .probe_outcomes import ValidationMessage

_LOGGER = logging.getLogger(__name__)

DEFAULT_LICENSE_SERVER_PORT = 27000
MAX_PORT = 65535
LICENSE_SERVER_TIMEOUT_SECONDS = 1.0

EngineFactory = Callable[[URL], Any]


def check_executable_path(runner_path: str) -> ValidationMessage:
    """Empty is fine (the runner is taken from PATH); otherwise it must name itestrt."""
    path = runner_path.strip()
    if path and DEFAULT_RUNNER_COMMAND not in path:
        return ValidationMessage.error("RT path does not end at executable")
    return ValidationMessage.ok("Success")


def check_license_server(
    host: str,
    port: str = "",
    *,
    timeout: float = LICENSE_SERVER_TIMEOUT_SECONDS,
) -> ValidationMessage:
    """Try a TCP connection to the license server."""
    if not host.strip():
        return ValidationMessage.error("Must specify license server")
    try:
        port_number = int(port) if port.strip() else DEFAULT_LICENSE_SERVER_PORT
    except ValueError:
        return ValidationMessage.error(f"Invalid license server port: {port}")
    if not 0 < port_number <= MAX_PORT:
        return ValidationMessage.error(f"Invalid license server port: {port}")
    try:
        with socket.create_connection((host.strip(), port_number), timeout=timeout):
            pass
    except (OSError, ValueError) as exc:
        _LOGGER.debug("License server %s:%s unreachable: %s", host, port_number, exc)
        return ValidationMessage.error("Cannot reach license server")
    return ValidationMessage.ok("Connected to license server")


def check_database_connection(
    profile: DatabaseProfile,
    *,
    engine_factory: EngineFactory = create_engine,
) -> ValidationMessage:
    """Open and close one connection to the test report database."""
    if not profile.uri and not all(
        (
            profile.name,
            profile.db_type,
            profile.host,
            profile.port,
            profile.username,
            profile.password,
        )
    ):
        return ValidationMessage.error("Missing required field")
    if not profile.uri and profile.db_type.lower() not in {
        db_type.lower() for db_type in DATABASE_TYPES
    }:
        return ValidationMessage.error(f"Unsupported database type: {profile.db_type}")
    if not profile.username or not profile.password:
        return ValidationMessage.error("Please specify username and password")

    try:
        url = database_url(profile)
    except (ValueError, SQLAlchemyError):
        return ValidationMessage.error("Please check database settings")

    try:
        engine = engine_factory(url)
        try:
            with engine.connect():
                pass
        finally:
            engine.dispose()
    except ImportError as exc:
        return ValidationMessage.error(str(exc))
    except SQLAlchemyError as exc:
        _LOGGER.debug("Database connection failed: %s", exc)
        return ValidationMessage.error("Please check database credentials")
    return ValidationMessage.ok("Success")


def database_url(profile: DatabaseProfile) -> URL:
    """SQLAlchemy URL for the profile; a configured URI wins over individual fields."""
    if profile.uri:
        return make_url(_strip_jdbc_prefix(profile.uri)).set(
            username=profile.username, password=profile.password
        )
    return URL.create(
        database_dialect(profile.db_type),
        username=profile.username,
        password=profile.password,
        host=profile.host,
        port=int(profile.port),
        database=profile.name,
    )


def database_dialect(db_type: str) -> str:
    if "mysql" in db_type.lower():
        return "mysql"
    return "postgresql"


def _strip_jdbc_prefix(uri: str) -> str:
    if uri.lower().startswith("jdbc:"):
        return uri[len("jdbc:") :]
    return uri
