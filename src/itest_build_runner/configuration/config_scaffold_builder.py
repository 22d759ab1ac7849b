"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from .runtime_settings import DATABASE_TYPES

DEFAULT_SETTINGS_FILENAME = "itest-settings.yaml"

_SETTINGS_SCAFFOLD_TEMPLATE = """# Global settings template for itest-build-runner.
# Replace every <REQUIRED> placeholder before running a build.
# Leave optional values empty ("") when your setup does not need them.

runner:
  # Full path to the itestrt executable. Empty means "itestrt" from PATH.
  executable_path: ""

license_server:
  host: "<REQUIRED>"
  # Empty means the runner default; probes fall back to 27000.
  port: ""

database:
  # Test report database. Leave username empty to disable database flags.
  # Either set uri, or set host/port/name/type. uri wins when both are set.
  uri: ""
  host: ""
  port: ""
  name: ""
  # One of: {database_types}
  type: "MySQL"
  username: ""
  password: ""
"""


def build_placeholder_settings() -> str:
    """Build a YAML settings template with placeholders and inline guidance."""
    return _SETTINGS_SCAFFOLD_TEMPLATE.format(database_types=", ".join(DATABASE_TYPES))


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the placeholder settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
