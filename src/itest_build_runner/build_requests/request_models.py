"""Build request entities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from itest_build_runner.path_resolution import ShellFlavor


@dataclass(frozen=True)
class RunRequest:  # pylint: disable=too-many-instance-attributes
    """Declarative test-run request owned by one build."""

    workspace_path: str
    test_case_paths: tuple[str, ...]
    testbed_path: str = ""
    parameters: tuple[str, ...] = ()
    param_file_path: str = ""
    report_required: bool = False
    database_tag: str = ""

    @classmethod
    def create(  # pylint: disable=too-many-arguments
        cls,
        *,
        workspace_path: str,
        test_cases: str | Iterable[str],
        testbed_path: str = "",
        parameters: str | Iterable[str] = (),
        param_file_path: str = "",
        report_required: bool = False,
        database_tag: str = "",
    ) -> RunRequest:
        """Build a request from form-style input; comma-separated strings are split."""
        return cls(
            workspace_path=workspace_path.strip(),
            test_case_paths=_split_entries(test_cases),
            testbed_path=testbed_path.strip(),
            parameters=_split_entries(parameters),
            param_file_path=param_file_path.strip(),
            report_required=report_required,
            database_tag=database_tag.strip(),
        )


@dataclass(frozen=True)
class BuildContext:
    """What the host knows about the build being performed.

    `log_offset` is the size of the build log before this build wrote to it;
    only output after it is judged.
    """

    workspace_root: Path
    build_id: str
    log_path: Path
    shell_flavor: ShellFlavor
    log_offset: int = 0

    @property
    def workspace_text(self) -> str:
        return str(self.workspace_root)


def _split_entries(value: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(value.split(",")) if value.strip() else ()
    return tuple(value)
