"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from itest_build_runner.log_analysis import ExecutionOutcome
from itest_build_runner.report_publishing import ReportDescriptor


class CommandRunner(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that runs a command line and reports whether it completed."""

    def run(self, command_line: str) -> bool: ...


class BuildStep(str, Enum):
    """Coordinator steps, in execution order."""

    REPORT_DIRECTORY = "report-directory"
    EXECUTE = "execute"
    PUBLISH_REPORTS = "publish-reports"
    VERDICT = "verdict"


@dataclass(frozen=True)
class BuildResult:
    """Output contract for one performed build."""

    succeeded: bool
    command_line: str | None = None
    outcome: ExecutionOutcome | None = None
    reports: tuple[ReportDescriptor, ...] = ()
    failed_step: BuildStep | None = None
