"""Report publishing entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

REPORT_TITLE_PREFIX = "Spirent iTest Report"
REPORT_FILE_SUFFIX = ".html"


@dataclass(frozen=True)
class ReportDescriptor:
    """One published HTML report produced by the runner for a test case."""

    title: str
    directory: str
    filename: str
    keep_all: bool = True
    always_show: bool = True


def build_report_descriptors(
    test_case_names: Sequence[str], report_directory: str
) -> tuple[ReportDescriptor, ...]:
    """One descriptor per test case, in test case order."""
    return tuple(
        ReportDescriptor(
            title=f"{REPORT_TITLE_PREFIX}-{name}",
            directory=report_directory,
            filename=f"{name}{REPORT_FILE_SUFFIX}",
            keep_all=True,
            always_show=True,
        )
        for name in test_case_names
    )
