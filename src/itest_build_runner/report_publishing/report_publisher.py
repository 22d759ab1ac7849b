"""Report index workbook publisher."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .report_models import ReportDescriptor

REPORT_INDEX_FILENAME = "reports.xlsx"
REPORTS_SHEET_NAME = "Reports"
RUN_INFO_SHEET_NAME = "RunInfo"
REPORT_COLUMNS = ("Title", "Directory", "File", "Keep all", "Always show", "Present")


class ReportPublishingError(Exception):
    """Raised when report descriptors cannot be published."""


class ReportPublisher(Protocol):  # pylint: disable=too-few-public-methods
    """Collaborator receiving the report descriptors of one build."""

    def publish(self, descriptors: Sequence[ReportDescriptor]) -> None: ...


class WorkbookReportPublisher:  # pylint: disable=too-few-public-methods
    """Publishes descriptors as a `reports.xlsx` index next to the HTML reports."""

    def __init__(self, build_id: str) -> None:
        self._build_id = build_id

    def publish(self, descriptors: Sequence[ReportDescriptor]) -> None:
        for directory, group in _group_by_directory(descriptors).items():
            try:
                write_report_index(Path(directory), group, build_id=self._build_id)
            except OSError as exc:
                raise ReportPublishingError(
                    f"Failed to publish reports in {directory}: {exc}"
                ) from exc


def write_report_index(
    directory: Path,
    descriptors: Sequence[ReportDescriptor],
    *,
    build_id: str,
) -> Path:
    """Write the index workbook for descriptors sharing one directory."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = REPORTS_SHEET_NAME

    for column_index, name in enumerate(REPORT_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = 18

    for row_index, descriptor in enumerate(descriptors, start=2):
        present = (directory / descriptor.filename).exists()
        row = (
            descriptor.title,
            descriptor.directory,
            descriptor.filename,
            descriptor.keep_all,
            descriptor.always_show,
            present,
        )
        for column_index, value in enumerate(row, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    _write_run_info_sheet(workbook, build_id=build_id, report_count=len(descriptors))

    output = directory / REPORT_INDEX_FILENAME
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output


def _write_run_info_sheet(workbook: Workbook, *, build_id: str, report_count: int) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = [
        ("build_id", build_id),
        ("published_at", datetime.now(UTC).isoformat()),
        ("report_count", report_count),
    ]
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _group_by_directory(
    descriptors: Sequence[ReportDescriptor],
) -> dict[str, list[ReportDescriptor]]:
    grouped: dict[str, list[ReportDescriptor]] = {}
    for descriptor in descriptors:
        grouped.setdefault(descriptor.directory, []).append(descriptor)
    return grouped
