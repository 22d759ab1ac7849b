"""Report publishing tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from itest_build_runner.report_publishing import (
    REPORT_INDEX_FILENAME,
    ReportPublishingError,
    WorkbookReportPublisher,
    build_report_descriptors,
)
from openpyxl import load_workbook


def test_build_report_descriptors_one_per_test_case() -> None:
    descriptors = build_report_descriptors(("login", "search"), "/ws/itest_reports_7")

    assert [descriptor.title for descriptor in descriptors] == [
        "Spirent iTest Report-login",
        "Spirent iTest Report-search",
    ]
    assert [descriptor.filename for descriptor in descriptors] == ["login.html", "search.html"]
    assert all(descriptor.directory == "/ws/itest_reports_7" for descriptor in descriptors)
    assert all(descriptor.keep_all and descriptor.always_show for descriptor in descriptors)


def test_workbook_publisher_writes_index_next_to_reports(tmp_path: Path) -> None:
    report_dir = tmp_path / "itest_reports_7"
    report_dir.mkdir()
    (report_dir / "login.html").write_text("<html></html>", encoding="utf-8")
    descriptors = build_report_descriptors(("login", "search"), str(report_dir))

    WorkbookReportPublisher(build_id="7").publish(descriptors)

    workbook = load_workbook(report_dir / REPORT_INDEX_FILENAME)
    sheet = workbook["Reports"]
    assert [cell.value for cell in sheet[1]] == [
        "Title",
        "Directory",
        "File",
        "Keep all",
        "Always show",
        "Present",
    ]
    assert sheet.cell(row=2, column=1).value == "Spirent iTest Report-login"
    assert sheet.cell(row=2, column=6).value is True
    assert sheet.cell(row=3, column=3).value == "search.html"
    assert sheet.cell(row=3, column=6).value is False
    run_info = workbook["RunInfo"]
    assert run_info.cell(row=1, column=2).value == "7"
    assert run_info.cell(row=3, column=2).value == 2


def test_workbook_publisher_wraps_filesystem_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")
    descriptors = build_report_descriptors(("login",), str(blocker))

    with pytest.raises(ReportPublishingError):
        WorkbookReportPublisher(build_id="7").publish(descriptors)


def test_publishing_nothing_writes_nothing(tmp_path: Path) -> None:
    WorkbookReportPublisher(build_id="7").publish(())

    assert list(tmp_path.iterdir()) == []
