"""Report publishing domain exports."""

from .report_models import REPORT_TITLE_PREFIX, ReportDescriptor, build_report_descriptors
from .report_publisher import (
    REPORT_INDEX_FILENAME,
    ReportPublisher,
    ReportPublishingError,
    WorkbookReportPublisher,
    write_report_index,
)

__all__ = [
    "REPORT_TITLE_PREFIX",
    "ReportDescriptor",
    "build_report_descriptors",
    "REPORT_INDEX_FILENAME",
    "ReportPublisher",
    "ReportPublishingError",
    "WorkbookReportPublisher",
    "write_report_index",
]
