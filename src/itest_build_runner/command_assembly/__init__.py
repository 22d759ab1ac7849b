"""Command assembly domain exports."""

from .command_builder import (
    REPORT_DIRECTORY_PREFIX,
    CommandBuilder,
    assemble_run_command,
    build_export_command,
    build_report_directory_command,
    report_directory_name,
    report_directory_path,
    report_path_template,
    split_parameters,
)
from .command_models import AssembledCommand, CommandLine, CommandSegment

__all__ = [
    "AssembledCommand",
    "CommandLine",
    "CommandSegment",
    "CommandBuilder",
    "REPORT_DIRECTORY_PREFIX",
    "assemble_run_command",
    "build_export_command",
    "build_report_directory_command",
    "report_directory_name",
    "report_directory_path",
    "report_path_template",
    "split_parameters",
]
