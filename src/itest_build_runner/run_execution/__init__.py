"""Run execution domain exports."""

from .build_step_use_case import ReportCoordinator, export_itar
from .run_contracts import BuildResult, BuildStep, CommandRunner

__all__ = [
    "BuildResult",
    "BuildStep",
    "CommandRunner",
    "ReportCoordinator",
    "export_itar",
]
