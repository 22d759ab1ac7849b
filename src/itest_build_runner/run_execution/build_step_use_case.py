"""Build step use-case service."""

from __future__ import annotations

import logging

from itest_build_runner.build_requests import BuildContext, RunRequest
from itest_build_runner.command_assembly import (
    assemble_run_command,
    build_export_command,
    build_report_directory_command,
    report_directory_path,
)
from itest_build_runner.configuration import GlobalSettings
from itest_build_runner.log_analysis import VALIDITY_RULES, VERDICT_RULES, scan_log_file
from itest_build_runner.report_publishing import (
    ReportDescriptor,
    ReportPublisher,
    ReportPublishingError,
    WorkbookReportPublisher,
    build_report_descriptors,
)

from .run_contracts import BuildResult, BuildStep, CommandRunner

_LOGGER = logging.getLogger(__name__)


class ReportCoordinator:
    """Sequences one build: report directory, run, publish, verdict.

    Each step gates the next. The first failing step ends the build; nothing
    created by earlier steps is rolled back.
    """

    def __init__(
        self,
        settings: GlobalSettings,
        command_runner: CommandRunner,
        publisher: ReportPublisher | None = None,
    ) -> None:
        self._settings = settings
        self._runner = command_runner
        self._publisher = publisher

    def perform(self, request: RunRequest, context: BuildContext) -> BuildResult:
        if request.report_required:
            _LOGGER.info("Preparing report directory %s", report_directory_path(context))
            if not self._runner.run(build_report_directory_command(context)):
                return _failed(BuildStep.REPORT_DIRECTORY)

        assembled = assemble_run_command(request, self._settings, context)
        command_line = assembled.command_line.render()
        _LOGGER.info("Executing %d test case(s)", len(assembled.test_case_names))
        if not self._runner.run(command_line):
            return _failed(BuildStep.EXECUTE, command_line=command_line)

        reports: tuple[ReportDescriptor, ...] = ()
        if request.report_required:
            reports = build_report_descriptors(
                assembled.test_case_names, report_directory_path(context)
            )
            publisher = self._publisher or WorkbookReportPublisher(context.build_id)
            try:
                publisher.publish(reports)
            except ReportPublishingError as exc:
                _LOGGER.error("%s", exc)
                return _failed(BuildStep.PUBLISH_REPORTS, command_line=command_line)

        outcome = scan_log_file(
            context.log_path,
            VERDICT_RULES,
            assembled.test_case_names,
            offset=context.log_offset,
        )
        if not outcome.succeeded:
            _LOGGER.info("Build %s failed: %s", context.build_id, outcome.failure_line)
        return BuildResult(
            succeeded=outcome.succeeded,
            command_line=command_line,
            outcome=outcome,
            reports=reports,
            failed_step=None if outcome.succeeded else BuildStep.VERDICT,
        )


def export_itar(
    request: RunRequest,
    settings: GlobalSettings,
    context: BuildContext,
    command_runner: CommandRunner,
) -> bool:
    """Export the iTest workspace to an iTAR archive; valid only if the log stays clean."""
    command_line = build_export_command(request, settings, context).render()
    if not command_runner.run(command_line):
        return False
    outcome = scan_log_file(context.log_path, VALIDITY_RULES, offset=context.log_offset)
    if not outcome.succeeded:
        _LOGGER.error("iTAR export failed: %s", outcome.failure_line)
    return outcome.succeeded


def _failed(step: BuildStep, *, command_line: str | None = None) -> BuildResult:
    _LOGGER.error("Build step '%s' failed", step.value)
    return BuildResult(succeeded=False, command_line=command_line, failed_step=step)
