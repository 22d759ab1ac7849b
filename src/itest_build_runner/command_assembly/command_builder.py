"""Runner command line assembly service."""

from __future__ import annotations

from collections.abc import Sequence

from itest_build_runner.build_requests import BuildContext, RunRequest
from itest_build_runner.configuration import DatabaseProfile, GlobalSettings
from itest_build_runner.path_resolution import (
    ResolvedPaths,
    ShellFlavor,
    as_file_uri,
    escape_spaces,
    resolve_paths,
    resolve_workspace,
)

from .command_models import AssembledCommand, CommandLine, CommandSegment

FLAG_LICENSE_SERVER = "--licenseServer"
# The leading space is part of the runner contract.
FLAG_ITAR = " --itar"
FLAG_EXPORT_ITAR = "--exportItar"
FLAG_TEST = "--test"
FLAG_TESTBED = "--testbed"
FLAG_PARAM = "--param"
FLAG_PARAM_FILE = "--paramfile"
FLAG_REPORT = "--report"
FLAG_DB_USER = "--trdb.user"
FLAG_DB_PASSWORD = "--trdb.password"
FLAG_DB_TAG = "--tag"
FLAG_DB_HOST = "--host"
FLAG_DB_URI = "--uri"
FLAG_DB_CATALOG = "--catalog"
FLAG_DB_TYPE = "--dbtype"
FLAG_DB_IPADDR = "--ipaddr"
FLAG_DB_PORT = "--trdb.port"

REPORT_DIRECTORY_PREFIX = "itest_reports_"
REPORT_FILENAME_PLACEHOLDER = "{tcfilename}"


class CommandBuilder:
    """Ordered builder of runner flags; quoting lives here and nowhere else."""

    def __init__(self, executable: str) -> None:
        self._segments: list[CommandSegment] = [CommandSegment(value=executable)]

    def add_flag(self, flag: str, value: str = "") -> CommandBuilder:
        self._segments.append(CommandSegment(flag=flag, value=value))
        return self

    def add_quoted(self, flag: str, value: str) -> CommandBuilder:
        self._segments.append(
            CommandSegment(flag=flag, value=_strip_quotes(value), quoted=True)
        )
        return self

    def build(self) -> CommandLine:
        return CommandLine(segments=tuple(self._segments))


def report_directory_name(build_id: str) -> str:
    """Deterministic per-build report directory name."""
    return f"{REPORT_DIRECTORY_PREFIX}{build_id}"


def report_directory_path(context: BuildContext) -> str:
    """Report directory inside the build workspace, with forward slashes."""
    workspace = context.workspace_text.replace("\\", "/").rstrip("/")
    return f"{workspace}/{report_directory_name(context.build_id)}"


def report_path_template(context: BuildContext) -> str:
    """`--report` value; the runner substitutes `{tcfilename}` per test case."""
    directory_uri = as_file_uri(report_directory_path(context))
    template = f"{directory_uri}/{REPORT_FILENAME_PLACEHOLDER}.html"
    return escape_spaces(template, context.shell_flavor)


def assemble_run_command(
    request: RunRequest,
    settings: GlobalSettings,
    context: BuildContext,
) -> AssembledCommand:
    """Assemble the full runner command for one build."""
    paths = resolve_paths(
        workspace_path=request.workspace_path,
        test_case_paths=request.test_case_paths,
        testbed_path=request.testbed_path,
        param_file_path=request.param_file_path,
        workspace_root=context.workspace_text,
        flavor=context.shell_flavor,
    )
    builder = CommandBuilder(settings.runner_command)
    builder.add_flag(FLAG_LICENSE_SERVER, settings.license_server.address)
    builder.add_quoted(FLAG_ITAR, paths.workspace)
    for test_case in paths.test_cases:
        builder.add_quoted(FLAG_TEST, test_case)

    _add_execution_options(builder, paths, request.parameters)

    if request.report_required:
        builder.add_flag(FLAG_REPORT, report_path_template(context))
        _add_database_options(
            builder,
            settings.database,
            license_host=settings.license_server.host,
            tag=request.database_tag,
        )

    return AssembledCommand(
        command_line=builder.build(),
        test_case_names=paths.test_case_names,
        test_case_uris=paths.test_case_uris,
    )


def build_export_command(
    request: RunRequest,
    settings: GlobalSettings,
    context: BuildContext,
) -> CommandLine:
    """Command that exports the iTest workspace into an iTAR archive."""
    builder = CommandBuilder(settings.runner_command)
    builder.add_quoted(FLAG_ITAR, resolve_workspace(request.workspace_path, context.workspace_text))
    builder.add_flag(FLAG_EXPORT_ITAR)
    return builder.build()


def build_report_directory_command(context: BuildContext) -> str:
    """Shell command creating the per-build report directory; safe to repeat."""
    directory = _strip_quotes(report_directory_path(context))
    if context.shell_flavor is ShellFlavor.WINDOWS:
        return f'if not exist "{directory}" mkdir "{directory}"'
    return f'mkdir -p "{directory}"'


def split_parameters(parameters: Sequence[str]) -> tuple[str, ...]:
    """Trim parameters, splitting comma-joined entries and dropping blanks."""
    values: list[str] = []
    for entry in parameters:
        for item in entry.split(","):
            stripped = item.strip()
            if stripped:
                values.append(stripped)
    return tuple(values)


def _add_execution_options(
    builder: CommandBuilder,
    paths: ResolvedPaths,
    parameters: Sequence[str],
) -> None:
    if paths.testbed:
        builder.add_quoted(FLAG_TESTBED, paths.testbed)
    for parameter in split_parameters(parameters):
        builder.add_quoted(FLAG_PARAM, parameter)
    if paths.param_file:
        builder.add_quoted(FLAG_PARAM_FILE, paths.param_file)


def _add_database_options(
    builder: CommandBuilder,
    database: DatabaseProfile,
    *,
    license_host: str,
    tag: str,
) -> None:
    if not database.is_configured:
        return
    builder.add_flag(FLAG_DB_USER, database.username)
    builder.add_flag(FLAG_DB_PASSWORD, database.password)
    if tag:
        builder.add_flag(FLAG_DB_TAG, tag)
    builder.add_flag(FLAG_DB_HOST, license_host)
    if database.uses_uri:
        builder.add_flag(FLAG_DB_URI, database.uri)
        return
    builder.add_flag(FLAG_DB_CATALOG, database.name)
    builder.add_flag(FLAG_DB_TYPE, database.db_type)
    builder.add_flag(FLAG_DB_IPADDR, database.host)
    builder.add_flag(FLAG_DB_PORT, database.port)


def _strip_quotes(value: str) -> str:
    return value.replace('"', "")
