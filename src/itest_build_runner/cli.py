"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from itest_build_runner.build_requests import BuildContext, RunRequest
from itest_build_runner.configuration import (
    DEFAULT_SETTINGS_FILENAME,
    ConfigurationError,
    GlobalSettings,
    load_settings,
    save_settings,
    write_placeholder_settings,
)
from itest_build_runner.connectivity_checks import (
    ValidationMessage,
    check_database_connection,
    check_executable_path,
    check_license_server,
)
from itest_build_runner.path_resolution import ShellFlavor
from itest_build_runner.process_execution import ProcessRunner, shell_for
from itest_build_runner.run_execution import ReportCoordinator, export_itar

_PLATFORM_CHOICES = ("auto", "unix", "windows")


class CliError(Exception):
    """Custom CLI error."""


class BuildFailed(Exception):
    """Raised when a build ran but did not succeed."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="itest-build-runner")
@click.option(
    "--log-level",
    default="INFO",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Verbosity of diagnostic logging on stderr",
)
def cli(log_level: str) -> None:
    """Run Spirent iTest test cases as a build step."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


_settings_option = click.option(
    "--settings",
    "settings_path",
    required=False,
    default=DEFAULT_SETTINGS_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML global settings file",
)


def _build_options(function):
    options = (
        click.option(
            "--workspace",
            required=True,
            help="iTest workspace; ${WORKSPACE} expands to the build workspace",
        ),
        click.option(
            "--build-workspace",
            "build_workspace",
            required=True,
            type=click.Path(file_okay=False, path_type=Path),
            help="Working directory of the build",
        ),
        click.option("--build-id", "build_id", required=True, help="Unique build identifier"),
        click.option(
            "--log-file",
            "log_file",
            required=False,
            type=click.Path(dir_okay=False, path_type=Path),
            help="Build console log (default: <build-workspace>/itest-build-<id>.log)",
        ),
        click.option(
            "--platform",
            type=click.Choice(_PLATFORM_CHOICES),
            default="auto",
            show_default=True,
            help="Shell family used to run the runner",
        ),
    )
    for option in reversed(options):
        function = option(function)
    return function


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_SETTINGS_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
@click.option(
    "--from-settings",
    "source_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Copy an existing settings file in the canonical layout instead of placeholders",
)
def generate_config(output_path: str, source_path: str | None) -> None:
    """Generate a placeholder YAML settings file with guidance comments."""
    if source_path is not None:
        settings = _load_settings(source_path)
        if Path(output_path).exists():
            raise CliError(f"Settings file already exists: {Path(output_path).resolve()}")
        try:
            resolved_output = save_settings(settings, output_path)
        except OSError as exc:
            raise CliError(str(exc)) from exc
        click.echo(str(resolved_output))
        return
    try:
        resolved_output = write_placeholder_settings(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@_settings_option
@_build_options
@click.option(
    "--testcases",
    required=True,
    help="Comma-separated test case paths or project:// / file:/ URIs",
)
@click.option("--testbed", default="", help="Testbed path or URI")
@click.option("--params", default="", help="Comma-separated runner parameters (name=value)")
@click.option("--param-file", "param_file", default="", help="Parameter file path or URI")
@click.option(
    "--report/--no-report",
    "report_required",
    default=False,
    show_default=True,
    help="Generate and publish HTML test reports",
)
@click.option("--db-tag", "db_tag", default="", help="Custom tag stored with database reports")
# pylint: disable-next=too-many-arguments
def run_build(
    settings_path: str,
    workspace: str,
    build_workspace: Path,
    build_id: str,
    log_file: Path | None,
    platform: str,
    testcases: str,
    testbed: str,
    params: str,
    param_file: str,
    report_required: bool,
    db_tag: str,
) -> None:
    """Execute the test cases and judge the console log."""
    settings = _load_settings(settings_path)
    request = RunRequest.create(
        workspace_path=workspace,
        test_cases=testcases,
        testbed_path=testbed,
        parameters=params,
        param_file_path=param_file,
        report_required=report_required,
        database_tag=db_tag,
    )
    context = _build_context(build_workspace, build_id, log_file, platform)
    with context.log_path.open("a", encoding="utf-8") as log_stream:
        runner = ProcessRunner(
            shell_for(context.shell_flavor), log_stream, cwd=context.workspace_root
        )
        result = ReportCoordinator(settings, runner).perform(request, context)

    if result.outcome is not None:
        for name, verdict in result.outcome.test_verdicts.items():
            click.echo(f"{name}: {verdict.value}")
    if not result.succeeded:
        step = result.failed_step.value if result.failed_step else "unknown"
        raise BuildFailed(f"Build failed at step: {step}")
    click.echo("Build succeeded")


@cli.command(name="export-itar")
@_settings_option
@_build_options
def export_itar_archive(
    settings_path: str,
    workspace: str,
    build_workspace: Path,
    build_id: str,
    log_file: Path | None,
    platform: str,
) -> None:
    """Export the iTest workspace into an iTAR archive."""
    settings = _load_settings(settings_path)
    request = RunRequest.create(workspace_path=workspace, test_cases=())
    context = _build_context(build_workspace, build_id, log_file, platform)
    with context.log_path.open("a", encoding="utf-8") as log_stream:
        runner = ProcessRunner(
            shell_for(context.shell_flavor), log_stream, cwd=context.workspace_root
        )
        exported = export_itar(request, settings, context, runner)
    if not exported:
        raise BuildFailed("iTAR export failed")
    click.echo("iTAR export succeeded")


@cli.command(name="check-executable")
@_settings_option
def check_executable(settings_path: str) -> None:
    """Validate the configured runner executable path."""
    settings = _load_settings(settings_path)
    _report(check_executable_path(settings.runner_executable_path))


@cli.command(name="check-license-server")
@_settings_option
def check_license_server_command(settings_path: str) -> None:
    """Try to reach the configured license server."""
    settings = _load_settings(settings_path)
    _report(check_license_server(settings.license_server.host, settings.license_server.port))


@cli.command(name="check-database")
@_settings_option
def check_database(settings_path: str) -> None:
    """Try to connect to the configured test report database."""
    settings = _load_settings(settings_path)
    _report(check_database_connection(settings.database))


def _load_settings(settings_path: str) -> GlobalSettings:
    try:
        return load_settings(settings_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _build_context(
    build_workspace: Path,
    build_id: str,
    log_file: Path | None,
    platform: str,
) -> BuildContext:
    workspace_root = build_workspace.resolve()
    try:
        workspace_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CliError(f"Cannot create build workspace: {exc}") from exc
    log_path = log_file or workspace_root / f"itest-build-{build_id}.log"
    return BuildContext(
        workspace_root=workspace_root,
        build_id=build_id,
        log_path=log_path,
        shell_flavor=_shell_flavor(platform),
        log_offset=log_path.stat().st_size if log_path.exists() else 0,
    )


def _shell_flavor(platform: str) -> ShellFlavor:
    if platform == "unix":
        return ShellFlavor.POSIX
    if platform == "windows":
        return ShellFlavor.WINDOWS
    return ShellFlavor.for_platform()


def _report(message: ValidationMessage) -> None:
    if not message.is_ok:
        raise CliError(message.message)
    click.echo(message.message)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except (CliError, BuildFailed) as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
