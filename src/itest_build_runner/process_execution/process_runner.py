"""Runner process execution service."""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import TextIO

from .shell_wrappers import ShellWrapper

_LOGGER = logging.getLogger(__name__)


def normalize_separators(command_line: str) -> str:
    """Use forward slashes only; mixed separators break quoted arguments on batch shells."""
    return command_line.replace("\\", "/")


class ProcessRunner:
    """Executes command lines through a platform shell and streams output to the build log.

    `run` reports whether the process ran to completion, not whether the tests
    passed: a non-zero exit code still counts as a completed run. The log is
    judged afterwards.
    """

    def __init__(
        self,
        shell: ShellWrapper,
        log_stream: TextIO,
        *,
        cwd: Path | None = None,
    ) -> None:
        self._shell = shell
        self._log_stream = log_stream
        self._cwd = cwd

    def run(self, command_line: str) -> bool:
        uniform_command = normalize_separators(command_line)
        try:
            script_path = self._write_script(uniform_command)
        except OSError:
            _LOGGER.exception("Could not write command script")
            return False
        try:
            return self._execute(script_path)
        finally:
            script_path.unlink(missing_ok=True)

    def _write_script(self, command_line: str) -> Path:
        descriptor, name = tempfile.mkstemp(
            prefix="itest_build_", suffix=self._shell.script_suffix, dir=self._cwd
        )
        with os.fdopen(descriptor, "w", encoding="utf-8", newline="") as handle:
            handle.write(self._shell.script_text(command_line))
        return Path(name)

    def _execute(self, script_path: Path) -> bool:
        invocation = self._shell.render(script_path)
        _LOGGER.info("Running %s", " ".join(invocation))
        try:
            process = subprocess.Popen(  # pylint: disable=consider-using-with
                list(invocation),
                cwd=self._cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except (OSError, subprocess.SubprocessError):
            _LOGGER.exception("Could not start %s", invocation[0])
            return False

        try:
            self._stream_output(process)
            exit_code = process.wait()
        except KeyboardInterrupt:
            process.terminate()
            process.wait()
            _LOGGER.warning("Command interrupted, build aborted")
            return False
        except OSError:
            process.kill()
            process.wait()
            _LOGGER.exception("Lost connection to the running command")
            return False

        _LOGGER.info("Command finished with exit code %s", exit_code)
        return True

    def _stream_output(self, process: subprocess.Popen[str]) -> None:
        if process.stdout is None:
            return
        with process.stdout:
            for line in process.stdout:
                self._log_stream.write(line)
                self._log_stream.flush()
                _LOGGER.debug("%s", line.rstrip("\n"))
