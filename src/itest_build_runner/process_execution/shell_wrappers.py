"""Platform shell wrappers used to execute a command line as a script."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from itest_build_runner.path_resolution import ShellFlavor


class ShellWrapper(Protocol):
    """Turns a command line into a script and the script into an invocation."""

    script_suffix: str

    def script_text(self, command_line: str) -> str: ...

    def render(self, script_path: Path) -> tuple[str, ...]: ...


class PosixShell:
    """`sh -xe` wrapper for Unix-like agents."""

    script_suffix = ".sh"

    def __init__(self, interpreter: str = "sh") -> None:
        self._interpreter = interpreter

    def script_text(self, command_line: str) -> str:
        return f"{command_line}\n"

    def render(self, script_path: Path) -> tuple[str, ...]:
        return (self._interpreter, "-xe", str(script_path))


class BatchShell:
    """`cmd /c call` wrapper for Windows-like agents."""

    script_suffix = ".bat"

    def script_text(self, command_line: str) -> str:
        return f"{command_line}\r\nexit %ERRORLEVEL%\r\n"

    def render(self, script_path: Path) -> tuple[str, ...]:
        return ("cmd", "/c", "call", str(script_path))


def shell_for(flavor: ShellFlavor) -> ShellWrapper:
    if flavor is ShellFlavor.WINDOWS:
        return BatchShell()
    return PosixShell()
