"""Process execution domain exports."""

from .process_runner import ProcessRunner, normalize_separators
from .shell_wrappers import BatchShell, PosixShell, ShellWrapper, shell_for

__all__ = [
    "ProcessRunner",
    "normalize_separators",
    "ShellWrapper",
    "PosixShell",
    "BatchShell",
    "shell_for",
]
