"""Shell flavor entities."""

from __future__ import annotations

import sys
from enum import Enum


class ShellFlavor(str, Enum):
    """Family of shell the runner command is executed through."""

    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def space_escape(self) -> str:
        """Percent-encoded space for this shell.

        Batch scripts expand `%` once more, so the escape is doubled there.
        """
        if self is ShellFlavor.WINDOWS:
            return "%%20"
        return "%20"

    @classmethod
    def for_platform(cls, platform: str | None = None) -> ShellFlavor:
        """Pick the flavor for a `sys.platform` value (current interpreter by default)."""
        name = sys.platform if platform is None else platform
        if name.startswith(("win", "cygwin")):
            return cls.WINDOWS
        return cls.POSIX


def escape_spaces(value: str, flavor: ShellFlavor) -> str:
    """Replace every space with the flavor's percent-encoded escape."""
    return value.replace(" ", flavor.space_escape)
