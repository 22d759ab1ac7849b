"""Command assembly entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandSegment:
    """One flag and/or value of the runner command line."""

    flag: str = ""
    value: str = ""
    quoted: bool = False

    def render(self) -> str:
        value = f'"{self.value}"' if self.quoted else self.value
        if not self.flag:
            return value
        if not value:
            return self.flag
        return f"{self.flag} {value}"


@dataclass(frozen=True)
class CommandLine:
    """Ordered runner command line, rendered once into a single string."""

    segments: tuple[CommandSegment, ...]

    def render(self) -> str:
        return " ".join(segment.render() for segment in self.segments)

    def flags(self) -> tuple[str, ...]:
        return tuple(segment.flag.strip() for segment in self.segments if segment.flag)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class AssembledCommand:
    """Command line plus the per-test data needed after the run."""

    command_line: CommandLine
    test_case_names: tuple[str, ...]
    test_case_uris: tuple[str, ...]
