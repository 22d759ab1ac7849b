"""Log analysis entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class Verdict(str, Enum):
    """Pass/fail verdict of one test execution or of the whole run."""

    PASS = "Pass"
    FAIL = "Fail"


class ScanState(str, Enum):
    """Scanner state; `DECIDED` is terminal."""

    SCANNING = "scanning"
    DECIDED = "decided"


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of scanning one complete console log."""

    succeeded: bool
    test_verdicts: Mapping[str, Verdict] = field(default_factory=dict)
    failure_line: str | None = None

    @property
    def verdict(self) -> Verdict:
        return Verdict.PASS if self.succeeded else Verdict.FAIL

    @staticmethod
    def unreadable(reason: str) -> ExecutionOutcome:
        return ExecutionOutcome(succeeded=False, test_verdicts={}, failure_line=reason)
