"""Single-pass console log scanner."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from .scan_outcomes import ExecutionOutcome, ScanState, Verdict
from .scan_rules import (
    EXECUTION_STATUS_PATTERN,
    PASS_STATUS,
    VALIDITY_RULES,
    VERDICT_RULES,
    RuleSet,
)

_LOGGER = logging.getLogger(__name__)


class LogScanner:
    """Consumes one console log, line by line, against a rule set.

    A failure trigger moves the scanner to `DECIDED` immediately and nothing
    later can undo it. The rest of the log is still read so every
    `Execution status` line contributes a per-test verdict. Reaching the end
    without a trigger decides `Pass`. A scanner scans exactly one log.
    """

    def __init__(self, rule_set: RuleSet, test_case_names: Sequence[str] = ()) -> None:
        self._rule_set = rule_set
        self._test_case_names = tuple(test_case_names)
        self._state = ScanState.SCANNING
        self._succeeded: bool | None = None
        self._failure_line: str | None = None
        self._verdicts: dict[str, Verdict] = {}
        self._status_count = 0
        self._used = False

    @property
    def state(self) -> ScanState:
        return self._state

    def scan(self, lines: Iterable[str]) -> ExecutionOutcome:
        if self._used:
            raise RuntimeError("LogScanner instances scan exactly one log.")
        self._used = True
        for raw_line in lines:
            self._consume(raw_line.strip())
        if self._state is ScanState.SCANNING:
            self._decide(succeeded=True)
        return ExecutionOutcome(
            succeeded=bool(self._succeeded),
            test_verdicts=dict(self._verdicts),
            failure_line=self._failure_line,
        )

    def _consume(self, line: str) -> None:
        rule = self._rule_set.first_trigger(line)
        if rule is not None:
            self._fail(line)
            return
        if not self._rule_set.judge_execution_status:
            return
        match = EXECUTION_STATUS_PATTERN.search(line)
        if match is None:
            return
        passed = match.group(1).lower() == PASS_STATUS
        self._record_verdict(Verdict.PASS if passed else Verdict.FAIL)
        if not passed:
            self._fail(line)

    def _record_verdict(self, verdict: Verdict) -> None:
        index = self._status_count
        self._status_count += 1
        if index < len(self._test_case_names):
            name = self._test_case_names[index]
        else:
            name = f"test-{index + 1}"
        if self._verdicts.get(name) is Verdict.FAIL:
            return
        self._verdicts[name] = verdict

    def _fail(self, line: str) -> None:
        if self._state is ScanState.DECIDED:
            return
        _LOGGER.info("Log %s check failed on: %s", self._rule_set.name, line)
        self._failure_line = line
        self._decide(succeeded=False)

    def _decide(self, *, succeeded: bool) -> None:
        self._succeeded = succeeded
        self._state = ScanState.DECIDED


def scan(
    lines: Iterable[str],
    rule_set: RuleSet = VERDICT_RULES,
    test_case_names: Sequence[str] = (),
) -> ExecutionOutcome:
    """Scan a complete log with a fresh scanner."""
    return LogScanner(rule_set, test_case_names).scan(lines)


def scan_log_file(
    log_path: Path | str,
    rule_set: RuleSet = VERDICT_RULES,
    test_case_names: Sequence[str] = (),
    *,
    offset: int = 0,
) -> ExecutionOutcome:
    """Scan a build log file from byte `offset`; a missing or unreadable log is a failure."""
    path = Path(log_path)
    try:
        with path.open("rb") as handle:
            handle.seek(offset)
            lines = (raw.decode("utf-8", errors="replace") for raw in handle)
            return scan(lines, rule_set, test_case_names)
    except OSError as exc:
        _LOGGER.error("Cannot read build log %s: %s", path, exc)
        return ExecutionOutcome.unreadable(f"Cannot read build log: {path}")


def is_log_valid(lines: Iterable[str]) -> bool:
    """True when no hard-failure marker appears anywhere in the log."""
    return scan(lines, VALIDITY_RULES).succeeded


def has_test_passed(lines: Iterable[str]) -> bool:
    """True when the log shows no failure marker and no non-passing status."""
    return scan(lines, VERDICT_RULES).succeeded
