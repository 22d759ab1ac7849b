"""Console log rule sets for the runner's informal text contract."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

EXECUTION_STATUS_PATTERN = re.compile(r"Execution status:\s+(\w+)", re.ASCII)
PASS_STATUS = "pass"


class RuleMatch(str, Enum):
    """How a rule text is compared against a log line."""

    CONTAINS = "contains"
    STARTS_WITH = "starts_with"


@dataclass(frozen=True)
class ScanRule:
    """A log substring that marks the whole run as failed."""

    text: str
    match: RuleMatch = RuleMatch.CONTAINS

    def triggers(self, line: str) -> bool:
        if self.match is RuleMatch.STARTS_WITH:
            return line.startswith(self.text)
        return self.text in line


@dataclass(frozen=True)
class RuleSet:
    """Failure triggers plus whether `Execution status` lines are judged."""

    name: str
    failure_rules: tuple[ScanRule, ...]
    judge_execution_status: bool = False

    def first_trigger(self, line: str) -> ScanRule | None:
        for rule in self.failure_rules:
            if rule.triggers(line):
                return rule
        return None


# Gate for artifact export: any mention of "Error" invalidates the log.
VALIDITY_RULES = RuleSet(
    name="validity",
    failure_rules=(
        ScanRule("Error"),
        ScanRule("cannot find the path"),
        ScanRule("valid directory"),
        ScanRule("No project to be exported"),
        ScanRule("Failed to generate report"),
    ),
)

# Test verdict: "Error" only counts at the start of a trimmed line.
VERDICT_RULES = RuleSet(
    name="verdict",
    failure_rules=(
        ScanRule("Error", RuleMatch.STARTS_WITH),
        ScanRule("cannot find the path"),
        ScanRule("valid directory"),
        ScanRule("Failed to generate report"),
    ),
    judge_execution_status=True,
)
