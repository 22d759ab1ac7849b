"""Log analysis domain exports."""

from .log_analyzer import LogScanner, has_test_passed, is_log_valid, scan, scan_log_file
from .scan_outcomes import ExecutionOutcome, ScanState, Verdict
from .scan_rules import (
    EXECUTION_STATUS_PATTERN,
    VALIDITY_RULES,
    VERDICT_RULES,
    RuleMatch,
    RuleSet,
    ScanRule,
)

__all__ = [
    "ExecutionOutcome",
    "ScanState",
    "Verdict",
    "RuleMatch",
    "RuleSet",
    "ScanRule",
    "EXECUTION_STATUS_PATTERN",
    "VALIDITY_RULES",
    "VERDICT_RULES",
    "LogScanner",
    "scan",
    "scan_log_file",
    "is_log_valid",
    "has_test_passed",
]
