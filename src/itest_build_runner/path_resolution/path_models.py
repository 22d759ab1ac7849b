"""Path resolution entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedPaths:
    """Runner references derived for one build; recomputed per run, never persisted.

    `test_cases` are shell-escaped; `test_case_uris` hold the same references
    unescaped, parallel to `test_case_names`.
    """

    workspace: str
    test_cases: tuple[str, ...] = ()
    test_case_uris: tuple[str, ...] = ()
    test_case_names: tuple[str, ...] = ()
    testbed: str = ""
    param_file: str = ""
