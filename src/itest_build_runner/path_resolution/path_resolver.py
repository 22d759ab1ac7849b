"""Workspace and URI path resolution service.

Users address runner inputs in two ways: relative to the build workspace via
the `${WORKSPACE}` placeholder, or as runner URIs (`project://...` for paths
inside the iTest project, `file:/...` for absolute files). Anything else is
taken as a literal absolute file path and turned into a `file:/` URI.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PurePosixPath

from .path_models import ResolvedPaths
from .shell_flavors import ShellFlavor, escape_spaces

WORKSPACE_PLACEHOLDER = "${WORKSPACE}"
URI_PROJECT = "project://"
URI_FILE = "file:/"


def resolve(raw_path: str, workspace_root: str, flavor: ShellFlavor) -> str:
    """Resolve a testbed or parameter-file path into a shell-safe runner reference.

    Returns an empty string for empty input; the caller then omits the flag.
    """
    if not raw_path:
        return ""
    return escape_spaces(_expand(raw_path, workspace_root), flavor)


def resolve_test_case(raw_path: str, workspace_root: str, flavor: ShellFlavor) -> str:
    """Resolve a test case path; workspace expansions also become `file:/` URIs."""
    return escape_spaces(to_test_case_uri(raw_path, workspace_root), flavor)


def to_test_case_uri(raw_path: str, workspace_root: str) -> str:
    """Return the unescaped runner URI of one test case."""
    if not raw_path:
        return ""
    if raw_path.startswith(WORKSPACE_PLACEHOLDER):
        return as_file_uri(_expand(raw_path, workspace_root))
    return _expand(raw_path, workspace_root)


def as_file_uri(path: str) -> str:
    """Turn an absolute local path into a `file:/` URI with forward slashes."""
    return URI_FILE + path.replace("\\", "/").lstrip("/")


def resolve_workspace(raw_path: str, workspace_root: str) -> str:
    """Resolve the iTest workspace argument.

    Only the placeholder is expanded; any other value is passed through verbatim
    because the workspace is quoted on the command line rather than sent as a URI.
    """
    if raw_path == WORKSPACE_PLACEHOLDER:
        return workspace_root
    if raw_path.startswith(WORKSPACE_PLACEHOLDER):
        return workspace_root + raw_path[len(WORKSPACE_PLACEHOLDER) :]
    return raw_path


def derive_test_case_name(raw_path: str) -> str:
    """Final path segment of a test case without its extension."""
    segment = PurePosixPath(raw_path.strip().replace("\\", "/").rstrip("/")).name
    stem, dot, _ = segment.rpartition(".")
    if dot and stem:
        return stem
    return segment


def _expand(raw_path: str, workspace_root: str) -> str:
    if raw_path == WORKSPACE_PLACEHOLDER:
        return workspace_root
    if raw_path.startswith(WORKSPACE_PLACEHOLDER):
        return workspace_root + raw_path[len(WORKSPACE_PLACEHOLDER) :]
    if raw_path.startswith((URI_PROJECT, URI_FILE)):
        return raw_path
    return f"{URI_FILE}{raw_path}"


def resolve_paths(  # pylint: disable=too-many-arguments
    *,
    workspace_path: str,
    test_case_paths: Sequence[str],
    testbed_path: str,
    param_file_path: str,
    workspace_root: str,
    flavor: ShellFlavor,
) -> ResolvedPaths:
    """Resolve every path of one run request; blank test cases are dropped."""
    names: list[str] = []
    references: list[str] = []
    uris: list[str] = []
    for raw_test_case in test_case_paths:
        test_case = raw_test_case.strip()
        if not test_case:
            continue
        names.append(derive_test_case_name(test_case))
        uris.append(to_test_case_uri(test_case, workspace_root))
        references.append(resolve_test_case(test_case, workspace_root, flavor))
    return ResolvedPaths(
        workspace=resolve_workspace(workspace_path, workspace_root),
        test_cases=tuple(references),
        test_case_uris=tuple(uris),
        test_case_names=tuple(names),
        testbed=resolve(testbed_path, workspace_root, flavor),
        param_file=resolve(param_file_path, workspace_root, flavor),
    )
