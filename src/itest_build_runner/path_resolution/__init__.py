"""Path resolution domain exports."""

from .path_models import ResolvedPaths
from .path_resolver import (
    URI_FILE,
    URI_PROJECT,
    WORKSPACE_PLACEHOLDER,
    as_file_uri,
    derive_test_case_name,
    resolve,
    resolve_paths,
    resolve_test_case,
    resolve_workspace,
    to_test_case_uri,
)
from .shell_flavors import ShellFlavor, escape_spaces

__all__ = [
    "ResolvedPaths",
    "ShellFlavor",
    "escape_spaces",
    "WORKSPACE_PLACEHOLDER",
    "URI_PROJECT",
    "URI_FILE",
    "resolve",
    "resolve_paths",
    "resolve_test_case",
    "resolve_workspace",
    "to_test_case_uri",
    "as_file_uri",
    "derive_test_case_name",
]
