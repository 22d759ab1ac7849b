"""Build request domain exports."""

from .request_models import BuildContext, RunRequest

__all__ = ["RunRequest", "BuildContext"]
