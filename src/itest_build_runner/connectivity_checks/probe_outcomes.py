"""Settings validation entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationKind(str, Enum):
    """Outcome kind of a settings probe."""

    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class ValidationMessage:
    """Message shown next to a settings field."""

    kind: ValidationKind
    message: str

    @property
    def is_ok(self) -> bool:
        return self.kind is ValidationKind.OK

    @staticmethod
    def ok(message: str) -> ValidationMessage:
        return ValidationMessage(kind=ValidationKind.OK, message=message)

    @staticmethod
    def error(message: str) -> ValidationMessage:
        return ValidationMessage(kind=ValidationKind.ERROR, message=message)
