"""Outcome type returned across the library boundary."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResultStatus(Enum):
    """Why an operation succeeded or failed."""

    OK = "ok"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    WRITE_FAILED = "write_failed"
    EXPORT_FAILED = "export_failed"
    IMPORT_FAILED = "import_failed"
    BUSY = "busy"


@dataclass
class OperationResult:
    """Result from a library operation."""

    success: bool
    status: ResultStatus = ResultStatus.OK
    value: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, value: Any = None) -> "OperationResult":
        return cls(success=True, status=ResultStatus.OK, value=value)

    @classmethod
    def failure(
        cls, status: ResultStatus, error: str, value: Any = None
    ) -> "OperationResult":
        return cls(success=False, status=status, value=value, error=error)
