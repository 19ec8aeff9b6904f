"""Outcome of a single connectivity check."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from ..enums import CheckResult


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of firing one check.

    Exactly one of ``status_code`` and ``error_message`` is set. Build it with
    :meth:`from_response` or :meth:`from_error` rather than directly.
    """

    description: str
    result: CheckResult = CheckResult.FAILED
    status_code: Optional[int] = None
    error_message: Optional[str] = None
    data: str = ""

    @classmethod
    def from_response(
        cls,
        description: str,
        status_code: int,
        success_codes: Iterable[int],
        body: bytes = b"",
    ) -> "CheckOutcome":
        passed = status_code in set(success_codes)
        return cls(
            description=description,
            result=CheckResult.PASSED if passed else CheckResult.FAILED,
            status_code=status_code,
            data=body.decode("utf-8", errors="replace"),
        )

    @classmethod
    def from_error(cls, description: str, error_message: str) -> "CheckOutcome":
        return cls(description=description, result=CheckResult.FAILED, error_message=error_message)

    @property
    def passed(self) -> bool:
        return self.result == CheckResult.PASSED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.data,
            "statusCode": self.status_code,
            "errorMessage": self.error_message,
            "description": self.description,
            "result": self.result.value,
        }
