"""Error hierarchy and code mapping for the Tradier client."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    CONFIG_MISSING = "CONFIG_MISSING"
    ACCOUNT_REQUIRED = "ACCOUNT_REQUIRED"
    INVALID_ARGS = "INVALID_ARGS"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMITED = "RATE_LIMITED"
    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


EXIT_CODE_BY_ERROR: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ARGS: 2,
    ErrorCode.CONFIG_MISSING: 3,
    ErrorCode.ACCOUNT_REQUIRED: 3,
    ErrorCode.UNAUTHORIZED: 4,
    ErrorCode.NETWORK_ERROR: 5,
    ErrorCode.RATE_LIMITED: 6,
    ErrorCode.TIMEOUT: 10,
}


class TradierError(Exception):
    """Typed failure raised by configuration, transport and command plumbing."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.suggestion = suggestion

    @property
    def exit_code(self) -> int:
        return EXIT_CODE_BY_ERROR.get(self.code, 1)

    def to_error_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }
        if self.suggestion:
            payload["suggestion"] = self.suggestion
        return payload
