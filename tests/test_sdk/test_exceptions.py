from __future__ import annotations

import pytest

from tradier_sdk import ErrorCode, TradierError


@pytest.mark.parametrize(
    ("code", "exit_code"),
    [
        (ErrorCode.INVALID_ARGS, 2),
        (ErrorCode.CONFIG_MISSING, 3),
        (ErrorCode.ACCOUNT_REQUIRED, 3),
        (ErrorCode.UNAUTHORIZED, 4),
        (ErrorCode.NETWORK_ERROR, 5),
        (ErrorCode.RATE_LIMITED, 6),
        (ErrorCode.TIMEOUT, 10),
        (ErrorCode.API_ERROR, 1),
        (ErrorCode.NOT_FOUND, 1),
    ],
)
def test_exit_codes(code: ErrorCode, exit_code: int) -> None:
    assert TradierError(code, "boom").exit_code == exit_code


def test_error_payload_includes_suggestion_only_when_set() -> None:
    plain = TradierError(ErrorCode.API_ERROR, "bad", details={"status_code": 500})
    assert plain.to_error_payload() == {"code": "API_ERROR", "message": "bad", "details": {"status_code": 500}}

    hinted = TradierError(ErrorCode.TIMEOUT, "slow", suggestion="retry")
    assert hinted.to_error_payload()["suggestion"] == "retry"
    assert str(hinted) == "slow"
