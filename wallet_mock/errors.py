"""Domain error catalog for the wallet mock.

Every failure an engine operation can produce is one of the exceptions below.
Each carries a stable error code and the HTTP status the server maps it to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ErrorCode:
    """Represents a stable error code used in the `code` field of error bodies."""

    code: str
    default_message: str
    status_code: int

    def as_error(self, *, message: str | None = None, details: Any | None = None) -> dict[str, Any]:
        out: dict[str, Any] = {
            "error": message if message is not None else self.default_message,
            "code": self.code,
        }
        if details is not None:
            out["details"] = details
        return out


VALIDATION_FAILED = ErrorCode(
    code="VALIDATION_FAILED",
    default_message="Missing required fields",
    status_code=400,
)

NOT_FOUND = ErrorCode(
    code="NOT_FOUND",
    default_message="Wallet not found",
    status_code=404,
)

INSUFFICIENT_FUNDS = ErrorCode(
    code="INSUFFICIENT_FUNDS",
    default_message="Insufficient balance",
    status_code=400,
)

UNAUTHORIZED = ErrorCode(
    code="UNAUTHORIZED",
    default_message="Unauthorized",
    status_code=401,
)

UNEXPECTED_ERROR = ErrorCode(
    code="UNEXPECTED_ERROR",
    default_message="Internal server error",
    status_code=500,
)


class WalletMockError(Exception):
    """Base class for all errors raised by the ledger engine."""

    error_code: ErrorCode = UNEXPECTED_ERROR

    def __init__(self, message: str | None = None, *, details: Any | None = None) -> None:
        self.message = message if message is not None else self.error_code.default_message
        self.details = details
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.error_code.status_code

    def as_error(self) -> dict[str, Any]:
        return self.error_code.as_error(message=self.message, details=self.details)


class ValidationError(WalletMockError):
    """A required field is missing or a value is malformed."""

    error_code = VALIDATION_FAILED


class NotFoundError(WalletMockError):
    """No wallet is connected under the given address."""

    error_code = NOT_FOUND


class InsufficientFundsError(WalletMockError):
    """The sender balance does not cover the requested total."""

    error_code = INSUFFICIENT_FUNDS


class AuthError(WalletMockError):
    """Bad admin password, or a missing, unknown or expired bearer token."""

    error_code = UNAUTHORIZED


def error_from_exception(exc: Exception, *, include_details: bool = False) -> dict[str, Any]:
    """Convert an unexpected exception into the stable error body.

    Details are only exposed when the server runs in debug mode.
    """

    details = None
    if include_details:
        details = {"type": type(exc).__name__, "message": str(exc)}
    return UNEXPECTED_ERROR.as_error(details=details)
