"""
Gateway exceptions.

Exception Hierarchy:
    GatewayError (base)
    ├── GatewayValidationError - payment object the client cannot send
    ├── GatewayRejection - remote call completed but reported failure
    └── TransportFailure - network, timeout, auth or rate-limit failure

Charge operations report rejections as ``GatewayResult(success=False)``;
only profile creation raises ``GatewayRejection``. ``TransportFailure`` is
raised by remote clients and propagates unchanged; nothing here retries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .base import GatewayResult


class GatewayError(Exception):
    default_error_code: str = "GATEWAY_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class GatewayValidationError(GatewayError):
    default_error_code: str = "GATEWAY_VALIDATION_ERROR"


class GatewayRejection(GatewayError):
    """The remote API answered, and the answer was no."""

    default_error_code: str = "GATEWAY_REJECTION"

    def __init__(
        self,
        message: str,
        *,
        result: GatewayResult | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code=error_code, details=details)
        self.result = result


class TransportFailure(GatewayError):
    default_error_code: str = "GATEWAY_TRANSPORT_FAILURE"


__all__ = [
    "GatewayError",
    "GatewayRejection",
    "GatewayValidationError",
    "TransportFailure",
]
