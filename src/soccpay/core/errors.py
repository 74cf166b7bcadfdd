"""
Exception hierarchy raised by the SoccPay SDK.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "HttpError",
    "NetworkError",
    "PaymentCreationError",
    "RequestError",
    "ResponseSchemaError",
    "SoccPayError",
    "TransactionError",
    "TransportError",
    "ValidationError",
]


class SoccPayError(Exception):
    """Base class for every error raised by the SDK."""


class ConfigError(SoccPayError):
    """Raised when the supplied configuration is invalid."""


class ValidationError(SoccPayError, ValueError):
    """Raised when a value object receives or holds invalid data."""


class TransportError(SoccPayError):
    """
    Raised by :class:`soccpay.core.http.HttpClient` when a request does not
    produce a usable 2xx response.
    """


class HttpError(TransportError):
    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        payload: Optional[Any] = None,
    ) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.payload = payload


class NetworkError(TransportError):
    """The request was sent but no response came back."""


class RequestError(TransportError):
    """The request could not be built or sent."""


class ResponseSchemaError(SoccPayError):
    """The gateway answered with a body that does not match the expected shape."""


class AuthenticationError(SoccPayError):
    pass


class TransactionError(SoccPayError):
    pass


class PaymentCreationError(SoccPayError):
    """
    Single failure surfaced by :meth:`soccpay.core.payment.Payment.create`.

    ``cause`` holds the step-specific exception (``ValidationError``,
    ``AuthenticationError`` or ``TransactionError``) so callers can branch on
    its type rather than on the message text.
    """

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
