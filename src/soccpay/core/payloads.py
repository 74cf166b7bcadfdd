"""
Request bodies and response schemas for the two SoccPay merchant endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .errors import ResponseSchemaError
from .models import AmountLike, CredentialsLike, PayerLike, RedirectUrlsLike

__all__ = [
    "TRANSACTION_INFO_PATH",
    "TransactionInfoResponse",
    "VERIFY_PATH",
    "VerifyResponse",
    "build_transaction_payload",
    "build_verify_payload",
]

VERIFY_PATH = "merchant/api/verify"
TRANSACTION_INFO_PATH = "merchant/api/transaction-info"


def _wire_number(value: Any) -> Union[int, float]:
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    return value


def build_verify_payload(credentials: CredentialsLike) -> Dict[str, Any]:
    return {
        "client_id": credentials.client_id,
        "client_secret": credentials.client_secret,
    }


def build_transaction_payload(
    payer: PayerLike,
    amount: AmountLike,
    redirect_urls: RedirectUrlsLike,
) -> Dict[str, Any]:
    """Build the body submitted to ``merchant/api/transaction-info``."""
    return {
        "payer": payer.payment_method,
        "amount": _wire_number(amount.total),
        "currency": amount.currency,
        "successUrl": redirect_urls.success_url,
        "cancelUrl": redirect_urls.cancel_url,
    }


def _split_envelope(
    payload: Any, endpoint: str
) -> Tuple[Optional[str], Optional[str], Mapping[str, Any]]:
    if not isinstance(payload, Mapping):
        raise ResponseSchemaError(
            f"Expected a JSON object from {endpoint}, got {type(payload).__name__}"
        )
    status = payload.get("status")
    message = payload.get("message")
    data = payload.get("data")
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ResponseSchemaError(
            f"Expected 'data' to be an object in {endpoint} response"
        )
    return (
        None if status is None else str(status),
        None if message is None else str(message),
        data,
    )


@dataclass(frozen=True)
class VerifyResponse:
    status: Optional[str]
    message: Optional[str]
    access_token: Optional[str]
    raw: Mapping[str, Any]

    @property
    def is_error(self) -> bool:
        return self.status == "error"

    @classmethod
    def from_payload(cls, payload: Any) -> "VerifyResponse":
        status, message, data = _split_envelope(payload, VERIFY_PATH)
        token = data.get("access_token")
        if token is not None and not isinstance(token, str):
            raise ResponseSchemaError("Expected 'data.access_token' to be a string")
        return cls(
            status=status,
            message=message,
            access_token=token or None,
            raw=payload,
        )


@dataclass(frozen=True)
class TransactionInfoResponse:
    status: Optional[str]
    message: Optional[str]
    approved_url: Optional[str]
    raw: Mapping[str, Any]

    @property
    def is_error(self) -> bool:
        return self.status == "error"

    @classmethod
    def from_payload(cls, payload: Any) -> "TransactionInfoResponse":
        status, message, data = _split_envelope(payload, TRANSACTION_INFO_PATH)
        approved_url = data.get("approvedUrl")
        if approved_url is not None and not isinstance(approved_url, str):
            raise ResponseSchemaError("Expected 'data.approvedUrl' to be a string")
        return cls(
            status=status,
            message=message,
            approved_url=approved_url or None,
            raw=payload,
        )
