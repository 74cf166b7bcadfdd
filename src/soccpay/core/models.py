"""
Builder-style value objects that make up a SoccPay payment request.

Setters validate their single argument before touching any state and return
the instance so calls can be chained::

    amount = Amount().set_total(4.99).set_currency("usd")

Objects can also be built from raw data (``from_dict`` or keyword arguments).
In that case nothing is checked until :meth:`validate` runs.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol, runtime_checkable
from urllib.parse import urlsplit

from .errors import ValidationError

__all__ = [
    "Amount",
    "AmountLike",
    "Credentials",
    "CredentialsLike",
    "Payer",
    "PayerLike",
    "RedirectUrls",
    "RedirectUrlsLike",
    "Transaction",
    "TransactionLike",
    "is_valid_url",
]

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


@runtime_checkable
class AmountLike(Protocol):
    @property
    def total(self) -> Optional[Decimal]: ...

    @property
    def currency(self) -> Optional[str]: ...

    def validate(self) -> None: ...


@runtime_checkable
class PayerLike(Protocol):
    @property
    def payment_method(self) -> Optional[str]: ...

    def validate(self) -> None: ...


@runtime_checkable
class TransactionLike(Protocol):
    @property
    def amount(self) -> Optional[AmountLike]: ...

    def validate(self) -> None: ...


@runtime_checkable
class RedirectUrlsLike(Protocol):
    @property
    def success_url(self) -> Optional[str]: ...

    @property
    def cancel_url(self) -> Optional[str]: ...

    def validate(self) -> None: ...


@runtime_checkable
class CredentialsLike(Protocol):
    @property
    def client_id(self) -> Optional[str]: ...

    @property
    def client_secret(self) -> Optional[str]: ...

    def validate(self) -> None: ...


def _require(owner: object, names: Iterable[str]) -> None:
    missing = [
        name for name in names if getattr(owner, name, None) in (None, "")
    ]
    if missing:
        raise ValidationError(f"Missing required properties: {', '.join(missing)}")


def is_valid_url(url: object) -> bool:
    """Return ``True`` for absolute ``http``/``https`` URLs with a host."""
    if not isinstance(url, str) or not url.isprintable():
        return False
    try:
        parts = urlsplit(url)
        # raises ValueError for a non-numeric or out-of-range port
        parts.port
    except ValueError:
        return False
    if any(char.isspace() for char in parts.netloc):
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def _coerce_total(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValidationError("Amount must be a positive number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError("Amount must be a positive number")
    try:
        total = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError("Amount must be a positive number") from exc
    if not total.is_finite() or total <= 0:
        raise ValidationError("Amount must be a positive number")
    # the gateway receives a JSON number; non-integral totals travel as floats
    if total != total.to_integral_value() and Decimal(repr(float(total))) != total:
        raise ValidationError(
            f"Amount {total} cannot be sent to the gateway without losing precision"
        )
    return total


def _check_currency(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 3:
        raise ValidationError("Currency must be a valid 3-letter currency code")
    code = value.upper()
    if not _CURRENCY_PATTERN.match(code):
        raise ValidationError("Currency must be a valid 3-letter currency code")
    return code


class Amount:
    """Transaction total and its ISO currency code."""

    def __init__(
        self,
        total: Optional[Any] = None,
        currency: Optional[str] = None,
    ) -> None:
        self._total = total
        self._currency = currency

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "Amount":
        data = data or {}
        total = data.get("totalAmount", data.get("total"))
        return cls(total=total, currency=data.get("currency"))

    @property
    def total(self) -> Optional[Any]:
        return self._total

    @property
    def currency(self) -> Optional[str]:
        return self._currency

    def set_total(self, value: Any) -> "Amount":
        self._total = _coerce_total(value)
        return self

    def set_currency(self, code: str) -> "Amount":
        self._currency = _check_currency(code)
        return self

    def validate(self) -> None:
        _require(self, ("total", "currency"))
        _coerce_total(self._total)
        if not isinstance(self._currency, str) or not _CURRENCY_PATTERN.match(
            self._currency
        ):
            raise ValidationError("Currency must be a valid 3-letter currency code")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalAmount": None if self._total is None else str(self._total),
            "currency": self._currency,
        }

    def __repr__(self) -> str:
        return f"Amount(total={self._total!r}, currency={self._currency!r})"


class Payer:
    def __init__(self, payment_method: Optional[str] = None) -> None:
        self._payment_method = payment_method

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "Payer":
        data = data or {}
        return cls(payment_method=data.get("paymentMethod"))

    @property
    def payment_method(self) -> Optional[str]:
        return self._payment_method

    def set_payment_method(self, method: str) -> "Payer":
        """
        Set the integration name reported to the gateway, e.g. ``"SoccPay"``
        or the merchant's own system name.
        """
        if not isinstance(method, str) or not method.strip():
            raise ValidationError("Payment method must be a non-empty string")
        self._payment_method = method.strip()
        return self

    def validate(self) -> None:
        _require(self, ("payment_method",))
        if not isinstance(self._payment_method, str) or not self._payment_method.strip():
            raise ValidationError("Payment method must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        return {"paymentMethod": self._payment_method}

    def __repr__(self) -> str:
        return f"Payer(payment_method={self._payment_method!r})"


class Transaction:
    """Owns exactly one :class:`Amount` plus an optional description."""

    def __init__(
        self,
        amount: Optional[AmountLike] = None,
        description: Optional[str] = None,
    ) -> None:
        self._amount = amount
        self._description = description

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "Transaction":
        data = data or {}
        amount = data.get("amount")
        if isinstance(amount, Mapping):
            amount = Amount.from_dict(amount)
        return cls(amount=amount, description=data.get("description"))

    @property
    def amount(self) -> Optional[AmountLike]:
        return self._amount

    @property
    def description(self) -> Optional[str]:
        return self._description

    def set_amount(self, amount: AmountLike) -> "Transaction":
        if not isinstance(amount, AmountLike):
            raise ValidationError("Amount must be a valid Amount object")
        self._amount = amount
        return self

    def set_description(self, description: Optional[str]) -> "Transaction":
        if description is not None and not isinstance(description, str):
            raise ValidationError("Description must be a string")
        self._description = description
        return self

    def validate(self) -> None:
        _require(self, ("amount",))
        if not isinstance(self._amount, AmountLike):
            raise ValidationError("Transaction must have a valid Amount object")
        self._amount.validate()

    def to_dict(self) -> Dict[str, Any]:
        amount = self._amount
        return {
            "amount": amount.to_dict() if isinstance(amount, Amount) else None,
            "description": self._description,
        }

    def __repr__(self) -> str:
        return (
            f"Transaction(amount={self._amount!r}, "
            f"description={self._description!r})"
        )


class RedirectUrls:
    """
    Where the gateway sends the customer after checkout, plus the optional
    IPN webhook the gateway calls to report the outcome.
    """

    def __init__(
        self,
        success_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        ipn_webhook: Optional[str] = None,
    ) -> None:
        self._success_url = success_url
        self._cancel_url = cancel_url
        self._ipn_webhook = ipn_webhook

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "RedirectUrls":
        data = data or {}
        return cls(
            success_url=data.get("successUrl"),
            cancel_url=data.get("cancelUrl"),
            ipn_webhook=data.get("ipnWebhook"),
        )

    @property
    def success_url(self) -> Optional[str]:
        return self._success_url

    @property
    def cancel_url(self) -> Optional[str]:
        return self._cancel_url

    @property
    def ipn_webhook(self) -> Optional[str]:
        return self._ipn_webhook

    def set_success_url(self, url: str) -> "RedirectUrls":
        if not is_valid_url(url):
            raise ValidationError("Success URL must be a valid HTTP/HTTPS URL")
        self._success_url = url
        return self

    def set_cancel_url(self, url: str) -> "RedirectUrls":
        if not is_valid_url(url):
            raise ValidationError("Cancel URL must be a valid HTTP/HTTPS URL")
        self._cancel_url = url
        return self

    def set_ipn_webhook(self, url: str) -> "RedirectUrls":
        if not is_valid_url(url):
            raise ValidationError("IPN webhook URL must be a valid HTTP/HTTPS URL")
        self._ipn_webhook = url
        return self

    def validate(self) -> None:
        _require(self, ("success_url", "cancel_url"))
        if not is_valid_url(self._success_url):
            raise ValidationError("Success URL must be a valid HTTP/HTTPS URL")
        if not is_valid_url(self._cancel_url):
            raise ValidationError("Cancel URL must be a valid HTTP/HTTPS URL")
        if self._ipn_webhook is not None and not is_valid_url(self._ipn_webhook):
            raise ValidationError("IPN webhook URL must be a valid HTTP/HTTPS URL")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "successUrl": self._success_url,
            "cancelUrl": self._cancel_url,
            "ipnWebhook": self._ipn_webhook,
        }

    def __repr__(self) -> str:
        return (
            f"RedirectUrls(success_url={self._success_url!r}, "
            f"cancel_url={self._cancel_url!r}, ipn_webhook={self._ipn_webhook!r})"
        )


@dataclass
class Credentials:
    """
    Merchant API credentials exchanged for a bearer token.

    The secret is kept out of ``repr`` and :meth:`to_dict`.
    """

    client_id: Optional[str] = None
    client_secret: Optional[str] = field(default=None, repr=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Credentials":
        return cls(
            client_id=data.get("client_id"),
            client_secret=data.get("client_secret"),
        )

    def validate(self) -> None:
        if not self.client_id or not self.client_secret:
            raise ValidationError("Credentials must contain client_id and client_secret")

    def to_dict(self) -> Dict[str, Any]:
        return {"client_id": self.client_id}
