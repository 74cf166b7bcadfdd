"""
Public, high-level entry points for the SoccPay SDK.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional

import requests

from .core.config import Config, load_config
from .core.http import HttpClient
from .core.models import Amount, Credentials, Payer, RedirectUrls, Transaction
from .core.payment import Payment

__all__ = [
    "SoccPay",
    "create_checkout_url",
]


class SoccPay:
    """
    Factory for payment objects and the single place the gateway base URL is
    configured.

    One :class:`Config` and one :class:`HttpClient` are shared by every
    :class:`Payment` the facade creates, so :meth:`set_base_url` applies to
    all of them.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        env_file: Optional[str] = ".env",
    ) -> None:
        if config is not None and base_url is not None:
            raise ValueError(
                "Provide either a pre-built Config or base_url, not both."
            )
        self.config = config or load_config(env_file=env_file, base_url=base_url)
        self.http_client = HttpClient(self.config, session=session)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def get_base_url(self) -> str:
        return self.config.base_url

    def set_base_url(self, url: str) -> None:
        self.config.set_base_url(url)

    def create_payment(self, data: Optional[Mapping[str, Any]] = None) -> Payment:
        return Payment.from_dict(data, http_client=self.http_client)

    def create_amount(self, data: Optional[Mapping[str, Any]] = None) -> Amount:
        return Amount.from_dict(data)

    def create_payer(self, data: Optional[Mapping[str, Any]] = None) -> Payer:
        return Payer.from_dict(data)

    def create_transaction(
        self, data: Optional[Mapping[str, Any]] = None
    ) -> Transaction:
        return Transaction.from_dict(data)

    def create_redirect_urls(
        self, data: Optional[Mapping[str, Any]] = None
    ) -> RedirectUrls:
        return RedirectUrls.from_dict(data)

    def create_credentials(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
    ) -> Credentials:
        return Credentials(client_id=client_id, client_secret=client_secret)


def create_checkout_url(
    *,
    client_id: str,
    client_secret: str,
    amount: Decimal | float | int,
    currency: str,
    success_url: str,
    cancel_url: str,
    payment_method: str = "SoccPay",
    ipn_webhook: Optional[str] = None,
    description: Optional[str] = None,
    config: Optional[Config] = None,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
) -> str:
    """
    Build every payment component from plain values and return the checkout
    URL produced by :meth:`Payment.create`.
    """
    soccpay = SoccPay(config, base_url=base_url, session=session, env_file=env_file)

    payer = soccpay.create_payer().set_payment_method(payment_method)
    transaction = soccpay.create_transaction().set_amount(
        soccpay.create_amount().set_total(amount).set_currency(currency)
    )
    if description is not None:
        transaction.set_description(description)

    redirect_urls = (
        soccpay.create_redirect_urls()
        .set_success_url(success_url)
        .set_cancel_url(cancel_url)
    )
    if ipn_webhook is not None:
        redirect_urls.set_ipn_webhook(ipn_webhook)

    payment = (
        soccpay.create_payment()
        .set_credentials(soccpay.create_credentials(client_id, client_secret))
        .set_redirect_urls(redirect_urls)
        .set_payer(payer)
        .set_transaction(transaction)
    )
    return payment.create()
