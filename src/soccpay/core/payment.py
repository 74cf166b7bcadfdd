"""
Payment aggregate and the authenticate-then-submit flow against the gateway.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .config import Config
from .errors import (
    AuthenticationError,
    PaymentCreationError,
    ResponseSchemaError,
    SoccPayError,
    TransactionError,
    TransportError,
    ValidationError,
)
from .http import HttpClient
from .models import (
    Credentials,
    CredentialsLike,
    Payer,
    PayerLike,
    RedirectUrls,
    RedirectUrlsLike,
    Transaction,
    TransactionLike,
)
from .payloads import (
    TRANSACTION_INFO_PATH,
    VERIFY_PATH,
    TransactionInfoResponse,
    VerifyResponse,
    build_transaction_payload,
    build_verify_payload,
)

__all__ = ["Payment"]


class Payment:
    """
    A single checkout request.

    Configure it through the chained setters, then call :meth:`create` once
    to obtain the gateway checkout URL. A second call is rejected.
    """

    def __init__(
        self,
        *,
        payer: Optional[PayerLike] = None,
        transaction: Optional[TransactionLike] = None,
        redirect_urls: Optional[RedirectUrlsLike] = None,
        credentials: Optional[CredentialsLike] = None,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        self._payer = payer
        self._transaction = transaction
        self._redirect_urls = redirect_urls
        self._credentials = credentials
        self._approved_url: Optional[str] = None
        self.http_client = http_client or HttpClient(Config.from_env())

    @classmethod
    def from_dict(
        cls,
        data: Optional[Mapping[str, Any]] = None,
        *,
        http_client: Optional[HttpClient] = None,
    ) -> "Payment":
        data = data or {}
        payer = data.get("payer")
        if isinstance(payer, Mapping):
            payer = Payer.from_dict(payer)
        transaction = data.get("transaction")
        if isinstance(transaction, Mapping):
            transaction = Transaction.from_dict(transaction)
        redirect_urls = data.get("redirectUrls")
        if isinstance(redirect_urls, Mapping):
            redirect_urls = RedirectUrls.from_dict(redirect_urls)
        credentials = data.get("credentials")
        if isinstance(credentials, Mapping):
            credentials = Credentials.from_mapping(credentials)
        return cls(
            payer=payer,
            transaction=transaction,
            redirect_urls=redirect_urls,
            credentials=credentials,
            http_client=http_client,
        )

    @property
    def payer(self) -> Optional[PayerLike]:
        return self._payer

    @property
    def transaction(self) -> Optional[TransactionLike]:
        return self._transaction

    @property
    def redirect_urls(self) -> Optional[RedirectUrlsLike]:
        return self._redirect_urls

    @property
    def credentials(self) -> Optional[CredentialsLike]:
        return self._credentials

    @property
    def approved_url(self) -> Optional[str]:
        return self._approved_url

    def set_payer(self, payer: PayerLike) -> "Payment":
        if not isinstance(payer, PayerLike):
            raise ValidationError("Payer must be a valid Payer object")
        self._payer = payer
        return self

    def set_transaction(self, transaction: TransactionLike) -> "Payment":
        if not isinstance(transaction, TransactionLike):
            raise ValidationError("Transaction must be a valid Transaction object")
        self._transaction = transaction
        return self

    def set_redirect_urls(self, redirect_urls: RedirectUrlsLike) -> "Payment":
        if not isinstance(redirect_urls, RedirectUrlsLike):
            raise ValidationError("RedirectUrls must be a valid RedirectUrls object")
        self._redirect_urls = redirect_urls
        return self

    def set_credentials(
        self, credentials: Union[CredentialsLike, Mapping[str, Any]]
    ) -> "Payment":
        """
        Accept a :class:`Credentials` instance or a mapping with
        ``client_id`` and ``client_secret`` keys.
        """
        if isinstance(credentials, Mapping):
            credentials = Credentials.from_mapping(credentials)
        if not isinstance(credentials, CredentialsLike):
            raise ValidationError("Credentials must contain client_id and client_secret")
        credentials.validate()
        self._credentials = credentials
        return self

    def validate(self) -> None:
        missing = [
            name
            for name, value in (
                ("payer", self._payer),
                ("transaction", self._transaction),
                ("redirectUrls", self._redirect_urls),
                ("credentials", self._credentials),
            )
            if value is None
        ]
        if missing:
            raise ValidationError(f"Missing required properties: {', '.join(missing)}")

        if not isinstance(self._payer, PayerLike):
            raise ValidationError("Payer must be a valid Payer object")
        if not isinstance(self._transaction, TransactionLike):
            raise ValidationError("Transaction must be a valid Transaction object")
        if not isinstance(self._redirect_urls, RedirectUrlsLike):
            raise ValidationError("RedirectUrls must be a valid RedirectUrls object")
        if not isinstance(self._credentials, CredentialsLike):
            raise ValidationError("Credentials must contain client_id and client_secret")

        self._payer.validate()
        self._transaction.validate()
        self._redirect_urls.validate()
        self._credentials.validate()

    def create(self) -> str:
        """
        Validate the payment, exchange the credentials for a bearer token and
        submit the transaction.

        Returns the checkout URL the customer must be redirected to. Every
        failure is raised as :class:`PaymentCreationError` whose ``cause`` is
        the underlying ``ValidationError``, ``AuthenticationError`` or
        ``TransactionError``.
        """
        try:
            if self._approved_url is not None:
                raise ValidationError("payment has already been created")
            self.validate()
            access_token = self._request_access_token()
            approved_url = self._submit_transaction(access_token)
        except SoccPayError as exc:
            raise PaymentCreationError(
                f"Payment creation failed: {exc}", cause=exc
            ) from exc

        self._approved_url = approved_url
        logging.info("Payment approved; checkout URL %s", approved_url)
        return approved_url

    def _request_access_token(self) -> str:
        logging.info(
            "Requesting access token from %s",
            self.http_client.resolve_url(VERIFY_PATH),
        )
        try:
            body = self.http_client.post(
                VERIFY_PATH, build_verify_payload(self._credentials)
            )
            if not body:
                raise AuthenticationError(
                    "Please check your client ID or client secret again"
                )
            response = VerifyResponse.from_payload(body)
        except (AuthenticationError, ResponseSchemaError, TransportError) as exc:
            raise AuthenticationError(f"Authentication failed: {exc}") from exc

        if response.is_error:
            raise AuthenticationError(
                f"Authentication failed: {response.message or 'Authentication failed'}"
            )
        if not response.access_token:
            raise AuthenticationError(
                "Authentication failed: "
                f"{response.message or 'No access token returned by gateway'}"
            )
        return response.access_token

    def _submit_transaction(self, access_token: str) -> str:
        amount = self._transaction.amount
        logging.info(
            "Submitting transaction for %s %s to %s",
            amount.total,
            amount.currency,
            self.http_client.resolve_url(TRANSACTION_INFO_PATH),
        )
        body_out = build_transaction_payload(self._payer, amount, self._redirect_urls)
        headers = {"Authorization": f"Bearer {access_token}"}
        try:
            body = self.http_client.post(TRANSACTION_INFO_PATH, body_out, headers)
            if not body:
                raise TransactionError("Please check your transaction details again!")
            response = TransactionInfoResponse.from_payload(body)
        except (TransactionError, ResponseSchemaError, TransportError) as exc:
            raise TransactionError(f"Transaction creation failed: {exc}") from exc

        if response.is_error:
            raise TransactionError(
                "Transaction creation failed: "
                f"{response.message or 'Transaction creation failed'}"
            )
        if not response.approved_url:
            raise TransactionError(
                "Transaction creation failed: "
                f"{response.message or 'No approved URL returned by gateway'}"
            )
        return response.approved_url

    def to_dict(self) -> dict:
        """Serialise everything except the credentials' secret."""

        def _dump(value: Any) -> Any:
            to_dict = getattr(value, "to_dict", None)
            return to_dict() if callable(to_dict) else None

        return {
            "payer": _dump(self._payer),
            "transaction": _dump(self._transaction),
            "redirectUrls": _dump(self._redirect_urls),
            "credentials": _dump(self._credentials),
            "approvedUrl": self._approved_url,
        }
