"""
Python SDK for the SoccPay payment gateway.

The most useful pieces are re-exported here so integrators can
``from soccpay import ...`` without navigating the package.
"""

from .api import SoccPay, create_checkout_url
from .core import (
    Amount,
    AmountLike,
    AuthenticationError,
    Config,
    ConfigError,
    Credentials,
    CredentialsLike,
    HttpClient,
    HttpError,
    NetworkError,
    Payer,
    PayerLike,
    Payment,
    PaymentCreationError,
    RedirectUrls,
    RedirectUrlsLike,
    RequestError,
    ResponseSchemaError,
    SoccPayError,
    Transaction,
    TransactionError,
    TransactionLike,
    TransportError,
    ValidationError,
    load_config,
    resolve_environment,
)

__all__ = (
    "Amount",
    "AmountLike",
    "AuthenticationError",
    "Config",
    "ConfigError",
    "Credentials",
    "CredentialsLike",
    "HttpClient",
    "HttpError",
    "NetworkError",
    "Payer",
    "PayerLike",
    "Payment",
    "PaymentCreationError",
    "RedirectUrls",
    "RedirectUrlsLike",
    "RequestError",
    "ResponseSchemaError",
    "SoccPay",
    "SoccPayError",
    "Transaction",
    "TransactionError",
    "TransactionLike",
    "TransportError",
    "ValidationError",
    "create_checkout_url",
    "load_config",
    "resolve_environment",
)
