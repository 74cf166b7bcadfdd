"""
Core primitives that implement the SoccPay checkout flow.
"""

from .config import (
    Config,
    ConfigError,
    load_config,
    resolve_environment,
)
from .errors import (
    AuthenticationError,
    HttpError,
    NetworkError,
    PaymentCreationError,
    RequestError,
    ResponseSchemaError,
    SoccPayError,
    TransactionError,
    TransportError,
    ValidationError,
)
from .http import HttpClient
from .models import (
    Amount,
    AmountLike,
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
    TransactionInfoResponse,
    VerifyResponse,
    build_transaction_payload,
    build_verify_payload,
)
from .payment import Payment

__all__ = [
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
    "SoccPayError",
    "Transaction",
    "TransactionError",
    "TransactionInfoResponse",
    "TransactionLike",
    "TransportError",
    "ValidationError",
    "VerifyResponse",
    "build_transaction_payload",
    "build_verify_payload",
    "load_config",
    "resolve_environment",
]
