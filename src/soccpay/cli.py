"""
Command-line interface for creating a SoccPay checkout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence, Tuple

from .api import create_checkout_url
from .core.config import (
    CLIENT_ID_ENV_KEY,
    CLIENT_SECRET_ENV_KEY,
    load_config,
    resolve_environment,
)
from .core.errors import SoccPayError


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid amount") from exc


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soccpay",
        description="Create a SoccPay payment and print the checkout URL",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing SOCCPAY_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--base-url",
        help="Override the gateway base URL (default: $SOCCPAY_BASE_URL)",
    )
    parser.add_argument(
        "--client-id",
        help="Merchant client id (default: $SOCCPAY_CLIENT_ID)",
    )
    parser.add_argument(
        "--client-secret",
        help="Merchant client secret (default: $SOCCPAY_CLIENT_SECRET)",
    )
    parser.add_argument("--amount", type=_decimal, required=True, help="Total, e.g. 4.99")
    parser.add_argument("--currency", default="USD", help="3-letter code (default: USD)")
    parser.add_argument(
        "--payment-method",
        default="SoccPay",
        help="Integration name reported as the payer (default: SoccPay)",
    )
    parser.add_argument("--success-url", required=True)
    parser.add_argument("--cancel-url", required=True)
    parser.add_argument("--ipn-webhook")
    parser.add_argument("--description")
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        environment = resolve_environment(env_file=args.env_file, overrides=overrides)
        config = load_config(
            env_file=None,
            base=environment,
            base_url=args.base_url,
        )
    except SoccPayError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client_id = args.client_id or environment.get(CLIENT_ID_ENV_KEY)
    client_secret = args.client_secret or environment.get(CLIENT_SECRET_ENV_KEY)
    if not client_id or not client_secret:
        logging.error(
            "Client credentials missing; pass --client-id/--client-secret or set %s and %s",
            CLIENT_ID_ENV_KEY,
            CLIENT_SECRET_ENV_KEY,
        )
        return 1

    try:
        checkout_url = create_checkout_url(
            client_id=client_id,
            client_secret=client_secret,
            amount=args.amount,
            currency=args.currency,
            success_url=args.success_url,
            cancel_url=args.cancel_url,
            payment_method=args.payment_method,
            ipn_webhook=args.ipn_webhook,
            description=args.description,
            config=config,
        )
    except (SoccPayError, ValueError) as exc:
        logging.error("%s", exc)
        return 1

    print(checkout_url)
    return 0


def main() -> None:
    sys.exit(run_cli())
