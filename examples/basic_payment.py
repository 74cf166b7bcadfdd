"""
Minimal script that uses the builder API to create a SoccPay checkout.

Set SOCCPAY_BASE_URL, SOCCPAY_CLIENT_ID and SOCCPAY_CLIENT_SECRET (or put them
in a .env file) before running it.
"""

from __future__ import annotations

import argparse
import logging
import sys

from soccpay import Credentials, PaymentCreationError, SoccPay, resolve_environment


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a SoccPay payment using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing SOCCPAY_* settings",
    )
    parser.add_argument(
        "--merchant-url",
        default="http://your-merchant-domain.com",
        help="Merchant site hosting the success, cancel and IPN pages",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    environment = resolve_environment(env_file=args.env_file)
    soccpay = SoccPay(env_file=args.env_file)
    logging.info("Using gateway at %s", soccpay.base_url)

    payer = soccpay.create_payer().set_payment_method("SoccPay")
    amount = soccpay.create_amount().set_total(4.99).set_currency("USD")
    transaction = soccpay.create_transaction().set_amount(amount)
    redirect_urls = (
        soccpay.create_redirect_urls()
        .set_success_url(f"{args.merchant_url}/success")
        .set_cancel_url(f"{args.merchant_url}/cancel")
        .set_ipn_webhook(f"{args.merchant_url}/ipn")
    )

    payment = (
        soccpay.create_payment()
        .set_credentials(
            Credentials(
                client_id=environment.get("SOCCPAY_CLIENT_ID", "your_client_id"),
                client_secret=environment.get("SOCCPAY_CLIENT_SECRET", "your_client_secret"),
            )
        )
        .set_redirect_urls(redirect_urls)
        .set_payer(payer)
        .set_transaction(transaction)
    )

    try:
        checkout_url = payment.create()
    except PaymentCreationError as exc:
        logging.error("%s", exc)
        return 1

    logging.info("Payment created; redirect the customer to %s", checkout_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
