"""Tests for the ``soccpay`` command-line entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from soccpay import PaymentCreationError
from soccpay.cli import build_parser, run_cli

from .helpers import CHECKOUT_URL

REQUIRED_ARGS = [
    "--env-file",
    "/nonexistent/.env",
    "--amount",
    "4.99",
    "--success-url",
    "https://shop.test/ok",
    "--cancel-url",
    "https://shop.test/no",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("SOCCPAY_BASE_URL", "SOCCPAY_CLIENT_ID", "SOCCPAY_CLIENT_SECRET"):
        monkeypatch.delenv(key, raising=False)


def test_prints_checkout_url(capsys):
    with patch("soccpay.cli.create_checkout_url", return_value=CHECKOUT_URL) as create:
        code = run_cli(
            REQUIRED_ARGS
            + ["--client-id", "cid", "--client-secret", "s", "--base-url", "https://gw.test/"]
        )

    assert code == 0
    assert capsys.readouterr().out.strip() == CHECKOUT_URL
    kwargs = create.call_args.kwargs
    assert kwargs["client_id"] == "cid"
    assert kwargs["currency"] == "USD"
    assert kwargs["payment_method"] == "SoccPay"
    assert kwargs["config"].base_url == "https://gw.test/"


def test_credentials_and_base_url_from_overrides():
    with patch("soccpay.cli.create_checkout_url", return_value=CHECKOUT_URL) as create:
        code = run_cli(
            REQUIRED_ARGS
            + [
                "--set",
                "SOCCPAY_CLIENT_ID=env-id",
                "--set",
                "SOCCPAY_CLIENT_SECRET=env-secret",
                "--set",
                "SOCCPAY_BASE_URL=https://set.test/",
            ]
        )

    assert code == 0
    kwargs = create.call_args.kwargs
    assert (kwargs["client_id"], kwargs["client_secret"]) == ("env-id", "env-secret")
    assert kwargs["config"].base_url == "https://set.test/"


def test_missing_credentials_exit_1():
    with patch("soccpay.cli.create_checkout_url") as create:
        assert run_cli(REQUIRED_ARGS) == 1

    create.assert_not_called()


def test_payment_failure_exit_1():
    error = PaymentCreationError("Payment creation failed: Authentication failed: nope")
    with patch("soccpay.cli.create_checkout_url", side_effect=error):
        assert run_cli(REQUIRED_ARGS + ["--client-id", "c", "--client-secret", "s"]) == 1


def test_invalid_base_url_exit_1():
    assert (
        run_cli(
            REQUIRED_ARGS
            + ["--client-id", "c", "--client-secret", "s", "--base-url", " "]
        )
        == 1
    )


@pytest.mark.parametrize("argv", [["--amount", "abc"], ["--set", "novalue"]])
def test_parser_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        build_parser().parse_args(REQUIRED_ARGS + argv)
