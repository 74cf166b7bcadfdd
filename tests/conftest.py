from unittest.mock import MagicMock

import pytest
import requests

from soccpay import (
    Amount,
    Config,
    Credentials,
    HttpClient,
    Payer,
    Payment,
    RedirectUrls,
    Transaction,
)

from .helpers import BASE_URL, CHECKOUT_URL, make_response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def config():
    return Config(base_url=BASE_URL)


@pytest.fixture
def http_client(config, session):
    return HttpClient(config, session=session)


@pytest.fixture
def payment(http_client):
    """A fully configured payment wired to the mocked session."""
    return (
        Payment(http_client=http_client)
        .set_payer(Payer().set_payment_method("SoccPay"))
        .set_transaction(
            Transaction().set_amount(Amount().set_total(4.99).set_currency("usd"))
        )
        .set_redirect_urls(
            RedirectUrls()
            .set_success_url("https://shop.test/success")
            .set_cancel_url("https://shop.test/cancel")
        )
        .set_credentials(Credentials(client_id="cid", client_secret="secret"))
    )


@pytest.fixture
def token_response():
    return make_response(200, {"status": "success", "data": {"access_token": "tok-1"}})


@pytest.fixture
def approved_response():
    return make_response(200, {"status": "success", "data": {"approvedUrl": CHECKOUT_URL}})
