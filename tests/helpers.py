import json

import requests

BASE_URL = "https://gateway.test/"
VERIFY_URL = "https://gateway.test/merchant/api/verify"
TRANSACTION_URL = "https://gateway.test/merchant/api/transaction-info"
CHECKOUT_URL = "https://gateway.test/checkout/abc123"


def make_response(status_code=200, payload=None, *, reason="OK", raw=None):
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = BASE_URL
    if raw is not None:
        response._content = raw
    elif payload is None:
        response._content = b""
    else:
        response._content = json.dumps(payload).encode("utf-8")
    response.encoding = "utf-8"
    return response
