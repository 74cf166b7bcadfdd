"""Unit tests for the requests-based HTTP client."""

from __future__ import annotations

import pytest
import requests

from soccpay import (
    Config,
    HttpClient,
    HttpError,
    NetworkError,
    RequestError,
    ResponseSchemaError,
    TransportError,
)
from soccpay.core.http import DEFAULT_HEADERS, REQUEST_TIMEOUT_SECONDS

from .helpers import make_response


class TestUrlResolution:
    @pytest.mark.parametrize(
        "base_url,path,expected",
        [
            ("https://gw.test/", "merchant/api/verify", "https://gw.test/merchant/api/verify"),
            ("https://gw.test", "merchant/api/verify", "https://gw.test/merchant/api/verify"),
            ("https://gw.test/", "/merchant/api/verify", "https://gw.test/merchant/api/verify"),
            ("https://gw.test/root/", "ping", "https://gw.test/root/ping"),
            ("https://gw.test/", "https://other.test/x", "https://other.test/x"),
            ("https://gw.test/", "http://other.test/x", "http://other.test/x"),
        ],
    )
    def test_resolve_url(self, base_url, path, expected):
        client = HttpClient(Config(base_url=base_url))

        assert client.resolve_url(path) == expected

    def test_reads_base_url_at_request_time(self, session):
        config = Config(base_url="https://old.test/")
        client = HttpClient(config, session=session)
        session.request.return_value = make_response(200, {"ok": True})

        config.set_base_url("https://new.test/")
        client.get("ping")

        assert session.request.call_args.args == ("GET", "https://new.test/ping")


class TestRequests:
    def test_post_sends_json_with_default_headers_and_timeout(self, http_client, session):
        session.request.return_value = make_response(200, {"data": {"x": 1}})

        result = http_client.post("merchant/api/verify", {"client_id": "a"})

        assert result == {"data": {"x": 1}}
        session.request.assert_called_once_with(
            "POST",
            "https://gateway.test/merchant/api/verify",
            headers=DEFAULT_HEADERS,
            timeout=REQUEST_TIMEOUT_SECONDS,
            json={"client_id": "a"},
        )

    def test_caller_headers_win(self, http_client, session):
        session.request.return_value = make_response(200, {})

        http_client.post(
            "x", {"a": 1}, {"Authorization": "Bearer t", "Accept": "text/plain"}
        )

        headers = session.request.call_args.kwargs["headers"]
        assert headers == {
            "Content-Type": "application/json",
            "Accept": "text/plain",
            "Authorization": "Bearer t",
        }

    def test_get_sends_no_body(self, http_client, session):
        session.request.return_value = make_response(200, [1, 2])

        assert http_client.get("items") == [1, 2]
        assert "json" not in session.request.call_args.kwargs

    def test_empty_body_returns_none(self, http_client, session):
        session.request.return_value = make_response(200, None)

        assert http_client.post("x", {}) is None

    def test_non_json_body_raises_schema_error(self, http_client, session):
        session.request.return_value = make_response(200, raw=b"<html>oops</html>")

        with pytest.raises(ResponseSchemaError, match="Failed to parse JSON"):
            http_client.post("x", {})


class TestErrorNormalisation:
    def test_non_2xx_uses_gateway_message(self, http_client, session):
        session.request.return_value = make_response(
            401, {"status": "error", "message": "Invalid client"}, reason="Unauthorized"
        )

        with pytest.raises(HttpError) as excinfo:
            http_client.post("x", {})

        assert str(excinfo.value) == "HTTP 401: Invalid client"
        assert excinfo.value.status_code == 401
        assert excinfo.value.payload == {"status": "error", "message": "Invalid client"}

    def test_non_2xx_falls_back_to_reason(self, http_client, session):
        session.request.return_value = make_response(
            502, raw=b"bad gateway", reason="Bad Gateway"
        )

        with pytest.raises(HttpError, match="HTTP 502: Bad Gateway"):
            http_client.get("x")

    @pytest.mark.parametrize(
        "exc", [requests.ConnectionError("refused"), requests.Timeout("slow")]
    )
    def test_no_response_is_network_error(self, http_client, session, exc):
        session.request.side_effect = exc

        with pytest.raises(NetworkError, match="No response received from server"):
            http_client.post("x", {})

    def test_unsendable_request_is_request_error(self, http_client, session):
        session.request.side_effect = requests.exceptions.InvalidURL("bad url")

        with pytest.raises(RequestError, match="Request error: bad url"):
            http_client.post("x", {})

    def test_all_failures_share_transport_error(self):
        assert issubclass(HttpError, TransportError)
        assert issubclass(NetworkError, TransportError)
        assert issubclass(RequestError, TransportError)
