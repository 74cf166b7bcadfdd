"""
HTTP transport for the SoccPay gateway.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import requests

from .config import Config
from .errors import HttpError, NetworkError, RequestError, ResponseSchemaError

__all__ = [
    "DEFAULT_HEADERS",
    "HttpClient",
    "REQUEST_TIMEOUT_SECONDS",
]

REQUEST_TIMEOUT_SECONDS = 30

DEFAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _is_absolute(path: str) -> bool:
    return path.startswith(("http://", "https://"))


def _error_message(response: requests.Response) -> Tuple[str, Optional[Any]]:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"]), payload
    return response.reason or "Unknown error", payload


class HttpClient:
    """
    Thin wrapper around :class:`requests.Session` that resolves gateway
    paths and turns every failure into a :class:`TransportError` subclass.

    Only the decoded JSON body is returned to callers. An empty body is
    returned as ``None``.
    """

    def __init__(
        self,
        config: Config,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.timeout = timeout

    def resolve_url(self, path: str) -> str:
        if _is_absolute(path):
            return path
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def get(self, path: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        return self.execute("GET", path, headers=headers)

    def post(
        self,
        path: str,
        body: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return self.execute("POST", path, body=body, headers=headers)

    def execute(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        method = method.upper()
        url = self.resolve_url(path)
        merged_headers = dict(DEFAULT_HEADERS)
        merged_headers.update(headers or {})

        request_kwargs: Dict[str, Any] = {
            "headers": merged_headers,
            "timeout": self.timeout,
        }
        if body is not None and method in ("POST", "PUT"):
            request_kwargs["json"] = dict(body)

        try:
            response = self.session.request(method, url, **request_kwargs)
        except (requests.ConnectionError, requests.Timeout) as exc:
            logging.warning("No response from %s %s: %s", method, url, exc)
            raise NetworkError(
                "Network error: No response received from server"
            ) from exc
        except requests.RequestException as exc:
            logging.warning("Could not send %s %s: %s", method, url, exc)
            raise RequestError(f"Request error: {exc}") from exc

        if not 200 <= response.status_code < 300:
            message, payload = _error_message(response)
            logging.warning(
                "%s %s responded with %s", method, url, response.status_code
            )
            raise HttpError(response.status_code, message, payload=payload)

        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseSchemaError(
                f"Failed to parse JSON from gateway at {url}: {response.text}"
            ) from exc
