"""
Configuration for the SoccPay SDK.

Values are layered the same way everywhere: the process environment (or an
explicit ``base`` mapping), then a ``.env`` file filling in missing keys, then
explicit overrides, which always win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from .errors import ConfigError

__all__ = [
    "BASE_URL_ENV_KEY",
    "CLIENT_ID_ENV_KEY",
    "CLIENT_SECRET_ENV_KEY",
    "Config",
    "ConfigError",
    "DEFAULT_BASE_URL",
    "load_config",
    "resolve_environment",
]

BASE_URL_ENV_KEY = "SOCCPAY_BASE_URL"
CLIENT_ID_ENV_KEY = "SOCCPAY_CLIENT_ID"
CLIENT_SECRET_ENV_KEY = "SOCCPAY_CLIENT_SECRET"

# Placeholder; merchants are expected to point the SDK at their gateway host.
DEFAULT_BASE_URL = "http://your-domain.com/"


def _read_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        values[key.strip()] = value
    return values


def resolve_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Merge configuration sources into a plain ``dict``.

    ``base`` defaults to :data:`os.environ`. Keys from ``env_file`` only fill
    gaps; pass ``env_file=None`` to skip file loading. ``overrides`` always win.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in _read_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return merged


def _normalize_base_url(raw_url: object) -> str:
    if not isinstance(raw_url, str) or not raw_url.strip():
        raise ConfigError(f"{BASE_URL_ENV_KEY} must be a non-empty string")
    return raw_url.strip()


@dataclass
class Config:
    """
    Connection settings shared by a :class:`soccpay.api.SoccPay` facade and
    every HTTP client it hands out.

    The object is mutable on purpose: clients read ``base_url`` at request
    time, so :meth:`set_base_url` affects all later requests.
    """

    base_url: str = DEFAULT_BASE_URL

    def __post_init__(self) -> None:
        self.base_url = _normalize_base_url(self.base_url)

    def set_base_url(self, url: str) -> None:
        self.base_url = _normalize_base_url(url)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "Config":
        return cls(base_url=values.get(BASE_URL_ENV_KEY) or DEFAULT_BASE_URL)

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        base: Optional[Mapping[str, str]] = None,
        overrides: Optional[Mapping[str, str]] = None,
        base_url: Optional[str] = None,
    ) -> "Config":
        merged_overrides = dict(overrides or {})
        if base_url is not None:
            merged_overrides[BASE_URL_ENV_KEY] = _normalize_base_url(base_url)

        environment = resolve_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment)


def load_config(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
    base_url: Optional[str] = None,
) -> Config:
    """
    Convenience wrapper that mirrors :meth:`Config.from_env`.
    """
    return Config.from_env(
        env_file=env_file,
        base=base,
        overrides=overrides,
        base_url=base_url,
    )
