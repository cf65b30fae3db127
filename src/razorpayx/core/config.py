"""
Client configuration and the header allow-list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .._version import __version__
from .environment import build_environment
from .errors import ConfigurationError

__all__ = [
    "ACCOUNT_HEADER",
    "ALLOWED_HEADERS",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "PACKAGE_NAME",
    "USER_AGENT",
    "ClientConfig",
    "filter_headers",
    "load_client_config",
]

PACKAGE_NAME = "razorpayx"
USER_AGENT = f"{PACKAGE_NAME}@{__version__}"

DEFAULT_BASE_URL = "https://api.razorpay.com/v1/"
DEFAULT_TIMEOUT_SECONDS = 30.0

ACCOUNT_HEADER = "X-Razorpay-Account"
ALLOWED_HEADERS = frozenset({ACCOUNT_HEADER})

_PARAMETER_TO_ENV_KEY = {
    "key_id": "RAZORPAYX_KEY_ID",
    "key_secret": "RAZORPAYX_KEY_SECRET",
    "account": "RAZORPAYX_ACCOUNT",
    "base_url": "RAZORPAYX_BASE_URL",
    "timeout_seconds": "RAZORPAYX_TIMEOUT_SECONDS",
}


def filter_headers(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Keep only the headers a caller is permitted to send.

    Anything outside :data:`ALLOWED_HEADERS` is dropped without complaint.
    """
    if not headers:
        return {}
    return {name: value for name, value in headers.items() if name in ALLOWED_HEADERS}


def _require(value: Optional[str], name: str) -> str:
    if not value:
        raise ConfigurationError(f"`{name}` is mandatory")
    return value


def _normalize_base_url(raw_url: str) -> str:
    url = raw_url.strip()
    if not url:
        raise ConfigurationError("RAZORPAYX_BASE_URL must not be empty")
    return url if url.endswith("/") else url + "/"


def _parse_timeout(raw_value: Optional[str]) -> Optional[float]:
    if raw_value is None:
        return DEFAULT_TIMEOUT_SECONDS
    value = raw_value.strip().lower()
    if value in ("", "none"):
        return None
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ConfigurationError(
            f"RAZORPAYX_TIMEOUT_SECONDS must be a number, got '{raw_value}'"
        ) from exc
    if timeout <= 0:
        raise ConfigurationError("RAZORPAYX_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings shared by every request a client sends.

    Credentials are checked and ``extra_headers`` is reduced to the allow-list
    on construction, whichever way the instance is built.
    """

    key_id: str
    key_secret: str
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = USER_AGENT
    extra_headers: Mapping[str, str] = field(default_factory=dict)
    timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        _require(self.key_id, "key_id")
        _require(self.key_secret, "key_secret")
        object.__setattr__(self, "base_url", _normalize_base_url(self.base_url))
        object.__setattr__(
            self, "extra_headers", MappingProxyType(filter_headers(self.extra_headers))
        )

    @classmethod
    def create(
        cls,
        key_id: Optional[str],
        key_secret: Optional[str],
        headers: Optional[Mapping[str, str]] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = USER_AGENT,
        timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
    ) -> "ClientConfig":
        return cls(
            key_id=_require(key_id, "key_id"),
            key_secret=_require(key_secret, "key_secret"),
            base_url=base_url,
            user_agent=user_agent,
            extra_headers=headers or {},
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        headers: Dict[str, str] = {}
        account = values.get("RAZORPAYX_ACCOUNT")
        if account:
            headers[ACCOUNT_HEADER] = account.strip()

        return cls.create(
            values.get("RAZORPAYX_KEY_ID", "").strip(),
            values.get("RAZORPAYX_KEY_SECRET", "").strip(),
            headers,
            base_url=values.get("RAZORPAYX_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=_parse_timeout(values.get("RAZORPAYX_TIMEOUT_SECONDS")),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        account: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[Any] = None,
    ) -> "ClientConfig":
        merged_overrides = dict(overrides or {})
        explicit = {
            "key_id": key_id,
            "key_secret": key_secret,
            "account": account,
            "base_url": base_url,
            "timeout_seconds": timeout_seconds,
        }
        for name, value in explicit.items():
            if value is not None:
                merged_overrides[_PARAMETER_TO_ENV_KEY[name]] = str(value)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    key_id: Optional[str] = None,
    key_secret: Optional[str] = None,
    account: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[Any] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings may come from environment variables, a ``.env`` file, keyword
    arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        key_id=key_id,
        key_secret=key_secret,
        account=account,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )
