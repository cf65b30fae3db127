"""
Public, high-level entry points for the RazorpayX API.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from ._version import __version__
from .core.client import HttpClient
from .core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    PACKAGE_NAME,
    ClientConfig,
    load_client_config,
)
from .core.webhooks import validate_webhook_signature
from .resources import Contacts, FundAccounts, PayoutLinks, Payouts, Transactions

__all__ = ["RazorpayxClient", "create_client"]

logger = logging.getLogger(__name__)


class RazorpayxClient:
    """
    Entry point bundling every resource behind one authenticated client.

    ``headers`` may carry ``X-Razorpay-Account``; any other header is dropped.
    A missing ``key_id`` or ``key_secret`` raises :class:`ConfigurationError`
    before anything is sent. A pre-built ``config`` cannot be combined with
    ``key_id``, ``key_secret`` or ``headers``.
    """

    VERSION = __version__
    PACKAGE_NAME = PACKAGE_NAME

    validate_webhook_signature = staticmethod(validate_webhook_signature)

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        if config is not None:
            if any(value is not None for value in (key_id, key_secret, headers)):
                raise ValueError(
                    "Provide either a pre-built ClientConfig or credentials and headers, not both."
                )
        else:
            config = ClientConfig.create(
                key_id,
                key_secret,
                headers,
                base_url=base_url,
                timeout_seconds=timeout,
            )
        self.config = config
        self.http = HttpClient(config, session=session)

        self.contacts = Contacts(self.http)
        self.fund_accounts = FundAccounts(self.http)
        self.payouts = Payouts(self.http)
        self.payout_links = PayoutLinks(self.http)
        self.transactions = Transactions(self.http)


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    key_id: Optional[str] = None,
    key_secret: Optional[str] = None,
    account: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[Any] = None,
) -> RazorpayxClient:
    """
    Construct a :class:`RazorpayxClient`.

    Supply either a ready-made :class:`ClientConfig` or let the helper resolve
    one from ``RAZORPAYX_*`` environment data, not both.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            key_id,
            key_secret,
            account,
            base_url,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            key_id=key_id,
            key_secret=key_secret,
            account=account,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
        logger.debug("Resolved RazorpayX configuration for %s", cfg.base_url)

    if cfg.extra_headers:
        logger.info("Requests will carry headers: %s", ", ".join(sorted(cfg.extra_headers)))
    return RazorpayxClient(config=cfg, session=session)
