"""
Fund accounts: payout destinations linked to a contact.
"""

from __future__ import annotations

import enum
from typing import Any, Mapping, Optional

from ..core.client import ApiResponse
from ..core.errors import ConfigurationError, ValidationError
from .base import Resource, normalize_fetch_all_params

__all__ = ["AccountType", "FundAccounts"]


class AccountType(str, enum.Enum):
    VPA = "vpa"
    BANK_ACCOUNT = "bank_account"
    CARD = "card"
    WALLET = "wallet"


class FundAccounts(Resource):
    base_url = "/fund_accounts"

    def create(self, params: Mapping[str, Any]) -> ApiResponse:
        """
        Create a fund account.

        The details object named by ``account_type`` (``vpa``, ``card``,
        ``bank_account`` or ``wallet``) must be present. Unknown account types
        are left for the API to reject.
        """
        account_type = params.get("account_type")
        try:
            required = AccountType(account_type).value
        except ValueError:
            required = None
        if required is not None and not params.get(required):
            raise ValidationError(f"`{required}` is missing")
        return self.http.post(self.base_url, params)

    def toggle_active(self, fund_account_id: str, active: Optional[bool]) -> ApiResponse:
        self._require(fund_account_id, "fund_account_id")
        if active is None:
            raise ConfigurationError("`active` is missing")
        return self.http.patch(self._url(fund_account_id), {"active": active})

    def fetch_all(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self.http.get(self.base_url, normalize_fetch_all_params(params))

    def fetch(self, fund_account_id: str) -> ApiResponse:
        self._require(fund_account_id, "fund_account_id")
        return self.http.get(self._url(fund_account_id))
