"""
Payouts: money moved from a RazorpayX account to a fund account.
"""

from __future__ import annotations

import enum
from typing import Any, Mapping, Optional
from urllib.parse import quote

from ..core.client import ApiResponse
from .base import Resource, normalize_fetch_all_params

__all__ = ["PayoutPurpose", "Payouts", "account_scoped_url"]


class PayoutPurpose(str, enum.Enum):
    REFUND = "refund"
    CASHBACK = "cashback"
    PAYOUT = "payout"
    SALARY = "salary"
    UTILITY_BILL = "utility bill"
    VENDOR_BILL = "vendor bill"


def account_scoped_url(base_url: str, account_number: str) -> str:
    return f"{base_url}?account_number={quote(str(account_number), safe='')}"


class Payouts(Resource):
    base_url = "/payouts"

    def create(self, params: Mapping[str, Any]) -> ApiResponse:
        return self.http.post(self.base_url, params)

    def cancel(self, payout_id: str) -> ApiResponse:
        """Cancel a payout that is still ``queued``."""
        self._require(payout_id, "payout_id")
        return self.http.post(self._url(payout_id, "cancel"))

    def fetch_all(
        self,
        account_number: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ApiResponse:
        self._require(account_number, "account_number")
        url = account_scoped_url(self.base_url, account_number)
        return self.http.get(url, normalize_fetch_all_params(params))

    def fetch(self, payout_id: str) -> ApiResponse:
        self._require(payout_id, "payout_id")
        return self.http.get(self._url(payout_id))
