"""
Transactions: credits and debits on a RazorpayX account statement.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.client import ApiResponse
from .base import Resource, normalize_fetch_all_params
from .payouts import account_scoped_url

__all__ = ["Transactions"]


class Transactions(Resource):
    base_url = "/transactions"

    def fetch_all(
        self,
        account_number: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ApiResponse:
        self._require(account_number, "account_number")
        url = account_scoped_url(self.base_url, account_number)
        return self.http.get(url, normalize_fetch_all_params(params))

    def fetch(self, transaction_id: str) -> ApiResponse:
        self._require(transaction_id, "transaction_id")
        return self.http.get(self._url(transaction_id))
