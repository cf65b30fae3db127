"""
Payout links: let a contact supply their own fund account details.
"""

from __future__ import annotations

import enum
from typing import Any, Mapping, Optional

from ..core.client import ApiResponse
from ..core.errors import ConfigurationError, ValidationError
from ..core.utils import is_non_null_object, normalize_date
from .base import Resource, normalize_fetch_all_params

__all__ = ["PayoutLinkStatus", "PayoutLinks"]


class PayoutLinkStatus(str, enum.Enum):
    ISSUED = "issued"
    PROCESSING = "processing"
    PROCESSED = "processed"
    CANCELLED = "cancelled"


def _validate_contact(contact: Any) -> None:
    if not is_non_null_object(contact):
        raise ConfigurationError("`contact` is missing")
    if contact.get("id"):
        return
    if not contact.get("name"):
        raise ValidationError("`contact name` is required if not providing id")
    if not contact.get("email") and not contact.get("contact"):
        raise ValidationError("either contact or email mandatory if id is not used")


class PayoutLinks(Resource):
    base_url = "/payout-links"

    def create(self, params: Mapping[str, Any]) -> ApiResponse:
        """
        Create a payout link.

        Either ``contact.id`` or ``contact.name`` together with
        ``contact.email`` or ``contact.contact`` is required. ``expire_by`` is
        converted to Unix seconds.
        """
        _validate_contact(params.get("contact"))
        body = dict(params)
        if body.get("expire_by"):
            body["expire_by"] = normalize_date(body["expire_by"])
        return self.http.post(self.base_url, body)

    def cancel(self, payout_link_id: str) -> ApiResponse:
        self._require(payout_link_id, "payout_link_id")
        return self.http.post(self._url(payout_link_id, "cancel"))

    def fetch_all(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self.http.get(self.base_url, normalize_fetch_all_params(params))

    def fetch(self, payout_link_id: str) -> ApiResponse:
        self._require(payout_link_id, "payout_link_id")
        return self.http.get(self._url(payout_link_id))
