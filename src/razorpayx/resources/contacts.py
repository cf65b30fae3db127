"""
Contacts: the people and businesses you pay out to.
"""

from __future__ import annotations

import enum
from typing import Any, Mapping, Optional

from ..core.client import ApiResponse
from ..core.errors import ConfigurationError, ValidationError
from .base import Resource, normalize_fetch_all_params

__all__ = ["ContactType", "Contacts"]

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50


class ContactType(str, enum.Enum):
    CUSTOMER = "customer"
    EMPLOYEE = "employee"
    VENDOR = "vendor"
    SELF = "self"


def _validate_name(params: Mapping[str, Any]) -> None:
    name = params.get("name")
    if name is None:
        return
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        raise ValidationError(
            f"`name` must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        )


class Contacts(Resource):
    base_url = "/contacts"

    def create(self, params: Mapping[str, Any]) -> ApiResponse:
        """
        Create a contact. ``params`` is sent as the request body unchanged.
        """
        if not params or not params.get("name"):
            raise ConfigurationError("`name` is missing")
        _validate_name(params)
        return self.http.post(self.base_url, params)

    def update(self, contact_id: str, params: Mapping[str, Any]) -> ApiResponse:
        self._require(contact_id, "contact_id")
        _validate_name(params)
        return self.http.patch(self._url(contact_id), params)

    def toggle_active(self, contact_id: str, active: Optional[bool]) -> ApiResponse:
        self._require(contact_id, "contact_id")
        if active is None:
            raise ConfigurationError("`active` is missing")
        return self.http.patch(self._url(contact_id), {"active": active})

    def fetch_all(self, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self.http.get(self.base_url, normalize_fetch_all_params(params))

    def fetch(self, contact_id: str) -> ApiResponse:
        self._require(contact_id, "contact_id")
        return self.http.get(self._url(contact_id))
