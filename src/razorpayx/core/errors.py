"""
Exception types raised by the RazorpayX client.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

__all__ = [
    "ApiError",
    "ApiErrorDetail",
    "ConfigurationError",
    "RazorpayxError",
    "ValidationError",
]


class RazorpayxError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(RazorpayxError):
    """Raised when credentials or required call arguments are missing."""


class ValidationError(RazorpayxError):
    """Raised when a parameter is rejected before any request is sent."""


@dataclass(frozen=True)
class ApiErrorDetail:
    code: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    reasons: Any = None
    step: Optional[str] = None
    field: Optional[str] = None
    metadata: Dict[str, Any] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ApiErrorDetail":
        return cls(
            code=payload.get("code"),
            description=payload.get("description"),
            source=payload.get("source"),
            reasons=payload.get("reasons", payload.get("reason")),
            step=payload.get("step"),
            field=payload.get("field"),
            metadata=dict(payload.get("metadata") or {}),
        )


class ApiError(RazorpayxError):
    """
    A request reached the transport layer and failed.

    ``status_code`` is ``-1`` when no HTTP response was received.
    """

    def __init__(
        self,
        message: str,
        detail: Optional[ApiErrorDetail] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.detail = detail
        self.status_code = status_code if status_code is not None else -1

    def __str__(self) -> str:
        if self.detail is not None and self.detail.description:
            return f"{self.message} ({self.status_code}): {self.detail.description}"
        return f"{self.message} ({self.status_code})"
