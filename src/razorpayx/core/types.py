"""
Value types shared across the RazorpayX resources.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

__all__ = [
    "Collection",
    "Notes",
    "TransactionMode",
    "TransactionStatus",
]

Notes = Dict[str, str]


class TransactionMode(str, enum.Enum):
    NEFT = "NEFT"
    RTGS = "RTGS"
    IMPS = "IMPS"
    UPI = "UPI"
    AMAZONPAY = "amazonpay"


class TransactionStatus(str, enum.Enum):
    QUEUED = "queued"
    PENDING = "pending"
    REJECTED = "rejected"
    PROCESSING = "processing"
    PROCESSED = "processed"
    CANCELLED = "cancelled"
    REVERSED = "reversed"


@dataclass(frozen=True)
class Collection:
    """Typed view of the ``{entity, count, items}`` list envelope."""

    entity: str
    count: int
    items: List[Dict[str, Any]]

    @classmethod
    def from_data(cls, payload: Mapping[str, Any]) -> "Collection":
        items = list(payload.get("items") or [])
        return cls(
            entity=payload.get("entity", "collection"),
            count=int(payload.get("count", len(items))),
            items=items,
        )
