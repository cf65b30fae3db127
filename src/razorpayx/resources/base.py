"""
Plumbing shared by the resource modules.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional

from ..core.client import HttpClient
from ..core.errors import ConfigurationError, ValidationError
from ..core.utils import normalize_date

__all__ = [
    "DEFAULT_COUNT",
    "DEFAULT_SKIP",
    "MAX_COUNT",
    "Resource",
    "normalize_fetch_all_params",
]

DEFAULT_COUNT = 10
DEFAULT_SKIP = 0
MAX_COUNT = 100


def _to_int(value: Any, name: str, maximum: Optional[int] = None) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValidationError(f"`{name}` must be an integer, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValidationError(f"`{name}` must be an integer, got {value!r}") from exc
    # Compared before truncation, so 100.5 is over a maximum of 100.
    if maximum is not None and number > maximum:
        raise ValidationError(f"`{name}` can be maximum of {maximum}")
    if not math.isfinite(number):
        raise ValidationError(f"`{name}` must be an integer, got {value!r}")
    return int(number)


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def normalize_fetch_all_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Prepare the query of a "fetch all" call.

    ``count`` above 100 is rejected; ``from``/``to`` become Unix seconds;
    ``count`` and ``skip`` default to 10 and 0. Keys keep the caller's order
    and ``None`` values are dropped.
    """
    query = dict(params or {})

    count = _to_int(query.get("count"), "count", MAX_COUNT)
    skip = _to_int(query.get("skip"), "skip")

    from_ = query.get("from")
    if from_:
        from_ = normalize_date(from_)
    to = query.get("to")
    if to:
        to = normalize_date(to)

    query.update(
        {
            "from": from_,
            "to": to,
            "count": count or DEFAULT_COUNT,
            "skip": skip or DEFAULT_SKIP,
        }
    )
    return {key: _query_value(value) for key, value in query.items() if value is not None}


class Resource:
    """Base class binding a resource path to the shared :class:`HttpClient`."""

    base_url = ""

    def __init__(self, http: HttpClient) -> None:
        self.http = http

    def _url(self, *parts: str) -> str:
        return "/".join((self.base_url, *parts))

    @staticmethod
    def _require(value: Any, name: str) -> Any:
        if not value:
            raise ConfigurationError(f"`{name}` is missing")
        return value
