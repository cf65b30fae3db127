"""
Small helpers shared by the resource modules.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Mapping, Union

from dateutil import parser as _dateutil_parser

from .errors import ValidationError

__all__ = [
    "DateLike",
    "get_date_in_secs",
    "is_defined",
    "is_non_null_object",
    "normalize_date",
]

DateLike = Union[int, float, str, date, datetime]

# Parts missing from a date string are taken from here, never from today.
_PARSE_DEFAULT = datetime(1970, 1, 1)


def is_non_null_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_defined(value: Any) -> bool:
    return value is not None


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def get_date_in_secs(value: Union[str, date, datetime]) -> int:
    """
    Convert a date string, ``date`` or ``datetime`` to Unix seconds.

    Naive values are interpreted as UTC so the result does not depend on the
    host's time zone. A string missing its day or month gets ``1`` for it, so
    ``"Oct 2021"`` is the first of October.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            moment = _dateutil_parser.parse(value, default=_PARSE_DEFAULT)
        except (ValueError, OverflowError) as exc:
            raise ValidationError(f"Unable to parse date '{value}'") from exc
    else:
        raise ValidationError(f"Unsupported date value of type {type(value).__name__}")
    return math.floor(_as_utc(moment).timestamp())


def normalize_date(value: DateLike) -> Union[int, float]:
    """
    Return ``value`` as Unix seconds.

    Numbers are assumed to be seconds already and are returned untouched; a
    millisecond timestamp is not detected.
    """
    if isinstance(value, bool):
        raise ValidationError("Boolean is not a valid date")
    if isinstance(value, (int, float)):
        return value
    return get_date_in_secs(value)
