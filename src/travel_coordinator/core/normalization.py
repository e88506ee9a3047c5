"""Currency and date normalization helpers."""

from __future__ import annotations

import os
from datetime import date, datetime, timezone
from typing import Dict, Optional, Union

import pycountry

DEFAULT_CURRENCY = os.getenv("TRAVEL_COORDINATOR_CURRENCY", "USD")

DateLike = Union[date, datetime, str]


def normalize_currency(value: Optional[str]) -> str:
    if not value:
        return DEFAULT_CURRENCY
    return value.strip().upper()


def is_known_currency(value: Optional[str]) -> bool:
    if not value:
        return False
    return pycountry.currencies.get(alpha_3=value.strip().upper()) is not None


def _utc_date(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date().isoformat()


def to_iso_date(value: Optional[DateLike]) -> Optional[str]:
    """Return the calendar date of ``value`` as ``YYYY-MM-DD``.

    Accepts dates, datetimes and ISO strings (timestamps are truncated to
    their date part). Returns ``None`` when the value is empty or cannot be
    read as a date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _utc_date(value)
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    if not text:
        return None
    try:
        return _utc_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date().isoformat()
    except ValueError:
        return None


def build_meta(currency: Optional[str] = None) -> Dict[str, str]:
    return {"currency": normalize_currency(currency)}
