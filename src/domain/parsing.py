from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Iterable

from domain.errors import ParseError, ValidationError
from domain.models import MonthYear

THOUSANDS_SEPARATOR = ","

# Optional sign and decimal digits only; no whitespace or digit separators.
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_amount(amount: str) -> float:
    """Parse a display amount such as ``"$1,234.50"`` into a float.

    Thousands separators are stripped and the first character is treated as
    the currency symbol.
    """
    number = str(amount).replace(THOUSANDS_SEPARATOR, "")[1:]
    if not _DECIMAL_RE.fullmatch(number):
        raise ParseError(f"Unparseable amount: {amount!r}")
    return float(number)


def _parse_int(text: str, value: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValidationError(f"Invalid monthYear {value!r}; expected M-YYYY")
    return int(text)


def parse_month_year(value: str) -> MonthYear:
    parts = str(value).split("-")
    if len(parts) != 2:
        raise ValidationError(f"Invalid monthYear {value!r}; expected M-YYYY")
    month, year = _parse_int(parts[0], value), _parse_int(parts[1], value)
    if month < 1 or month > 12:
        raise ValidationError(f"Invalid month in monthYear {value!r}; expected 1-12")
    return MonthYear(month=month, year=year)


def normalize_txn_type(value: str, allowed: Iterable[str]) -> str:
    normalized = str(value).lower()
    allowed_set = {a.lower() for a in allowed}
    if normalized not in allowed_set:
        raise ValidationError(f"Invalid txnType: {normalized!r}")
    return normalized


def month_year_of(timestamp_ms: int) -> MonthYear | None:
    """UTC calendar month of an epoch-millisecond timestamp.

    Returns ``None`` when the timestamp lies outside the range ``datetime``
    can represent; such a record never matches a requested month.
    """
    try:
        moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None
    return MonthYear(month=moment.month, year=moment.year)
