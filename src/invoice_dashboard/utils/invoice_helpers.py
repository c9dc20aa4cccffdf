"""Helper functions for invoice parsing, matching and formatting."""

from __future__ import annotations

import math
from datetime import datetime, time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invoice_dashboard.models.invoice import InvoiceRecord

# Tried in order before falling back to ISO 8601
_DATE_FORMATS = (
    "%m/%d/%Y",
    "%m/%d/%y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
)


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse a timestamp string into a naive datetime.

    Supports m/d/Y, m/d/y, Y/m/d (with optional time) and ISO 8601. Offsets
    are converted to local time and dropped so every parsed value can be
    compared with every other.

    Args:
        date_str: The timestamp text, e.g. "2024-01-31T23:00" or "1/5/2024".

    Returns:
        datetime if parsing succeeds, None otherwise.
    """
    if not isinstance(date_str, str):
        return None
    date_str = date_str.strip()
    if not date_str:
        return None

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            pass

    try:
        parsed = datetime.fromisoformat(date_str.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def end_of_day(value: datetime) -> datetime:
    """Return the last millisecond of the calendar day containing value."""
    return datetime.combine(value.date(), time(23, 59, 59, 999000))


def is_valid_amount(amount: float | None) -> bool:
    """Return True if amount is a finite number (not None, NaN or infinite)."""
    if amount is None or isinstance(amount, bool):
        return False
    try:
        return math.isfinite(amount)
    except TypeError:
        return False


def format_currency(value: float | None, symbol: str = "¥") -> str:
    """Format an amount with the currency symbol, treating invalid input as zero."""
    if not is_valid_amount(value):
        value = 0.0
    return f"{symbol}{value:,.2f}"


def format_timestamp(date_str: str | None) -> str:
    """Format a record timestamp for display, or echo it back when unparseable."""
    parsed = parse_date(date_str)
    if parsed is None:
        return date_str or "N/A"
    return parsed.strftime("%Y-%m-%d %H:%M")


def matches_keyword(record: "InvoiceRecord", keyword: str) -> bool:
    """
    Check if a record matches the search keyword.

    The keyword is lower-cased and tested as a substring of each of the
    record's searchable terms. A blank keyword matches everything.
    """
    if not keyword or not keyword.strip():
        return True
    normalized = keyword.lower()
    return any(normalized in value for value in record.searchable_terms())
