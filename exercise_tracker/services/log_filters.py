"""Date parsing and log filtering helpers.

Required dates are parsed strictly by the service, while the optional
``from``/``to``/``limit`` query parameters of a log request are
lenient: a value that cannot be parsed simply means the corresponding
filter is not applied.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Sequence

from dateutil.parser import parse as parse_datetime  # type: ignore

from ..models import Exercise

FIRST_DEFAULT = datetime(1970, 1, 1)
SECOND_DEFAULT = datetime(1971, 2, 2)


def parse_date(value: str) -> date:
    """Parse ``value`` into a calendar date, dropping any time of day.

    The value must name a year, month and day; dateutil would otherwise
    fill the gaps from today. Raises ``ValueError`` when the value is
    not a complete, recognisable date.
    """
    try:
        text = value.strip()
        # Parsing against two unrelated defaults shows whether any field was missing.
        first = parse_datetime(text, default=FIRST_DEFAULT).date()
        second = parse_datetime(text, default=SECOND_DEFAULT).date()
    except (OverflowError, TypeError, AttributeError) as exc:
        raise ValueError(f"Unrecognised date: {value!r}") from exc
    if first != second:
        raise ValueError(f"Incomplete date: {value!r}")
    return first


def parse_optional_date(value) -> Optional[date]:
    """Return the parsed date, or ``None`` for a blank or invalid value."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_date(value)
    except ValueError:
        return None


def parse_limit(value) -> Optional[int]:
    """Return ``value`` as a non-negative integer, or ``None`` to skip the limit."""
    if value is None:
        return None
    try:
        limit = int(str(value).strip())
    except ValueError:
        return None
    return limit if limit >= 0 else None


def filter_log(
    entries: Sequence[Exercise],
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    limit: Optional[int] = None,
) -> List[Exercise]:
    """Apply the inclusive date range and then the limit to ``entries``.

    Stored order is preserved; ``None`` for any argument leaves that
    filter out.
    """
    selected = list(entries)
    if date_from is not None:
        selected = [entry for entry in selected if entry.date >= date_from]
    if date_to is not None:
        selected = [entry for entry in selected if entry.date <= date_to]
    if limit is not None:
        selected = selected[:limit]
    return selected
