# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Calendar-day normalization.

A timestamp string is read as the calendar day written before its ``T``,
whatever its offset. ``2024-01-04T18:30:00Z`` is Jan 4 even though it is
Jan 5 in India. Converting to local time is never applied to strings that
carry a date part, so the same input gives the same day on every host.
"""

import re
from datetime import date, datetime, timedelta

_DATE_ONLY = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def parse_date_only(value: date | datetime | str) -> date:
    """Normalize a date-like value to a calendar day.

    Strings with a time component keep only the part before ``T``, so
    ``"2024-03-10T18:30:00Z"`` and ``"2024-03-10"`` are the same day.
    Other strings fall back to ISO parsing and are truncated to the local
    calendar day.

    Args:
        value: A date, datetime or string.

    Returns:
        The calendar day.

    Raises:
        ValueError: If the value cannot be read as a date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    if "T" in text:
        text = text.split("T", 1)[0]

    match = _DATE_ONLY.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return date(year, month, day)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Unrecognized date value: {value!r}") from e
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date()


def to_iso_date(value: date | datetime | str) -> str:
    """Return the canonical ``YYYY-MM-DD`` form of a date-like value."""
    day = parse_date_only(value)
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def iter_days(start: date, end: date):
    """Yield each calendar day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
