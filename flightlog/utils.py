from __future__ import annotations

import re as _re
from datetime import date, datetime, timezone
from typing import Pattern, Union

_WORD_RE: Pattern[str] = _re.compile(r"\w\S*")


def to_title_case(text: str) -> str:
    """'AIRBUS a320neo' -> 'Airbus A320neo'"""
    return _WORD_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime. Date-only values and naive datetimes
    are taken as UTC midnight / UTC wall time.
    """
    v = value.strip()
    if len(v) == 10:
        d = date.fromisoformat(v)
        return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    dt = datetime.fromisoformat(v.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_iso_utc(dt: datetime) -> str:
    """2024-03-01T06:05:00+01:00 -> 2024-03-01T05:05:00.000Z"""
    return (
        dt.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def format_number(value: Union[int, float]) -> str:
    """Render whole floats without the trailing '.0' (1200.0 -> '1200')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
