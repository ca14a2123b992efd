"""Humantime-style duration parsing ("30minutes", "1h 30m", "0 ns")."""

from __future__ import annotations

import re
from datetime import timedelta

_NS_PER_SECOND = 1_000_000_000

UNIT_NANOSECONDS: dict[str, int] = {
    "nanos": 1,
    "nsec": 1,
    "ns": 1,
    "micros": 1_000,
    "usec": 1_000,
    "us": 1_000,
    "µs": 1_000,
    "millis": 1_000_000,
    "msec": 1_000_000,
    "ms": 1_000_000,
    "seconds": _NS_PER_SECOND,
    "second": _NS_PER_SECOND,
    "secs": _NS_PER_SECOND,
    "sec": _NS_PER_SECOND,
    "s": _NS_PER_SECOND,
    "minutes": 60 * _NS_PER_SECOND,
    "minute": 60 * _NS_PER_SECOND,
    "mins": 60 * _NS_PER_SECOND,
    "min": 60 * _NS_PER_SECOND,
    "m": 60 * _NS_PER_SECOND,
    "hours": 3_600 * _NS_PER_SECOND,
    "hour": 3_600 * _NS_PER_SECOND,
    "hrs": 3_600 * _NS_PER_SECOND,
    "hr": 3_600 * _NS_PER_SECOND,
    "h": 3_600 * _NS_PER_SECOND,
    "days": 86_400 * _NS_PER_SECOND,
    "day": 86_400 * _NS_PER_SECOND,
    "d": 86_400 * _NS_PER_SECOND,
    "weeks": 7 * 86_400 * _NS_PER_SECOND,
    "week": 7 * 86_400 * _NS_PER_SECOND,
    "wks": 7 * 86_400 * _NS_PER_SECOND,
    "wk": 7 * 86_400 * _NS_PER_SECOND,
    "w": 7 * 86_400 * _NS_PER_SECOND,
    # 30.44 days
    "months": 2_630_016 * _NS_PER_SECOND,
    "month": 2_630_016 * _NS_PER_SECOND,
    "M": 2_630_016 * _NS_PER_SECOND,
    # 365.25 days
    "years": 31_557_600 * _NS_PER_SECOND,
    "year": 31_557_600 * _NS_PER_SECOND,
    "y": 31_557_600 * _NS_PER_SECOND,
}

_GROUP_RE = re.compile(r"\s*(\d+)\s*([^\W\d_]+)\s*")


def parse_duration(text: str) -> timedelta:
    """Parse one or more ``<number><unit>`` groups into a timedelta.

    Raises ValueError on empty input, unknown units, stray characters or
    values beyond what timedelta can hold.
    Precision below one microsecond is truncated.
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty duration")

    total_ns = 0
    pos = 0
    while pos < len(raw):
        match = _GROUP_RE.match(raw, pos)
        if match is None:
            raise ValueError(f"invalid duration: {text!r}")
        number, unit = match.groups()
        # "M" is months and "m" minutes; other units are case-insensitive.
        scale = UNIT_NANOSECONDS.get(unit) or UNIT_NANOSECONDS.get(unit.lower())
        if scale is None:
            raise ValueError(f"unknown duration unit {unit!r} in {text!r}")
        total_ns += int(number) * scale
        pos = match.end()

    try:
        return timedelta(microseconds=total_ns // 1_000)
    except OverflowError as exc:
        raise ValueError(f"duration too large: {text!r}") from exc
