from datetime import timedelta

import pytest

from shoporusni.util.duration import parse_duration


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("30minutes", timedelta(minutes=30)),
        ("1s", timedelta(seconds=1)),
        ("1 s", timedelta(seconds=1)),
        ("0 ns", timedelta(0)),
        ("1h 30m", timedelta(hours=1, minutes=30)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("2days", timedelta(days=2)),
        ("1w", timedelta(weeks=1)),
        ("250ms", timedelta(milliseconds=250)),
        ("1500ns", timedelta(microseconds=1)),
        ("1M", timedelta(seconds=2_630_016)),
        ("1y", timedelta(seconds=31_557_600)),
        ("10 Minutes", timedelta(minutes=10)),
        ("5secs", timedelta(seconds=5)),
        ("2mins", timedelta(minutes=2)),
        ("3hrs", timedelta(hours=3)),
        ("2wk", timedelta(weeks=2)),
        ("2wks", timedelta(weeks=2)),
        ("250millis", timedelta(milliseconds=250)),
        ("7micros", timedelta(microseconds=7)),
        ("7µs", timedelta(microseconds=7)),
        ("2000nanos", timedelta(microseconds=2)),
    ],
)
def test_parse_duration(text: str, expected: timedelta) -> None:
    assert parse_duration(text) == expected


@pytest.mark.parametrize(
    "text", ["", "   ", "30", "minutes", "5 parsecs", "1h-30m", "99999999999y"]
)
def test_parse_duration_rejects_garbage(text: str) -> None:
    with pytest.raises(ValueError):
        parse_duration(text)
