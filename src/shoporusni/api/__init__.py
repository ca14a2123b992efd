"""Statistics API helpers."""

from shoporusni.api.client import DEFAULT_URL, StatsClient
from shoporusni.api.models import (
    COUNTER_NAMES,
    Counters,
    Statistics,
    StatsData,
    parse,
)

__all__ = [
    "COUNTER_NAMES",
    "Counters",
    "DEFAULT_URL",
    "Statistics",
    "StatsClient",
    "StatsData",
    "parse",
]
