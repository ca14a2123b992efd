"""Typed view of the /statistics/latest response."""

from __future__ import annotations

from dataclasses import dataclass, fields
import json
from typing import Any

from shoporusni.errors import DecodeError


@dataclass(frozen=True)
class Counters:
    personnel_units: int
    tanks: int
    armoured_fighting_vehicles: int
    artillery_systems: int
    mlrs: int
    aa_warfare_systems: int
    planes: int
    helicopters: int
    vehicles_fuel_tanks: int
    warships_cutters: int
    cruise_missiles: int
    uav_systems: int
    special_military_equip: int
    atgm_srbm_systems: int

    @classmethod
    def from_dict(cls, raw: Any, where: str) -> Counters:
        obj = _require_dict(raw, where)
        return cls(**{f.name: _require_int(obj, f.name, where) for f in fields(cls)})


COUNTER_NAMES: tuple[str, ...] = tuple(f.name for f in fields(Counters))


@dataclass(frozen=True)
class StatsData:
    date: str
    day: int
    resource: str
    stats: Counters
    increase: Counters


@dataclass(frozen=True)
class Statistics:
    message: str
    data: StatsData


def parse(text: str) -> Statistics:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Response is not valid JSON: {exc}") from exc

    root = _require_dict(raw, "response")
    data = _require_dict(root.get("data"), "data")
    return Statistics(
        message=_require_str(root, "message", "response"),
        data=StatsData(
            date=_require_str(data, "date", "data"),
            day=_require_int(data, "day", "data"),
            resource=_require_str(data, "resource", "data"),
            stats=Counters.from_dict(data.get("stats"), "data.stats"),
            increase=Counters.from_dict(data.get("increase"), "data.increase"),
        ),
    )


def _require_dict(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"Expected an object at {where}, got {type(value).__name__}")
    return value


def _require_int(obj: dict[str, Any], key: str, where: str) -> int:
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Expected integer {where}.{key}, got {value!r}")
    return value


def _require_str(obj: dict[str, Any], key: str, where: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"Expected string {where}.{key}, got {value!r}")
    return value
