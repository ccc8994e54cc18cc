from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

_TEMP_PATTERN = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)\s*°?\s*([cCfF])?\s*$")
_ALT_PATTERN = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)\s*(m|ft)?\s*$", re.IGNORECASE)

_FEET_PER_METRE = 3.28084


@dataclass(frozen=True)
class Measurement:
    value: float
    unit: str


def _float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and value == value:
        return float(value)
    if isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError:
            return None
        if parsed == parsed:
            return parsed
    return None


def _parse_measurement(
    value: Any, pattern: re.Pattern[str], allowed_units: set[str], default_unit: str
) -> Optional[Measurement]:
    if isinstance(value, Mapping):
        raw = _float(value.get("value"))
        unit = value.get("unit", default_unit)
        if raw is None or not isinstance(unit, str):
            return None
        normalized = unit.strip().lower()
        if normalized not in allowed_units:
            return None
        return Measurement(raw, normalized)
    if isinstance(value, str):
        match = pattern.match(value)
        if not match:
            return None
        unit = (match.group(2) or default_unit).strip().lower()
        if unit not in allowed_units:
            return None
        return Measurement(float(match.group(1)), unit)
    raw = _float(value)
    if raw is None:
        return None
    return Measurement(raw, default_unit)


def parse_temperature_f(value: Any) -> Optional[float]:
    """Parse ``68``, ``"68F"``, ``"20 C"`` or ``{"value": 20, "unit": "C"}`` into °F."""

    measurement = _parse_measurement(value, _TEMP_PATTERN, {"c", "f"}, "f")
    if measurement is None:
        return None
    if measurement.unit == "c":
        return measurement.value * 9.0 / 5.0 + 32.0
    return measurement.value


def parse_altitude_ft(value: Any) -> Optional[float]:
    """Parse ``1500``, ``"1500 ft"`` or ``"450 m"`` into feet."""

    measurement = _parse_measurement(value, _ALT_PATTERN, {"m", "ft"}, "ft")
    if measurement is None:
        return None
    if measurement.unit == "m":
        return measurement.value * _FEET_PER_METRE
    return measurement.value


__all__ = ["Measurement", "parse_altitude_ft", "parse_temperature_f"]
