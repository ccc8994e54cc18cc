"""Hazard and safe-zone summary for the shot detail view."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from caddie_engine.numbers import format_yards
from caddie_engine.shots.models import HazardZone, SafeZone, Shot

CLEAR_MESSAGE = "No hazards in play"
CLEAR_DETAIL = "Clear path to target"


class HazardType(str, Enum):
    WATER = "water"
    OB = "ob"
    PENALTY = "penalty"
    BUNKER = "bunker"
    WASTE_AREA = "waste_area"


class HazardSeverity(str, Enum):
    RED = "red"
    AMBER = "amber"


HAZARD_LABELS: Dict[HazardType, str] = {
    HazardType.WATER: "Water",
    HazardType.OB: "Out of Bounds",
    HazardType.PENALTY: "Penalty Area",
    HazardType.BUNKER: "Bunker",
    HazardType.WASTE_AREA: "Waste Area",
}

HAZARD_SEVERITY: Dict[HazardType, HazardSeverity] = {
    HazardType.WATER: HazardSeverity.RED,
    HazardType.OB: HazardSeverity.RED,
    HazardType.PENALTY: HazardSeverity.RED,
    HazardType.BUNKER: HazardSeverity.AMBER,
    HazardType.WASTE_AREA: HazardSeverity.AMBER,
}

SEVERITY_COLORS: Dict[HazardSeverity, str] = {
    HazardSeverity.RED: "#ef4444",
    HazardSeverity.AMBER: "#f59e0b",
}


def parse_hazard_type(value: str | None) -> Optional[HazardType]:
    if not value:
        return None
    try:
        return HazardType(value)
    except ValueError:
        return None


def hazard_label(value: str) -> str:
    hazard_type = parse_hazard_type(value)
    if hazard_type is None:
        return value
    return HAZARD_LABELS[hazard_type]


def hazard_severity(value: str) -> HazardSeverity:
    hazard_type = parse_hazard_type(value)
    if hazard_type is None:
        return HazardSeverity.AMBER
    return HAZARD_SEVERITY[hazard_type]


class HazardRow(BaseModel):
    name: str
    type: str
    label: str
    severity: HazardSeverity
    color: str
    distance_to_edge: float = Field(alias="distanceToEdge")
    distance_text: str = Field(alias="distanceText")
    direction: str

    model_config = ConfigDict(populate_by_name=True)


class SafeZoneAdvice(BaseModel):
    headline: str
    detail: Optional[str] = None


class HazardSummary(BaseModel):
    clear: bool
    message: Optional[str] = None
    detail: Optional[str] = None
    rows: List[HazardRow] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    safe_zone: Optional[SafeZoneAdvice] = Field(default=None, alias="safeZone")

    model_config = ConfigDict(populate_by_name=True)


def _row(zone: HazardZone) -> HazardRow:
    severity = hazard_severity(zone.type)
    return HazardRow(
        name=zone.name,
        type=zone.type,
        label=hazard_label(zone.type),
        severity=severity,
        color=SEVERITY_COLORS[severity],
        distance_to_edge=zone.distance_to_edge,
        distance_text=f"{format_yards(zone.distance_to_edge)} yds to edge",
        direction=zone.direction.upper(),
    )


def summarize_hazards(
    avoid_zones: Iterable[HazardZone] | None = None,
    warnings: Iterable[str] | None = None,
    safe_zone: SafeZone | None = None,
) -> HazardSummary:
    zones = list(avoid_zones or [])
    notes = list(warnings or [])
    if not zones and not notes:
        return HazardSummary(clear=True, message=CLEAR_MESSAGE, detail=CLEAR_DETAIL)

    advice = None
    if safe_zone is not None and safe_zone.direction:
        advice = SafeZoneAdvice(
            headline=f"Favor {safe_zone.direction} side",
            detail=safe_zone.description or None,
        )
    return HazardSummary(
        clear=False,
        rows=[_row(zone) for zone in zones],
        warnings=notes,
        safe_zone=advice,
    )


def summarize_shot_hazards(shot: Shot) -> HazardSummary:
    return summarize_hazards(shot.avoid_zones, shot.warnings, shot.safe_zone)


__all__ = [
    "CLEAR_DETAIL",
    "CLEAR_MESSAGE",
    "HAZARD_LABELS",
    "HAZARD_SEVERITY",
    "HazardRow",
    "HazardSeverity",
    "HazardSummary",
    "HazardType",
    "SEVERITY_COLORS",
    "SafeZoneAdvice",
    "hazard_label",
    "hazard_severity",
    "parse_hazard_type",
    "summarize_hazards",
    "summarize_shot_hazards",
]
