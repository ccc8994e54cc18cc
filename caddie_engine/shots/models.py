"""Pydantic models for shots as recorded or previewed by the round tracker."""

from __future__ import annotations

from typing import Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from caddie_engine.clubs import normalize_club_id

Confidence = Literal["low", "medium", "high"]


class WindDetail(BaseModel):
    adjusted_distance: Optional[float] = Field(default=None, alias="adjustedDistance")
    distance_effect: float = Field(default=0.0, alias="distanceEffect")
    wind_effect: str = Field(default="", alias="windEffect")
    club_adjustment: float = Field(default=0.0, alias="clubAdjustment")
    aim_offset_yards: float = Field(default=0.0, alias="aimOffsetYards")
    aim_direction: Optional[str] = Field(default=None, alias="aimDirection")
    description: str = ""

    model_config = ConfigDict(populate_by_name=True)


class TemperatureDetail(BaseModel):
    adjusted_distance: Optional[float] = Field(default=None, alias="adjustedDistance")
    distance_effect: float = Field(default=0.0, alias="distanceEffect")
    percent_change: float = Field(default=0.0, alias="percentChange")
    description: str = ""

    model_config = ConfigDict(populate_by_name=True)


class ElevationDetail(BaseModel):
    adjusted_distance: Optional[float] = Field(default=None, alias="adjustedDistance")
    elevation_delta: float = Field(default=0.0, alias="elevationDelta")  # +uphill, ft
    slope_effect: float = Field(default=0.0, alias="slopeEffect")
    altitude_effect: float = Field(default=0.0, alias="altitudeEffect")
    description: str = ""

    model_config = ConfigDict(populate_by_name=True)


class ShotAdjustments(BaseModel):
    wind_detail: Optional[WindDetail] = Field(default=None, alias="windDetail")
    temperature_detail: Optional[TemperatureDetail] = Field(
        default=None, alias="temperatureDetail"
    )
    elevation_detail: Optional[ElevationDetail] = Field(
        default=None, alias="elevationDetail"
    )

    model_config = ConfigDict(populate_by_name=True)

    def effects_total(self) -> float:
        """Signed sum of every present effect, with altitude counted against."""
        total = 0.0
        if self.wind_detail is not None:
            total += self.wind_detail.distance_effect
        if self.temperature_detail is not None:
            total += self.temperature_detail.distance_effect
        if self.elevation_detail is not None:
            total += self.elevation_detail.slope_effect
            total -= self.elevation_detail.altitude_effect
        return total


class HazardZone(BaseModel):
    name: str = ""
    type: str
    distance_to_edge: float = Field(default=0.0, alias="distanceToEdge")
    direction: str = ""

    model_config = ConfigDict(populate_by_name=True)


class SafeZone(BaseModel):
    direction: Optional[str] = None
    description: Optional[str] = None


class Shot(BaseModel):
    shot_number: int = Field(default=1, ge=1, alias="shotNumber")
    club: Optional[str] = None
    distance: float = 0.0
    effective_distance: Optional[float] = Field(
        default=None, alias="effectiveDistance"
    )
    adjustments: ShotAdjustments = Field(default_factory=ShotAdjustments)
    avoid_zones: List[HazardZone] = Field(default_factory=list, alias="avoidZones")
    safe_zone: Optional[SafeZone] = Field(default=None, alias="safeZone")
    warnings: List[str] = Field(default_factory=list)
    confidence: Optional[Confidence] = None

    # Ground truth, filled in after the shot is played.
    distance_actual: Optional[float] = Field(default=None, alias="distanceActual")
    distance_offline: Optional[float] = Field(
        default=None, alias="distanceOffline"
    )  # + right, - left
    distance_to_target: Optional[float] = Field(
        default=None, alias="distanceToTarget"
    )
    result: Optional[str] = None
    lie_type: Optional[str] = Field(default=None, alias="lieType")
    wind_speed: Optional[float] = Field(default=None, alias="windSpeed")  # mph

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("club", mode="before")
    @classmethod
    def _normalize_club(cls, value: object) -> object:
        if isinstance(value, str):
            return normalize_club_id(value)
        return value

    @field_validator("adjustments", mode="before")
    @classmethod
    def _default_adjustments(cls, value: object) -> object:
        return ShotAdjustments() if value is None else value

    @field_validator("avoid_zones", "warnings", mode="before")
    @classmethod
    def _default_list(cls, value: object) -> object:
        return [] if value is None else value

    @model_validator(mode="after")
    def _default_effective_distance(self) -> "Shot":
        if self.effective_distance is None:
            self.effective_distance = self.distance
        return self

    @property
    def delta(self) -> float:
        return (self.effective_distance or self.distance) - self.distance


def carry_misses(shots: Iterable[Shot]) -> List[float]:
    """Actual minus planned carry for every shot that has both."""

    return [
        shot.distance_actual - shot.distance
        for shot in shots
        if shot.distance_actual is not None and shot.distance > 0
    ]


__all__ = [
    "Confidence",
    "ElevationDetail",
    "HazardZone",
    "SafeZone",
    "Shot",
    "ShotAdjustments",
    "TemperatureDetail",
    "WindDetail",
    "carry_misses",
]
