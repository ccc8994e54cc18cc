"""Deterministic plays-like effects for wind, temperature and elevation.

These are rules of thumb, not ball-flight physics:

* headwind adds ~1% of the distance per mph, tailwind takes ~0.5% per mph
* every °F below 70 adds 0.2% (and above 70 takes it away)
* every 3 ft of rise adds a yard; altitude takes 2% per 1000 ft

Each effect is rounded to whole yards before it is applied, so the final
plays-like number always equals the nominal distance plus the signed sum of
the reported effects.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from caddie_engine.numbers import round_half_up, round_int, signed
from caddie_engine.shots.models import (
    ElevationDetail,
    Shot,
    ShotAdjustments,
    TemperatureDetail,
    WindDetail,
)

from .units import parse_altitude_ft, parse_temperature_f

WIND_DIRECTION_TO_BEARING = {
    "N": 0.0,
    "NNE": 22.5,
    "NE": 45.0,
    "ENE": 67.5,
    "E": 90.0,
    "ESE": 112.5,
    "SE": 135.0,
    "SSE": 157.5,
    "S": 180.0,
    "SSW": 202.5,
    "SW": 225.0,
    "WSW": 247.5,
    "W": 270.0,
    "WNW": 292.5,
    "NW": 315.0,
    "NNW": 337.5,
}

BASELINE_TEMP_F = 70.0
HEADWIND_PCT_PER_MPH = 0.01
TAILWIND_PCT_PER_MPH = 0.005
TEMP_PCT_PER_DEGREE = 0.002
FEET_PER_YARD_OF_SLOPE = 3.0
ALTITUDE_PCT_PER_1000_FT = 0.02
YARDS_PER_CLUB = 11.0
NOTABLE_EFFECT_YARDS = 3
NOTABLE_WIND_YARDS = 5


class PlayingConditions(BaseModel):
    """Weather and course inputs for a plays-like calculation."""

    wind_speed: float = Field(default=0.0, ge=0, alias="windSpeed")  # mph
    wind_direction: str = Field(default="N", alias="windDirection")  # blowing FROM
    temperature: Optional[float] = None  # °F
    course_elevation: float = Field(default=0.0, alias="courseElevation")  # ft ASL

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("wind_direction", mode="before")
    @classmethod
    def _upper_direction(cls, value: Any) -> Any:
        if value is None:
            return "N"
        if isinstance(value, str):
            return value.strip().upper() or "N"
        return value

    @field_validator("temperature", mode="before")
    @classmethod
    def _parse_temperature(cls, value: Any) -> Any:
        if value is None:
            return None
        parsed = parse_temperature_f(value)
        if parsed is None:
            raise ValueError(f"unrecognised temperature {value!r}")
        return parsed

    @field_validator("course_elevation", mode="before")
    @classmethod
    def _parse_elevation(cls, value: Any) -> Any:
        if value is None:
            return 0.0
        parsed = parse_altitude_ft(value)
        if parsed is None:
            raise ValueError(f"unrecognised elevation {value!r}")
        return parsed


class PlayingLikeResult(BaseModel):
    base_distance: float = Field(alias="baseDistance")
    playing_like_distance: float = Field(alias="playingLikeDistance")
    adjustments: ShotAdjustments
    summary: str

    model_config = ConfigDict(populate_by_name=True)

    def to_shot(self, **shot_fields: Any) -> Shot:
        return Shot(
            distance=self.base_distance,
            effective_distance=self.playing_like_distance,
            adjustments=self.adjustments,
            **shot_fields,
        )


class ClubReach(BaseModel):
    club_distance: float = Field(alias="clubDistance")
    effective_reach: float = Field(alias="effectiveReach")
    wind: int = 0
    temperature: int = 0
    elevation: int = 0
    total: int = 0
    adjustments: Optional[ShotAdjustments] = None
    description: str

    model_config = ConfigDict(populate_by_name=True)


def _wind_components(
    wind_speed: float, wind_direction: str, shot_bearing: float
) -> tuple[float, float]:
    """Return (headwind, crosswind) in mph. Positive crosswind pushes right."""
    wind_bearing = WIND_DIRECTION_TO_BEARING.get(wind_direction.upper(), 0.0)
    angle = shot_bearing - wind_bearing
    if angle > 180:
        angle -= 360
    if angle < -180:
        angle += 360
    rad = math.radians(angle)
    return wind_speed * math.cos(rad), wind_speed * math.sin(rad)


def _classify_wind(head: float, cross: float) -> str:
    if abs(head) > abs(cross) * 2:
        return "into" if head > 0 else "helping"
    if abs(cross) > abs(head) * 2:
        return "crosswind-right" if cross > 0 else "crosswind-left"
    if head > 0:
        return "into-right" if cross > 0 else "into-left"
    return "helping-right" if cross > 0 else "helping-left"


def calculate_wind_adjustment(
    base_distance: float,
    wind_speed: float,
    wind_direction: str,
    shot_bearing: float,
) -> WindDetail:
    if not wind_speed:
        return WindDetail(
            adjusted_distance=base_distance,
            distance_effect=0,
            wind_effect="calm",
            club_adjustment=0,
            aim_offset_yards=0,
            aim_direction=None,
            description="Calm conditions - no wind adjustment needed",
        )

    head, cross = _wind_components(wind_speed, wind_direction, shot_bearing)
    if head > 0:
        raw_effect = base_distance * head * HEADWIND_PCT_PER_MPH
    else:
        raw_effect = base_distance * head * TAILWIND_PCT_PER_MPH
    distance_effect = round_int(raw_effect)

    if base_distance > 180:
        crosswind_factor = 2.5
    elif base_distance > 140:
        crosswind_factor = 2.0
    else:
        crosswind_factor = 1.5
    aim_offset = round_int(abs(cross) * crosswind_factor)
    aim_direction = None
    if aim_offset > 0:
        aim_direction = "left" if cross > 0 else "right"

    parts = []
    if abs(raw_effect) >= NOTABLE_WIND_YARDS:
        parts.append(f"{signed(distance_effect)} yards for wind.")
    if aim_offset >= NOTABLE_EFFECT_YARDS and aim_direction:
        parts.append(
            f"Aim {aim_offset} yards {aim_direction} to compensate for crosswind."
        )
    description = " ".join(parts) or "Minimal wind effect on this shot."

    return WindDetail(
        adjusted_distance=base_distance + distance_effect,
        distance_effect=distance_effect,
        wind_effect=_classify_wind(head, cross),
        club_adjustment=round_half_up(raw_effect / YARDS_PER_CLUB, 1),
        aim_offset_yards=aim_offset,
        aim_direction=aim_direction,
        description=description,
    )


def calculate_temperature_adjustment(
    base_distance: float,
    temperature: Optional[float],
    baseline_temp: float = BASELINE_TEMP_F,
) -> TemperatureDetail:
    if temperature is None:
        return TemperatureDetail(
            adjusted_distance=base_distance,
            distance_effect=0,
            percent_change=0,
            description="No temperature data available",
        )

    percent_change = (baseline_temp - temperature) * TEMP_PCT_PER_DEGREE
    distance_effect = round_int(base_distance * percent_change)
    shown_temp = f"{temperature:g}"
    if abs(distance_effect) >= NOTABLE_EFFECT_YARDS:
        if distance_effect > 0:
            description = (
                f"Cold conditions ({shown_temp}°F) - ball travels "
                f"{distance_effect} yards shorter"
            )
        else:
            description = (
                f"Warm conditions ({shown_temp}°F) - ball travels "
                f"{abs(distance_effect)} yards longer"
            )
    else:
        description = "Temperature has minimal effect on distance"

    return TemperatureDetail(
        adjusted_distance=base_distance + distance_effect,
        distance_effect=distance_effect,
        percent_change=round_half_up(percent_change * 100, 1),
        description=description,
    )


def calculate_elevation_adjustment(
    base_distance: float,
    player_elevation: Optional[float],
    target_elevation: Optional[float],
    course_elevation: float = 0.0,
) -> ElevationDetail:
    if player_elevation is None or target_elevation is None:
        return ElevationDetail(
            adjusted_distance=base_distance,
            elevation_delta=0,
            slope_effect=0,
            altitude_effect=0,
            description="No elevation data available",
        )

    elevation_delta = target_elevation - player_elevation
    slope_effect = round_int(elevation_delta / FEET_PER_YARD_OF_SLOPE)
    altitude_effect = round_int(
        base_distance * (course_elevation / 1000.0) * ALTITUDE_PCT_PER_1000_FT
    )
    adjusted = base_distance + slope_effect - altitude_effect

    parts = []
    if abs(slope_effect) >= NOTABLE_EFFECT_YARDS:
        feet = abs(round_int(elevation_delta))
        if elevation_delta > 0:
            parts.append(f"uphill {feet}ft (+{slope_effect} yards)")
        else:
            parts.append(f"downhill {feet}ft ({slope_effect} yards)")
    if altitude_effect >= NOTABLE_EFFECT_YARDS:
        parts.append(
            f"altitude bonus -{altitude_effect} yards "
            f"({round_int(course_elevation)}ft elevation)"
        )
    if parts:
        description = f"Plays {adjusted:g} yards: {', '.join(parts)}"
    else:
        description = "Elevation has minimal effect on this shot"

    return ElevationDetail(
        adjusted_distance=adjusted,
        elevation_delta=round_int(elevation_delta),
        slope_effect=slope_effect,
        altitude_effect=altitude_effect,
        description=description,
    )


def build_shot_summary(
    base_distance: float,
    effective_distance: float,
    wind: WindDetail,
    temp: TemperatureDetail,
    elevation: ElevationDetail,
) -> str:
    if abs(effective_distance - base_distance) < NOTABLE_EFFECT_YARDS:
        return f"{base_distance:g} yards - plays true to distance"

    parts = []
    if abs(wind.distance_effect) >= NOTABLE_EFFECT_YARDS:
        parts.append(f"wind {signed(wind.distance_effect)}")
    if abs(temp.distance_effect) >= NOTABLE_EFFECT_YARDS:
        parts.append(f"temp {signed(temp.distance_effect)}")
    if abs(elevation.slope_effect) >= NOTABLE_EFFECT_YARDS:
        parts.append(f"elevation {signed(elevation.slope_effect)}")
    if elevation.altitude_effect >= NOTABLE_EFFECT_YARDS:
        parts.append(f"altitude {signed(-elevation.altitude_effect)}")
    return (
        f"{base_distance:g} yards plays like {effective_distance:g} "
        f"({', '.join(parts)})"
    )


def compute_playing_like_distance(
    base_distance: float,
    conditions: PlayingConditions | None = None,
    shot_bearing: float = 0.0,
    player_elevation: Optional[float] = None,
    target_elevation: Optional[float] = None,
) -> PlayingLikeResult:
    """Apply wind, then temperature, then elevation to ``base_distance``."""

    conditions = conditions or PlayingConditions()
    wind = calculate_wind_adjustment(
        base_distance, conditions.wind_speed, conditions.wind_direction, shot_bearing
    )
    temp = calculate_temperature_adjustment(
        wind.adjusted_distance, conditions.temperature
    )
    elevation = calculate_elevation_adjustment(
        temp.adjusted_distance,
        player_elevation,
        target_elevation,
        conditions.course_elevation,
    )
    playing_like = elevation.adjusted_distance
    return PlayingLikeResult(
        base_distance=base_distance,
        playing_like_distance=playing_like,
        adjustments=ShotAdjustments(
            wind_detail=wind,
            temperature_detail=temp,
            elevation_detail=elevation,
        ),
        summary=build_shot_summary(base_distance, playing_like, wind, temp, elevation),
    )


def calculate_club_effective_reach(
    club_distance: float,
    conditions: PlayingConditions | None = None,
    shot_bearing: float = 0.0,
    player_elevation: Optional[float] = None,
    target_elevation: Optional[float] = None,
) -> ClubReach:
    """Where a club lands in these conditions: plays-like run backwards.

    A headwind that makes a target play longer makes the ball land shorter,
    so every effect is applied with the opposite sign.
    """

    if not club_distance or club_distance <= 0:
        return ClubReach(
            club_distance=0,
            effective_reach=0,
            description="Invalid club distance",
        )

    conditions = conditions or PlayingConditions()
    wind = calculate_wind_adjustment(
        club_distance, conditions.wind_speed, conditions.wind_direction, shot_bearing
    )
    temp = calculate_temperature_adjustment(club_distance, conditions.temperature)
    elev = calculate_elevation_adjustment(
        club_distance, player_elevation, target_elevation, conditions.course_elevation
    )

    wind_effect = -wind.distance_effect
    temp_effect = -temp.distance_effect
    elev_effect = -elev.slope_effect + elev.altitude_effect
    total = wind_effect + temp_effect + elev_effect
    reach = round_int(club_distance + total)

    parts = []
    if abs(wind_effect) >= NOTABLE_EFFECT_YARDS:
        parts.append(f"wind {signed(wind_effect)}")
    if abs(temp_effect) >= NOTABLE_EFFECT_YARDS:
        parts.append(f"temp {signed(temp_effect)}")
    if abs(elev_effect) >= NOTABLE_EFFECT_YARDS:
        parts.append(f"elevation {signed(elev_effect)}")
    detail = ", ".join(parts) if parts else "no significant adjustments"

    return ClubReach(
        club_distance=club_distance,
        effective_reach=reach,
        wind=round_int(wind_effect),
        temperature=round_int(temp_effect),
        elevation=round_int(elev_effect),
        total=round_int(total),
        adjustments=ShotAdjustments(
            wind_detail=wind, temperature_detail=temp, elevation_detail=elev
        ),
        description=f"{club_distance:g} yd club reaches {reach} yds ({detail})",
    )


def build_adjusted_shot(
    base_distance: float,
    conditions: PlayingConditions | None = None,
    shot_bearing: float = 0.0,
    player_elevation: Optional[float] = None,
    target_elevation: Optional[float] = None,
    **shot_fields: Any,
) -> Shot:
    """Preview a shot whose effective distance carries the computed effects."""

    return compute_playing_like_distance(
        base_distance, conditions, shot_bearing, player_elevation, target_elevation
    ).to_shot(**shot_fields)


__all__ = [
    "ClubReach",
    "PlayingConditions",
    "PlayingLikeResult",
    "WIND_DIRECTION_TO_BEARING",
    "build_adjusted_shot",
    "build_shot_summary",
    "calculate_club_effective_reach",
    "calculate_elevation_adjustment",
    "calculate_temperature_adjustment",
    "calculate_wind_adjustment",
    "compute_playing_like_distance",
]
