"""Plays-like breakdown for the shot detail view.

Turns the per-factor detail records attached to a shot into labelled rows,
plus the headline delta between nominal and effective distance. Rows under a
yard are hidden as noise; the delta and ``effects_total`` are never filtered.
"""

from __future__ import annotations

import logging
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from caddie_engine.constants import MIN_AIM_OFFSET_YARDS, MIN_DISPLAY_EFFECT_YARDS
from caddie_engine.numbers import format_yards
from caddie_engine.shots.models import Shot, WindDetail

logger = logging.getLogger(__name__)

RowKey = Literal["wind", "temp", "elev", "alt"]

NO_ADJUSTMENTS_MESSAGE = "No significant adjustments"
NO_ADJUSTMENTS_DETAIL = "Conditions are neutral for this shot"


class AdjustmentRow(BaseModel):
    key: RowKey
    icon: str
    label: str
    detail: str
    value: float


class PlaysLikeBreakdown(BaseModel):
    distance: float
    effective_distance: float = Field(alias="effectiveDistance")
    delta: float
    effects_total: float = Field(alias="effectsTotal")
    rows: List[AdjustmentRow] = Field(default_factory=list)
    aim_guidance: Optional[str] = Field(default=None, alias="aimGuidance")
    message: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @property
    def empty(self) -> bool:
        return not self.rows


def _visible(effect: float) -> bool:
    return abs(effect) >= MIN_DISPLAY_EFFECT_YARDS


def aim_guidance(wind: WindDetail | None) -> str | None:
    """Return the wind aim hint, or ``None`` when the offset is just noise."""

    if wind is None or not wind.aim_direction:
        return None
    if wind.aim_offset_yards < MIN_AIM_OFFSET_YARDS:
        return None
    return (
        f"Aim {format_yards(wind.aim_offset_yards)} yards "
        f"{wind.aim_direction} for wind"
    )


def adjustment_rows(shot: Shot) -> List[AdjustmentRow]:
    adjustments = shot.adjustments
    wind = adjustments.wind_detail
    temp = adjustments.temperature_detail
    elev = adjustments.elevation_detail

    rows: List[AdjustmentRow] = []
    if wind is not None and _visible(wind.distance_effect):
        rows.append(
            AdjustmentRow(
                key="wind",
                icon="cloudy-outline",
                label="Wind",
                detail=wind.wind_effect or "",
                value=wind.distance_effect,
            )
        )
    if temp is not None and _visible(temp.distance_effect):
        rows.append(
            AdjustmentRow(
                key="temp",
                icon="thermometer-outline",
                label="Temperature",
                detail=temp.description or "",
                value=temp.distance_effect,
            )
        )
    if elev is not None and _visible(elev.slope_effect):
        uphill = elev.elevation_delta > 0
        rows.append(
            AdjustmentRow(
                key="elev",
                icon="trending-up" if uphill else "trending-down",
                label="Elevation",
                detail=(
                    f"{format_yards(abs(elev.elevation_delta))}ft "
                    f"{'uphill' if uphill else 'downhill'}"
                ),
                value=elev.slope_effect,
            )
        )
    if elev is not None and _visible(elev.altitude_effect):
        # Thinner air carries further, so it shortens the number to play.
        rows.append(
            AdjustmentRow(
                key="alt",
                icon="earth-outline",
                label="Altitude",
                detail="Thinner air at elevation",
                value=-elev.altitude_effect,
            )
        )
    return rows


def build_plays_like_breakdown(shot: Shot) -> PlaysLikeBreakdown:
    rows = adjustment_rows(shot)
    effective = shot.effective_distance or shot.distance
    delta = effective - shot.distance
    effects_total = shot.adjustments.effects_total()
    if abs(delta - effects_total) > 1e-9:
        logger.debug(
            "plays-like delta differs from summed effects",
            extra={"playslike": {"delta": delta, "effects_total": effects_total}},
        )
    return PlaysLikeBreakdown(
        distance=shot.distance,
        effective_distance=effective,
        delta=delta,
        effects_total=effects_total,
        rows=rows,
        aim_guidance=aim_guidance(shot.adjustments.wind_detail),
        message=None if rows else NO_ADJUSTMENTS_MESSAGE,
    )


__all__ = [
    "AdjustmentRow",
    "NO_ADJUSTMENTS_DETAIL",
    "NO_ADJUSTMENTS_MESSAGE",
    "PlaysLikeBreakdown",
    "adjustment_rows",
    "aim_guidance",
    "build_plays_like_breakdown",
]
