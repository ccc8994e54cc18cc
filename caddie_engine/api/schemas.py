"""Request and response bodies for the engine's HTTP routes."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from caddie_engine.club_stats.models import ClubStats, Tendency
from caddie_engine.club_stats.personalization import DataQuality
from caddie_engine.hazards.advisor import HazardSummary
from caddie_engine.playslike.breakdown import PlaysLikeBreakdown
from caddie_engine.playslike.club_selection import AwkwardDistance, ClubSelection
from caddie_engine.playslike.conditions import ClubReach, PlayingConditions
from caddie_engine.rounds.models import HoleScore, Insight
from caddie_engine.shots.models import HazardZone, SafeZone, Shot
from caddie_engine.weather.models import WeatherNote


class ComputeRequest(BaseModel):
    distance: float = Field(gt=0)
    conditions: PlayingConditions = Field(default_factory=PlayingConditions)
    shot_bearing: float = Field(default=0.0, alias="shotBearing")
    player_elevation: Optional[float] = Field(default=None, alias="playerElevation")
    target_elevation: Optional[float] = Field(default=None, alias="targetElevation")
    club: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ComputeResponse(BaseModel):
    shot: Shot
    breakdown: PlaysLikeBreakdown
    summary: str


class ClubSelectionRequest(ComputeRequest):
    club_distances: Optional[Dict[str, float]] = Field(
        default=None, alias="clubDistances"
    )
    lie: str = "fairway"
    distance_after_shot: Optional[float] = Field(
        default=None, ge=0, alias="distanceAfterShot"
    )


class ClubSelectionResponse(BaseModel):
    target_distance: float = Field(alias="targetDistance")
    plays_like_distance: float = Field(alias="playsLikeDistance")
    selection: ClubSelection
    primary_reach: Optional[ClubReach] = Field(default=None, alias="primaryReach")
    awkward: Optional[AwkwardDistance] = None

    model_config = ConfigDict(populate_by_name=True)


class HazardRequest(BaseModel):
    avoid_zones: List[HazardZone] = Field(default_factory=list, alias="avoidZones")
    warnings: List[str] = Field(default_factory=list)
    safe_zone: Optional[SafeZone] = Field(default=None, alias="safeZone")

    model_config = ConfigDict(populate_by_name=True)


class ShotHistoryRequest(BaseModel):
    shots: List[Shot] = Field(default_factory=list)
    tendencies: List[Tendency] = Field(default_factory=list)
    total_rounds: int = Field(default=0, ge=0, alias="totalRounds")

    model_config = ConfigDict(populate_by_name=True)


class TendenciesResponse(BaseModel):
    tendencies: List[Tendency] = Field(default_factory=list)
    data_quality: DataQuality = Field(alias="dataQuality")

    model_config = ConfigDict(populate_by_name=True)


class RoundRequest(BaseModel):
    scores: List[HoleScore] = Field(default_factory=list)
    shots: List[Shot] = Field(default_factory=list)


class InsightsResponse(BaseModel):
    insights: List[Insight] = Field(default_factory=list)


class WeatherNotesResponse(BaseModel):
    notes: List[WeatherNote] = Field(default_factory=list)
    good_conditions: bool = Field(alias="goodConditions")
    conditions: PlayingConditions

    model_config = ConfigDict(populate_by_name=True)


ClubStatsResponse = Dict[str, ClubStats]


__all__ = [
    "ClubSelectionRequest",
    "ClubSelectionResponse",
    "ClubStatsResponse",
    "ComputeRequest",
    "ComputeResponse",
    "HazardRequest",
    "HazardSummary",
    "InsightsResponse",
    "RoundRequest",
    "ShotHistoryRequest",
    "TendenciesResponse",
    "WeatherNotesResponse",
]
