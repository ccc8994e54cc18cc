"""How much of the caddie's advice may lean on the player's own history."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from caddie_engine.constants import MIN_CLUB_SHOTS
from caddie_engine.numbers import round_half_up, round_int
from caddie_engine.shots.models import Shot

from .aggregate import compute_club_stats
from .models import ClubStats, Tendency
from .tendencies import detect_tendencies

MIN_AIM_SHOTS = 10
MIN_AIM_BIAS_YARDS = 3.0


class DataLevel(str, Enum):
    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    STRONG = "strong"


# (level, min completed rounds, min tracked shots), strongest first
_LEVEL_THRESHOLDS = (
    (DataLevel.STRONG, 10, 150),
    (DataLevel.MODERATE, 4, 50),
    (DataLevel.MINIMAL, 1, 10),
)

_FEATURE_LEVELS: Dict[str, frozenset[DataLevel]] = {
    "club_distance_override": frozenset({DataLevel.MODERATE, DataLevel.STRONG}),
    "measured_dispersion": frozenset({DataLevel.MODERATE, DataLevel.STRONG}),
    "miss_compensation": frozenset({DataLevel.STRONG}),
    "strategy_adjustment": frozenset({DataLevel.STRONG}),
    "basic_stats_display": frozenset(
        {DataLevel.MINIMAL, DataLevel.MODERATE, DataLevel.STRONG}
    ),
    "ai_recommendations": frozenset({DataLevel.STRONG}),
}

_BLEND_STEPS = ((5, 0.0), (10, 0.2), (20, 0.4), (30, 0.6), (50, 0.75))


class DataQuality(BaseModel):
    total_shots: int = Field(alias="totalShots")
    total_rounds: int = Field(alias="totalRounds")
    data_level: DataLevel = Field(alias="dataLevel")
    clubs_tracked: int = Field(alias="clubsTracked")
    tendencies_detected: int = Field(alias="tendenciesDetected")

    model_config = ConfigDict(populate_by_name=True)


class PlayerInsights(BaseModel):
    club_stats: Dict[str, ClubStats] = Field(default_factory=dict, alias="clubStats")
    tendencies: List[Tendency] = Field(default_factory=list)
    data_quality: DataQuality = Field(alias="dataQuality")

    model_config = ConfigDict(populate_by_name=True)


def determine_data_level(total_rounds: int, total_shots: int) -> DataLevel:
    for level, min_rounds, min_shots in _LEVEL_THRESHOLDS:
        if total_rounds >= min_rounds and total_shots >= min_shots:
            return level
    return DataLevel.NONE


def is_feature_ready(feature: str, level: DataLevel | str) -> bool:
    allowed = _FEATURE_LEVELS.get(feature)
    if allowed is None:
        return False
    return DataLevel(level) in allowed


def blend_confidence(sample_size: int) -> float:
    """Weight given to measured numbers over what the player typed in."""
    for limit, weight in _BLEND_STEPS:
        if sample_size < limit:
            return weight
    return 0.85


def _usable(stats: Optional[ClubStats], min_shots: int) -> bool:
    return stats is not None and stats.total_shots >= min_shots


def effective_club_distance(stats: Optional[ClubStats], entered_distance: float) -> float:
    if not _usable(stats, MIN_CLUB_SHOTS) or not stats.avg_distance:
        return entered_distance
    weight = blend_confidence(stats.total_shots)
    return round_int(entered_distance * (1 - weight) + stats.avg_distance * weight)


def aim_adjustment(stats: Optional[ClubStats]) -> float:
    """Yards to shift the aim point; negative means aim left."""

    if not _usable(stats, MIN_AIM_SHOTS) or stats.avg_offline is None:
        return 0.0
    if abs(stats.avg_offline) < MIN_AIM_BIAS_YARDS:
        return 0.0
    weight = blend_confidence(stats.total_shots)
    return -round_half_up(stats.avg_offline * weight, 1)


def build_player_insights(shots: Iterable[Shot], total_rounds: int = 0) -> PlayerInsights:
    shot_list = list(shots)
    club_stats = compute_club_stats(shot_list)
    tendencies = detect_tendencies(shot_list, club_stats)
    total_shots = sum(stats.total_shots for stats in club_stats.values())
    return PlayerInsights(
        club_stats=club_stats,
        tendencies=tendencies,
        data_quality=DataQuality(
            total_shots=total_shots,
            total_rounds=total_rounds,
            data_level=determine_data_level(total_rounds, total_shots),
            clubs_tracked=len(club_stats),
            tendencies_detected=len(tendencies),
        ),
    )


__all__ = [
    "DataLevel",
    "DataQuality",
    "PlayerInsights",
    "aim_adjustment",
    "blend_confidence",
    "build_player_insights",
    "determine_data_level",
    "effective_club_distance",
    "is_feature_ready",
]
