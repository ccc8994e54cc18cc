from .breakdown import (
    AdjustmentRow,
    PlaysLikeBreakdown,
    aim_guidance,
    build_plays_like_breakdown,
)
from .club_selection import (
    AwkwardDistance,
    ClubSelection,
    detect_awkward_distance,
    select_clubs_for_distance,
)
from .conditions import (
    ClubReach,
    PlayingConditions,
    PlayingLikeResult,
    build_adjusted_shot,
    calculate_club_effective_reach,
    calculate_elevation_adjustment,
    calculate_temperature_adjustment,
    calculate_wind_adjustment,
    compute_playing_like_distance,
)

__all__ = [
    "AdjustmentRow",
    "AwkwardDistance",
    "ClubReach",
    "ClubSelection",
    "PlayingConditions",
    "PlayingLikeResult",
    "PlaysLikeBreakdown",
    "aim_guidance",
    "build_adjusted_shot",
    "build_plays_like_breakdown",
    "calculate_club_effective_reach",
    "calculate_elevation_adjustment",
    "calculate_temperature_adjustment",
    "calculate_wind_adjustment",
    "compute_playing_like_distance",
    "detect_awkward_distance",
    "select_clubs_for_distance",
]
