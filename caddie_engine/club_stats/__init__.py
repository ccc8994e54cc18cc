from .aggregate import (
    build_club_analytics,
    compute_club_analytics,
    compute_club_stats,
    miss_direction,
)
from .models import ClubAnalytics, ClubStats, Tendency, TendencyData
from .personalization import (
    DataLevel,
    PlayerInsights,
    aim_adjustment,
    blend_confidence,
    build_player_insights,
    determine_data_level,
    effective_club_distance,
    is_feature_ready,
)
from .tendencies import (
    club_tendency_note,
    detect_tendencies,
    find_tendency,
    select_club_tendency,
    tendencies_by_type,
    tendency_confidence,
)

__all__ = [
    "ClubAnalytics",
    "ClubStats",
    "DataLevel",
    "PlayerInsights",
    "Tendency",
    "TendencyData",
    "aim_adjustment",
    "blend_confidence",
    "build_club_analytics",
    "build_player_insights",
    "club_tendency_note",
    "compute_club_analytics",
    "compute_club_stats",
    "detect_tendencies",
    "determine_data_level",
    "effective_club_distance",
    "find_tendency",
    "is_feature_ready",
    "miss_direction",
    "select_club_tendency",
    "tendencies_by_type",
    "tendency_confidence",
]
