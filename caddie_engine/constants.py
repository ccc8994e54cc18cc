"""Fixed thresholds shared across the shot-adjustment and analytics engine."""

from __future__ import annotations

# Plays-like display
MIN_DISPLAY_EFFECT_YARDS = 1.0
MIN_AIM_OFFSET_YARDS = 3.0

# Club analytics
MIN_CLUB_SHOTS = 5
RECENT_SHOTS_WINDOW = 10
MISS_LATERAL_YARDS = 5.0
MISS_DISTANCE_YARDS = 5.0
MISS_DIRECTION_DEADBAND_YARDS = 2.0

# Tendencies
MIN_TENDENCY_CONFIDENCE = 0.3
CLUB_BIAS = "club_bias"

# Round insights
MAX_ROUND_INSIGHTS = 5
MIN_DRIVER_SHOTS = 2
MISS_PATTERN_OFFLINE_YARDS = 2.0
MIN_MISS_PATTERN_SHOTS = 5
MISS_PATTERN_SHARE = 0.65
MIN_PAR_TYPE_HOLES = 3
PENALTY_WARNING_STROKES = 3
MIN_HOLES_FOR_CLEAN_CARD = 9
HOLES_PER_NINE = 9
FADED_GAP_STROKES = 4
STRONG_FINISH_GAP_STROKES = -3
MIN_APPROACH_SHOTS = 3
MIN_APPROACH_SHOTS_PER_CLUB = 2
ACCURATE_CLUB_MAX_YARDS = 30.0

__all__ = [
    "ACCURATE_CLUB_MAX_YARDS",
    "CLUB_BIAS",
    "FADED_GAP_STROKES",
    "HOLES_PER_NINE",
    "MAX_ROUND_INSIGHTS",
    "MIN_AIM_OFFSET_YARDS",
    "MIN_APPROACH_SHOTS",
    "MIN_APPROACH_SHOTS_PER_CLUB",
    "MIN_CLUB_SHOTS",
    "MIN_DISPLAY_EFFECT_YARDS",
    "MIN_DRIVER_SHOTS",
    "MIN_HOLES_FOR_CLEAN_CARD",
    "MIN_MISS_PATTERN_SHOTS",
    "MIN_PAR_TYPE_HOLES",
    "MIN_TENDENCY_CONFIDENCE",
    "MISS_DIRECTION_DEADBAND_YARDS",
    "MISS_DISTANCE_YARDS",
    "MISS_LATERAL_YARDS",
    "MISS_PATTERN_OFFLINE_YARDS",
    "MISS_PATTERN_SHARE",
    "PENALTY_WARNING_STROKES",
    "RECENT_SHOTS_WINDOW",
    "STRONG_FINISH_GAP_STROKES",
]
