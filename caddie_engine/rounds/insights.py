"""Post-round insight lines.

Every rule looks at the whole round on its own and may contribute lines. The
rules run in a fixed priority order and the combined list is cut to
``MAX_ROUND_INSIGHTS`` once, at the end.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence, Tuple

from caddie_engine.clubs import Club, club_display_name
from caddie_engine.constants import (
    ACCURATE_CLUB_MAX_YARDS,
    FADED_GAP_STROKES,
    HOLES_PER_NINE,
    MAX_ROUND_INSIGHTS,
    MIN_APPROACH_SHOTS,
    MIN_APPROACH_SHOTS_PER_CLUB,
    MIN_DRIVER_SHOTS,
    MIN_HOLES_FOR_CLEAN_CARD,
    MIN_MISS_PATTERN_SHOTS,
    MIN_PAR_TYPE_HOLES,
    MISS_PATTERN_OFFLINE_YARDS,
    MISS_PATTERN_SHARE,
    PENALTY_WARNING_STROKES,
    STRONG_FINISH_GAP_STROKES,
)
from caddie_engine.numbers import round_int, signed
from caddie_engine.shots.models import Shot

from .models import HoleScore, Insight

logger = logging.getLogger(__name__)

GOLFER = "\U0001F3CC"
ARROW_RIGHT = "➡"
ARROW_LEFT = "⬅"
STAR = "⭐"
WARNING = "⚠"
SIREN = "\U0001F6A8"
CHECK = "✅"
CHART_DOWN = "\U0001F4C9"
CHART_UP = "\U0001F4C8"
TARGET = "\U0001F3AF"

InsightRule = Callable[[Sequence[HoleScore], Sequence[Shot]], List[Insight]]


def _to_par(holes: Sequence[HoleScore]) -> int:
    return sum(hole.to_par for hole in holes)


def driver_distance(scores: Sequence[HoleScore], shots: Sequence[Shot]) -> List[Insight]:
    drives = [
        shot.distance_actual
        for shot in shots
        if shot.club == Club.DRIVER.value
        and shot.distance_actual is not None
        and shot.distance_actual > 0
    ]
    if len(drives) < MIN_DRIVER_SHOTS:
        return []
    average = round_int(sum(drives) / len(drives))
    return [
        Insight(
            icon=GOLFER,
            text=f"Your driver averaged {average} yards today ({len(drives)} drives).",
        )
    ]


def miss_pattern(scores: Sequence[HoleScore], shots: Sequence[Shot]) -> List[Insight]:
    misses = [
        shot.distance_offline
        for shot in shots
        if shot.distance_offline is not None
        and abs(shot.distance_offline) > MISS_PATTERN_OFFLINE_YARDS
    ]
    total = len(misses)
    if total < MIN_MISS_PATTERN_SHOTS:
        return []
    right = sum(1 for offline in misses if offline > 0)
    left = total - right
    if right / total >= MISS_PATTERN_SHARE:
        return [
            Insight(
                icon=ARROW_RIGHT,
                text=f"{right} of {total} missed shots went right - check your alignment.",
            )
        ]
    if left / total >= MISS_PATTERN_SHARE:
        return [
            Insight(
                icon=ARROW_LEFT,
                text=f"{left} of {total} missed shots went left - check your alignment.",
            )
        ]
    return []


def par_type_scoring(scores: Sequence[HoleScore], shots: Sequence[Shot]) -> List[Insight]:
    found: List[Insight] = []
    par3s = [hole for hole in scores if hole.par == 3]
    if len(par3s) >= MIN_PAR_TYPE_HOLES:
        diff = _to_par(par3s)
        if diff <= -1:
            found.append(
                Insight(icon=STAR, text=f"Great par 3 play - {signed(diff)} on par 3s today!")
            )
        elif diff >= 3:
            found.append(
                Insight(
                    icon=WARNING,
                    text=(
                        f"Par 3s were tough today (+{diff}). "
                        "Consider more center-green approaches."
                    ),
                )
            )
    par5s = [hole for hole in scores if hole.par == 5]
    if len(par5s) >= MIN_PAR_TYPE_HOLES:
        diff = _to_par(par5s)
        if diff <= -1:
            found.append(
                Insight(icon=STAR, text=f"Strong par 5 play - {signed(diff)} on par 5s!")
            )
    return found


def penalties(scores: Sequence[HoleScore], shots: Sequence[Shot]) -> List[Insight]:
    total = sum(hole.penalties for hole in scores)
    if total >= PENALTY_WARNING_STROKES:
        return [
            Insight(
                icon=SIREN,
                text=f"{total} penalty strokes cost you today. Course management is key.",
            )
        ]
    if total == 0 and len(scores) >= MIN_HOLES_FOR_CLEAN_CARD:
        return [Insight(icon=CHECK, text="Zero penalties - great course management!")]
    return []


def nine_hole_split(scores: Sequence[HoleScore], shots: Sequence[Shot]) -> List[Insight]:
    front = [hole for hole in scores if hole.front_nine]
    back = [hole for hole in scores if not hole.front_nine]
    if len(front) < HOLES_PER_NINE or len(back) < HOLES_PER_NINE:
        return []
    gap = _to_par(back) - _to_par(front)
    if gap >= FADED_GAP_STROKES:
        return [
            Insight(
                icon=CHART_DOWN,
                text=(
                    f"You faded on the back nine (+{gap} strokes vs front). "
                    "Focus on staying patient late."
                ),
            )
        ]
    if gap <= STRONG_FINISH_GAP_STROKES:
        return [
            Insight(
                icon=CHART_UP,
                text=f"Strong finish - {abs(gap)} strokes better on the back nine!",
            )
        ]
    return []


def most_accurate_club(
    scores: Sequence[HoleScore], shots: Sequence[Shot]
) -> List[Insight]:
    approaches = [
        shot
        for shot in shots
        if shot.distance_to_target is not None
        and shot.distance_to_target > 0
        and shot.club
        and shot.club not in (Club.DRIVER.value, Club.PUTTER.value)
    ]
    if len(approaches) < MIN_APPROACH_SHOTS:
        return []

    proximity: Dict[str, List[float]] = {}
    for shot in approaches:
        proximity.setdefault(shot.club, []).append(shot.distance_to_target)

    best_club = None
    best_avg = float("inf")
    for club, distances in proximity.items():
        if len(distances) < MIN_APPROACH_SHOTS_PER_CLUB:
            continue
        average = sum(distances) / len(distances)
        if average < best_avg:
            best_club, best_avg = club, average

    if best_club is None or best_avg >= ACCURATE_CLUB_MAX_YARDS:
        return []
    return [
        Insight(
            icon=TARGET,
            text=(
                f"{club_display_name(best_club)} was your most accurate club - "
                f"avg {round_int(best_avg)} yards from the pin."
            ),
        )
    ]


INSIGHT_RULES: Tuple[Tuple[str, InsightRule], ...] = (
    ("driver_distance", driver_distance),
    ("miss_pattern", miss_pattern),
    ("par_type_scoring", par_type_scoring),
    ("penalties", penalties),
    ("nine_hole_split", nine_hole_split),
    ("most_accurate_club", most_accurate_club),
)


def generate_round_insights(
    scores: Sequence[HoleScore], shots: Sequence[Shot]
) -> List[Insight]:
    if not shots:
        return []

    insights: List[Insight] = []
    for name, rule in INSIGHT_RULES:
        for insight in rule(scores, shots):
            insights.append(insight.model_copy(update={"rule": name}))
    if len(insights) > MAX_ROUND_INSIGHTS:
        logger.debug(
            "round insights truncated",
            extra={"round_insights": {"fired": len(insights)}},
        )
    return insights[:MAX_ROUND_INSIGHTS]


__all__ = [
    "INSIGHT_RULES",
    "InsightRule",
    "driver_distance",
    "generate_round_insights",
    "miss_pattern",
    "most_accurate_club",
    "nine_hole_split",
    "par_type_scoring",
    "penalties",
]
