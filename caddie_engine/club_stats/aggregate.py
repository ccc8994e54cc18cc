"""Per-club distance, accuracy and dispersion statistics from the shot log.

Shots are expected in chronological order; the "last 10" average relies on
it. Every percentage uses only the shots that carry the measurement it is
about, so a shot without ``distanceOffline`` never counts as a straight one.
"""

from __future__ import annotations

import logging
import math
import statistics
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from caddie_engine.clubs import Club, club_display_name, normalize_club_id
from caddie_engine.constants import (
    MIN_CLUB_SHOTS,
    MISS_DIRECTION_DEADBAND_YARDS,
    MISS_DISTANCE_YARDS,
    MISS_LATERAL_YARDS,
    RECENT_SHOTS_WINDOW,
)
from caddie_engine.numbers import mean, round_half_up, round_int
from caddie_engine.shots.models import Shot, carry_misses

from .models import ClubAnalytics, ClubStats, MissDirection, Tendency
from .tendencies import club_tendency_note

logger = logging.getLogger(__name__)


def _share(values: Sequence[float], predicate: Callable[[float], bool]) -> int:
    if not values:
        return 0
    hits = sum(1 for value in values if predicate(value))
    return round_int(hits / len(values) * 100)


def _one_decimal(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round_half_up(value, 1)


def _stdev(values: Sequence[float]) -> Optional[float]:
    if len(values) < 2:
        return None
    return statistics.stdev(values)


def group_shots_by_club(shots: Iterable[Shot]) -> Dict[str, List[Shot]]:
    groups: Dict[str, List[Shot]] = {}
    for shot in shots:
        if not shot.club or shot.club == Club.PUTTER.value:
            continue
        if shot.distance_actual is None:
            continue
        groups.setdefault(shot.club, []).append(shot)
    return groups


def summarize_club(club: str, shots: Sequence[Shot]) -> Optional[ClubStats]:
    distances = [
        shot.distance_actual
        for shot in shots
        if shot.distance_actual is not None and shot.distance_actual > 0
    ]
    if not distances:
        return None
    offlines = [s.distance_offline for s in shots if s.distance_offline is not None]
    to_target = [
        s.distance_to_target for s in shots if s.distance_to_target is not None
    ]
    misses = carry_misses(shots)

    lateral = _stdev(offlines)
    depth = _stdev(distances)
    radius = None
    if lateral is not None and depth is not None:
        radius = round_int(math.hypot(lateral, depth))

    return ClubStats(
        club=club,
        total_shots=len(shots),
        avg_distance=_one_decimal(statistics.fmean(distances)),
        median_distance=_one_decimal(statistics.median(distances)),
        std_distance=_one_decimal(depth if depth is not None else 0.0),
        min_distance=round_int(min(distances)),
        max_distance=round_int(max(distances)),
        last10_avg=_one_decimal(mean(distances[-RECENT_SHOTS_WINDOW:])),
        avg_offline=_one_decimal(mean(offlines)),
        std_offline=_one_decimal(lateral),
        miss_left_pct=_share(offlines, lambda d: d < -MISS_LATERAL_YARDS),
        miss_right_pct=_share(offlines, lambda d: d > MISS_LATERAL_YARDS),
        miss_short_pct=_share(misses, lambda d: d < -MISS_DISTANCE_YARDS),
        miss_long_pct=_share(misses, lambda d: d > MISS_DISTANCE_YARDS),
        dispersion_radius=radius,
        lateral_dispersion=_one_decimal(lateral),
        distance_dispersion=_one_decimal(depth),
        avg_distance_to_target=_one_decimal(mean(to_target)),
    )


def compute_club_stats(shots: Iterable[Shot]) -> Dict[str, ClubStats]:
    stats: Dict[str, ClubStats] = {}
    for club, group in group_shots_by_club(shots).items():
        summary = summarize_club(club, group)
        if summary is not None:
            stats[club] = summary
    return stats


def miss_direction(avg_offline: Optional[float]) -> Optional[MissDirection]:
    if avg_offline is None:
        return None
    if avg_offline > MISS_DIRECTION_DEADBAND_YARDS:
        return "Right"
    if avg_offline < -MISS_DIRECTION_DEADBAND_YARDS:
        return "Left"
    return "Center"


def locked_message(shots_remaining: int) -> str:
    noun = "shot" if shots_remaining == 1 else "shots"
    return f"Log {shots_remaining} more {noun} with this club to unlock analytics"


def build_club_analytics(
    club: str,
    stats: Optional[ClubStats],
    tendencies: Iterable[Tendency] = (),
) -> ClubAnalytics:
    """Gate precomputed stats behind the minimum sample size."""

    club_id = normalize_club_id(club) or club
    total = stats.total_shots if stats is not None else 0
    label = club_display_name(club_id)
    if stats is None or total < MIN_CLUB_SHOTS:
        remaining = MIN_CLUB_SHOTS - total
        logger.debug(
            "club analytics locked",
            extra={"club_analytics": {"club": club_id, "total_shots": total}},
        )
        return ClubAnalytics(
            club=club_id,
            label=label,
            locked=True,
            total_shots=total,
            shots_remaining=remaining,
            message=locked_message(remaining),
        )
    return ClubAnalytics(
        club=club_id,
        label=label,
        locked=False,
        total_shots=total,
        stats=stats,
        miss_direction=miss_direction(stats.avg_offline),
        tendency_note=club_tendency_note(tendencies, club_id),
    )


def compute_club_analytics(
    shots: Iterable[Shot],
    club: str,
    tendencies: Iterable[Tendency] = (),
) -> ClubAnalytics:
    club_id = normalize_club_id(club) or club
    stats = compute_club_stats(shot for shot in shots if shot.club == club_id)
    return build_club_analytics(club_id, stats.get(club_id), tendencies)


__all__ = [
    "build_club_analytics",
    "compute_club_analytics",
    "compute_club_stats",
    "group_shots_by_club",
    "locked_message",
    "miss_direction",
    "summarize_club",
]
