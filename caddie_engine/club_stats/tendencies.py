"""Player tendencies: building them from the shot log and picking the one
note the analytics tab shows for a club."""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Sequence

from caddie_engine.clubs import LONG_IRON_CLUBS
from caddie_engine.constants import CLUB_BIAS, MIN_CLUB_SHOTS, MIN_TENDENCY_CONFIDENCE
from caddie_engine.numbers import round_half_up, round_int
from caddie_engine.shots.models import Shot, carry_misses

from .models import ClubStats, Tendency, TendencyData

logger = logging.getLogger(__name__)

DISTANCE_RANGE = "distance_range"
CONDITION = "condition"
SITUATIONAL = "situational"

LATERAL_BIAS_YARDS = 3.0
DISTANCE_BIAS_YARDS = 5.0
LONG_IRON_MIN_SHOTS = 8
LONG_IRON_BIAS_YARDS = 4.0
WINDY_MPH = 15.0
CALM_MPH = 10.0
WIND_EXTRA_MISS_YARDS = 3.0
ROUGH_PENALTY_YARDS = -5.0

# (key, min yards inclusive, max yards exclusive, label)
DISTANCE_RANGES = (
    ("100_125", 100, 125, "100-125"),
    ("125_150", 125, 150, "125-150"),
    ("150_175", 150, 175, "150-175"),
    ("175_200", 175, 200, "175-200"),
    ("200_plus", 200, 999, "200+"),
)
GREEN_RESULTS = frozenset({"green", "fringe"})

_CONFIDENCE_STEPS = ((5, 0.0), (10, 0.3), (15, 0.5), (20, 0.65), (30, 0.8), (50, 0.9))


def tendency_confidence(sample_size: int) -> float:
    for limit, confidence in _CONFIDENCE_STEPS:
        if sample_size < limit:
            return confidence
    return 0.95


def club_miss_key(club: str) -> str:
    return f"{club}_miss"


def select_club_tendency(
    tendencies: Iterable[Tendency], club: str
) -> Optional[Tendency]:
    """First confident lateral-miss tendency for ``club``, if any."""

    key = club_miss_key(club)
    for tendency in tendencies:
        if (
            tendency.type == CLUB_BIAS
            and tendency.key == key
            and tendency.confidence >= MIN_TENDENCY_CONFIDENCE
        ):
            return tendency
    return None


def club_tendency_note(tendencies: Iterable[Tendency], club: str) -> Optional[str]:
    tendency = select_club_tendency(tendencies, club)
    if tendency is None or not tendency.description:
        return None
    return tendency.description


def tendencies_by_type(
    tendencies: Iterable[Tendency],
    tendency_type: str,
    min_confidence: float = MIN_TENDENCY_CONFIDENCE,
) -> List[Tendency]:
    return [
        t for t in tendencies if t.type == tendency_type and t.confidence >= min_confidence
    ]


def find_tendency(
    tendencies: Iterable[Tendency], tendency_type: str, key: str
) -> Optional[Tendency]:
    for tendency in tendencies:
        if tendency.type == tendency_type and tendency.key == key:
            return tendency
    return None


def _tendency(type_: str, key: str, sample_size: int, confidence_n: int, **data) -> Tendency:
    return Tendency(
        type=type_,
        key=key,
        data=TendencyData(**data),
        confidence=tendency_confidence(confidence_n),
        sample_size=sample_size,
    )


def _avg(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _club_bias(shots: Sequence[Shot], stats: Mapping[str, ClubStats]) -> List[Tendency]:
    found: List[Tendency] = []
    for club, club_stats in stats.items():
        if club_stats.total_shots < MIN_CLUB_SHOTS:
            continue
        spoken = club.replace("_", " ")

        offline = club_stats.avg_offline
        if offline is not None and abs(offline) > LATERAL_BIAS_YARDS:
            direction = "right" if offline > 0 else "left"
            found.append(
                _tendency(
                    CLUB_BIAS,
                    club_miss_key(club),
                    club_stats.total_shots,
                    club_stats.total_shots,
                    direction=direction,
                    yards=abs(offline),
                    club=club,
                    description=f"Tends to miss {spoken} {abs(offline):.1f} yards {direction}",
                )
            )

        misses = carry_misses(s for s in shots if s.club == club)
        if len(misses) >= MIN_CLUB_SHOTS:
            avg_miss = _avg(misses)
            if abs(avg_miss) > DISTANCE_BIAS_YARDS:
                bias = "long" if avg_miss > 0 else "short"
                found.append(
                    _tendency(
                        CLUB_BIAS,
                        f"{club}_distance",
                        len(misses),
                        len(misses),
                        bias=bias,
                        yards=abs(avg_miss),
                        club=club,
                        description=(
                            f"Hits {spoken} {round_int(abs(avg_miss))} yards {bias} on average"
                        ),
                    )
                )
    return found


def _long_iron_bias(shots: Sequence[Shot]) -> List[Tendency]:
    offlines = [
        s.distance_offline
        for s in shots
        if s.club in LONG_IRON_CLUBS and s.distance_offline is not None
    ]
    if len(offlines) < LONG_IRON_MIN_SHOTS:
        return []
    avg_offline = _avg(offlines)
    if abs(avg_offline) <= LONG_IRON_BIAS_YARDS:
        return []
    direction = "right" if avg_offline > 0 else "left"
    return [
        _tendency(
            CLUB_BIAS,
            "long_iron_miss",
            len(offlines),
            len(offlines),
            direction=direction,
            yards=abs(avg_offline),
            clubs=sorted(LONG_IRON_CLUBS),
            description=f"Tends to push long irons {abs(avg_offline):.1f} yards {direction}",
        )
    ]


def _distance_ranges(shots: Sequence[Shot]) -> List[Tendency]:
    found: List[Tendency] = []
    for key, low, high, label in DISTANCE_RANGES:
        in_range = [
            s for s in shots if s.result is not None and low <= s.distance < high
        ]
        if len(in_range) < MIN_CLUB_SHOTS:
            continue
        hits = sum(1 for s in in_range if s.result in GREEN_RESULTS)
        gir_pct = round_int(hits / len(in_range) * 100)
        found.append(
            _tendency(
                DISTANCE_RANGE,
                key,
                len(in_range),
                len(in_range),
                girPct=gir_pct,
                totalShots=len(in_range),
                greenHits=hits,
                range=label,
                description=f"{gir_pct}% GIR from {label} yards",
            )
        )
    return found


def _wind_condition(shots: Sequence[Shot]) -> List[Tendency]:
    windy = [
        abs(s.distance_offline)
        for s in shots
        if s.wind_speed is not None
        and s.wind_speed >= WINDY_MPH
        and s.distance_offline is not None
    ]
    calm = [
        abs(s.distance_offline)
        for s in shots
        if s.wind_speed is not None
        and s.wind_speed < CALM_MPH
        and s.distance_offline is not None
    ]
    if len(windy) < MIN_CLUB_SHOTS or len(calm) < MIN_CLUB_SHOTS:
        return []
    windy_avg, calm_avg = _avg(windy), _avg(calm)
    extra = windy_avg - calm_avg
    if extra <= WIND_EXTRA_MISS_YARDS:
        return []
    return [
        _tendency(
            CONDITION,
            "wind_over_15",
            len(windy),
            min(len(windy), len(calm)),
            windyAvgMiss=round_half_up(windy_avg, 1),
            calmAvgMiss=round_half_up(calm_avg, 1),
            extraMiss=round_half_up(extra, 1),
            description=f"Misses {extra:.1f} extra yards in wind above 15mph",
        )
    ]


def _rough_approaches(shots: Sequence[Shot]) -> List[Tendency]:
    rough = carry_misses(s for s in shots if s.lie_type == "rough")
    fairway = carry_misses(
        s for s in shots if s.lie_type == "fairway" and s.shot_number > 1
    )
    if len(rough) < MIN_CLUB_SHOTS or len(fairway) < MIN_CLUB_SHOTS:
        return []
    penalty = _avg(rough) - _avg(fairway)
    if penalty >= ROUGH_PENALTY_YARDS:
        return []
    return [
        _tendency(
            SITUATIONAL,
            "approach_from_rough",
            len(rough),
            min(len(rough), len(fairway)),
            roughPenalty=round_int(abs(penalty)),
            description=f"Loses {round_int(abs(penalty))} yards from rough vs fairway",
        )
    ]


def detect_tendencies(
    shots: Iterable[Shot], club_stats: Mapping[str, ClubStats]
) -> List[Tendency]:
    """Build the tendency records later consumed by :func:`select_club_tendency`."""

    shot_list = list(shots)
    tendencies = [
        *_club_bias(shot_list, club_stats),
        *_long_iron_bias(shot_list),
        *_distance_ranges(shot_list),
        *_wind_condition(shot_list),
        *_rough_approaches(shot_list),
    ]
    logger.debug(
        "tendencies detected",
        extra={"tendencies": {"shots": len(shot_list), "count": len(tendencies)}},
    )
    return tendencies


__all__ = [
    "CONDITION",
    "DISTANCE_RANGE",
    "SITUATIONAL",
    "club_miss_key",
    "club_tendency_note",
    "detect_tendencies",
    "find_tendency",
    "select_club_tendency",
    "tendencies_by_type",
    "tendency_confidence",
]
