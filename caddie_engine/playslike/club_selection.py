from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from caddie_engine.clubs import club_display_name
from caddie_engine.numbers import format_yards, round_int
from caddie_engine.shots.models import Confidence

LIE_FACTORS: Dict[str, float] = {
    "fairway": 1.0,
    "rough": 0.9,
    "heavy_rough": 0.8,
    "bunker": 0.95,
    "divot": 0.9,
    "hardpan": 0.9,
}

# Clubs within this window of the target count as a match; long is preferred.
MATCH_SHORT_YARDS = -5
MATCH_LONG_YARDS = 10
HIGH_CONFIDENCE_GAP_YARDS = 3

AWKWARD_MIN_YARDS = 30
AWKWARD_MAX_YARDS = 50
WEDGE_FULL_SWING_BUFFER = 10
DEFAULT_LAYUP_YARDS = 80


class ClubOption(BaseModel):
    club: str
    distance: int
    gap: int
    confidence: Optional[Confidence] = None
    note: Optional[str] = None


class ClubSelection(BaseModel):
    primary: Optional[ClubOption] = None
    alternate: Optional[ClubOption] = None
    description: str
    lie_adjustment: Optional[str] = Field(default=None, alias="lieAdjustment")

    model_config = ConfigDict(populate_by_name=True)


class AwkwardDistance(BaseModel):
    is_awkward: bool = Field(alias="isAwkward")
    distance_after_shot: float = Field(alias="distanceAfterShot")
    description: str
    problem: Optional[str] = None
    ideal_distance: Optional[float] = Field(default=None, alias="idealDistance")
    recommendation: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


def _option(club: str, distance: int, target: float, **extra) -> ClubOption:
    return ClubOption(
        club=club, distance=distance, gap=round_int(distance - target), **extra
    )


def select_clubs_for_distance(
    target_distance: float,
    club_distances: Mapping[str, float] | None,
    lie: str = "fairway",
) -> ClubSelection:
    """Pick a primary and alternate club for ``target_distance`` from the bag."""

    if not club_distances:
        return ClubSelection(description="No club data available")

    factor = LIE_FACTORS.get(lie, 1.0)
    bag = sorted(
        ((club, round_int(distance * factor)) for club, distance in club_distances.items()),
        key=lambda item: item[1],
        reverse=True,
    )

    primary: Optional[ClubOption] = None
    alternate: Optional[ClubOption] = None
    for index, (club, carry) in enumerate(bag):
        gap = carry - target_distance
        if MATCH_SHORT_YARDS <= gap <= MATCH_LONG_YARDS:
            primary = _option(
                club,
                carry,
                target_distance,
                confidence="high" if abs(gap) <= HIGH_CONFIDENCE_GAP_YARDS else "medium",
            )
            if index + 1 < len(bag):
                next_club, next_carry = bag[index + 1]
                alternate = _option(
                    next_club,
                    next_carry,
                    target_distance,
                    note="If you want to flight it down",
                )
            break
        if gap < MATCH_SHORT_YARDS and index > 0:
            prev_club, prev_carry = bag[index - 1]
            if prev_carry - target_distance < MATCH_SHORT_YARDS:
                # Whole bag is short of the target.
                break
            primary = _option(
                prev_club,
                prev_carry,
                target_distance,
                confidence="medium",
                note="Between clubs - taking the longer one",
            )
            alternate = _option(
                club, carry, target_distance, note="Shorter option if conditions favor it"
            )
            break

    if primary is None:
        longest_club, longest = bag[0]
        if target_distance > longest:
            primary = _option(
                longest_club,
                longest,
                target_distance,
                confidence="low",
                note="Target is beyond your longest club",
            )
        else:
            shortest_club, shortest = bag[-1]
            primary = _option(
                shortest_club,
                shortest,
                target_distance,
                confidence="low",
                note="Consider a partial swing or bump-and-run",
            )

    lie_adjustment = None
    if factor < 1:
        lie_adjustment = f"{round_int((1 - factor) * 100)}% reduction for {lie}"

    return ClubSelection(
        primary=primary,
        alternate=alternate,
        description=(
            f"{club_display_name(primary.club)} ({primary.distance} yards) "
            f"for {format_yards(target_distance)} yard shot"
        ),
        lie_adjustment=lie_adjustment,
    )


def _is_wedge(club: str) -> bool:
    return club.startswith("w_") or club in {"pw", "gw", "sw", "lw"} or "wedge" in club


def detect_awkward_distance(
    distance_after_shot: float, club_distances: Mapping[str, float] | None = None
) -> AwkwardDistance:
    """Flag leaves that are too long to chip and too short for a full wedge."""

    if not AWKWARD_MIN_YARDS <= distance_after_shot <= AWKWARD_MAX_YARDS:
        if distance_after_shot < AWKWARD_MIN_YARDS:
            description = "Good distance - chip or pitch range"
        else:
            description = "Good distance - full swing territory"
        return AwkwardDistance(
            is_awkward=False,
            distance_after_shot=distance_after_shot,
            description=description,
        )

    wedges: List[tuple[float, str]] = sorted(
        (distance, club)
        for club, distance in (club_distances or {}).items()
        if _is_wedge(club)
    )
    if wedges:
        shortest_distance, shortest_club = wedges[0]
        ideal = shortest_distance + WEDGE_FULL_SWING_BUFFER
        wedge_name = club_display_name(shortest_club)
    else:
        ideal = DEFAULT_LAYUP_YARDS
        wedge_name = "wedge"

    leave = format_yards(distance_after_shot)
    return AwkwardDistance(
        is_awkward=True,
        distance_after_shot=distance_after_shot,
        problem=f"{leave} yards is awkward - too long for chip, too short for full swing",
        ideal_distance=ideal,
        recommendation=(
            f"Lay up to {format_yards(ideal)} yards instead for a full {wedge_name}"
        ),
        description=(
            f"Consider a different club to leave {format_yards(ideal)} yards "
            f"instead of {leave}"
        ),
    )


__all__ = [
    "AwkwardDistance",
    "ClubOption",
    "ClubSelection",
    "LIE_FACTORS",
    "detect_awkward_distance",
    "select_clubs_for_distance",
]
