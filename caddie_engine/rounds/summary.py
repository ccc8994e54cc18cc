from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from caddie_engine.shots.models import Shot

from .insights import generate_round_insights
from .models import FAIRWAY_HIT, HoleScore, Insight

FULL_ROUND_HOLES = 18
BIRDIE_FEST_BIRDIES = 4

# score minus par -> distribution bucket; anything past the ends is clamped
_DISTRIBUTION_BUCKETS = (
    (-2, "eagles"),
    (-1, "birdies"),
    (0, "pars"),
    (1, "bogeys"),
    (2, "doubles"),
    (3, "triplePlus"),
)


class NineSummary(BaseModel):
    holes: int
    score: int
    par: int


class RatioStat(BaseModel):
    made: int
    total: int

    @property
    def display(self) -> str:
        return f"{self.made}/{self.total}" if self.total else "-"


class RoundSummary(BaseModel):
    holes_played: int = Field(alias="holesPlayed")
    total_score: int = Field(alias="totalScore")
    total_par: int = Field(alias="totalPar")
    score_to_par: int = Field(alias="scoreToPar")
    to_par_display: str = Field(alias="toParDisplay")
    total_putts: int = Field(alias="totalPutts")
    front_nine: NineSummary = Field(alias="frontNine")
    back_nine: NineSummary = Field(alias="backNine")
    fairways: RatioStat
    greens_in_regulation: RatioStat = Field(alias="greensInRegulation")
    distribution: Dict[str, int]
    penalties: int
    achievements: List[str] = Field(default_factory=list)
    good_round: bool = Field(alias="goodRound")
    caddie_message: str = Field(alias="caddieMessage")
    insights: List[Insight] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


def format_to_par(value: int) -> str:
    if value == 0:
        return "E"
    prefix = "+" if value > 0 else ""
    return f"{prefix}{value}"


def _nine(holes: Sequence[HoleScore]) -> NineSummary:
    return NineSummary(
        holes=len(holes),
        score=sum(hole.score or 0 for hole in holes),
        par=sum(hole.par or 0 for hole in holes),
    )


def score_distribution(scores: Sequence[HoleScore]) -> Dict[str, int]:
    counts = {name: 0 for _, name in _DISTRIBUTION_BUCKETS}
    low, high = _DISTRIBUTION_BUCKETS[0][0], _DISTRIBUTION_BUCKETS[-1][0]
    names = dict(_DISTRIBUTION_BUCKETS)
    for hole in scores:
        if not hole.score or not hole.par:
            continue
        diff = min(max(hole.score - hole.par, low), high)
        counts[names[diff]] += 1
    return counts


def caddie_message(score_to_par: int, eagles: int) -> str:
    if eagles > 0:
        return (
            "An eagle! That's the kind of shot you'll remember forever. "
            "Pure ball striking today."
        )
    if score_to_par < -2:
        return (
            "Exceptional round. Your game was firing on all cylinders today. "
            "Let's keep this momentum going."
        )
    if score_to_par < 0:
        return (
            "Under par - that's solid golf. I noticed some great course "
            "management decisions out there."
        )
    if score_to_par == 0:
        return (
            "Even par is always a good day. You showed great composure and "
            "made some clutch saves."
        )
    if score_to_par <= 5:
        return (
            "Good round overall. A few holes got away from us, but there's a "
            "lot to build on here."
        )
    return (
        "Every round is a learning opportunity. Let's look at the data and "
        "find where to improve next time."
    )


def _achievements(
    holes_played: int, score_to_par: int, penalties: int, distribution: Dict[str, int]
) -> List[str]:
    earned: List[str] = []
    if distribution["eagles"] > 0:
        earned.append("Eagle Club")
    if penalties == 0 and holes_played >= FULL_ROUND_HOLES:
        earned.append("Clean Sheet")
    if distribution["birdies"] >= BIRDIE_FEST_BIRDIES:
        earned.append("Birdie Fest")
    if score_to_par <= 0 and holes_played >= FULL_ROUND_HOLES:
        earned.append("Under Par")
    return earned


def build_round_summary(
    scores: Sequence[HoleScore], shots: Optional[Sequence[Shot]] = None
) -> RoundSummary:
    holes_played = len(scores)
    total_score = sum(hole.score or 0 for hole in scores)
    total_par = sum(hole.par or 0 for hole in scores)
    score_to_par = total_score - total_par
    penalties = sum(hole.penalties for hole in scores)

    fairway_holes = [hole for hole in scores if hole.fairway_counted]
    gir_holes = [hole for hole in scores if hole.gir is not None]
    distribution = score_distribution(scores)

    return RoundSummary(
        holes_played=holes_played,
        total_score=total_score,
        total_par=total_par,
        score_to_par=score_to_par,
        to_par_display=format_to_par(score_to_par),
        total_putts=sum(hole.putts or 0 for hole in scores),
        front_nine=_nine([hole for hole in scores if hole.front_nine]),
        back_nine=_nine([hole for hole in scores if not hole.front_nine]),
        fairways=RatioStat(
            made=sum(1 for hole in fairway_holes if hole.fairway_hit == FAIRWAY_HIT),
            total=len(fairway_holes),
        ),
        greens_in_regulation=RatioStat(
            made=sum(1 for hole in gir_holes if hole.gir),
            total=len(gir_holes),
        ),
        distribution=distribution,
        penalties=penalties,
        achievements=_achievements(holes_played, score_to_par, penalties, distribution),
        good_round=score_to_par <= 0 or distribution["eagles"] > 0,
        caddie_message=caddie_message(score_to_par, distribution["eagles"]),
        insights=generate_round_insights(scores, shots or []),
    )


__all__ = [
    "NineSummary",
    "RatioStat",
    "RoundSummary",
    "build_round_summary",
    "caddie_message",
    "format_to_par",
    "score_distribution",
]
