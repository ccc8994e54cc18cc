from __future__ import annotations

from typing import Iterable

from prometheus_client import Counter, Histogram

from caddie_engine.club_stats.models import ClubAnalytics
from caddie_engine.playslike.breakdown import PlaysLikeBreakdown
from caddie_engine.rounds.models import Insight

from . import REGISTRY

PLAYSLIKE_BREAKDOWNS_TOTAL = Counter(
    "caddie_playslike_breakdowns_total",
    "Plays-like breakdowns built, by whether any adjustment row was shown",
    ["state"],
    registry=REGISTRY,
)

PLAYSLIKE_DELTA_YARDS = Histogram(
    "caddie_playslike_delta_yards",
    "Magnitude of effective minus nominal distance (yards)",
    buckets=(0.0, 1.0, 3.0, 5.0, 10.0, 15.0, 20.0, 30.0, 50.0),
    registry=REGISTRY,
)

CLUB_ANALYTICS_TOTAL = Counter(
    "caddie_club_analytics_total",
    "Club analytics views served, by lock state",
    ["state"],
    registry=REGISTRY,
)

ROUND_INSIGHTS_TOTAL = Counter(
    "caddie_round_insights_total",
    "Round insight lines returned, by rule",
    ["rule"],
    registry=REGISTRY,
)


def observe_breakdown(breakdown: PlaysLikeBreakdown) -> None:
    PLAYSLIKE_BREAKDOWNS_TOTAL.labels(state="empty" if breakdown.empty else "rows").inc()
    PLAYSLIKE_DELTA_YARDS.observe(abs(breakdown.delta))


def observe_club_analytics(analytics: ClubAnalytics) -> None:
    CLUB_ANALYTICS_TOTAL.labels(state="locked" if analytics.locked else "unlocked").inc()


def observe_insights(insights: Iterable[Insight]) -> None:
    for insight in insights:
        ROUND_INSIGHTS_TOTAL.labels(rule=insight.rule or "unknown").inc()


__all__ = [
    "CLUB_ANALYTICS_TOTAL",
    "PLAYSLIKE_BREAKDOWNS_TOTAL",
    "PLAYSLIKE_DELTA_YARDS",
    "ROUND_INSIGHTS_TOTAL",
    "observe_breakdown",
    "observe_club_analytics",
    "observe_insights",
]
