from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from caddie_engine.api.errors import validation_error_response
from caddie_engine.api.schemas import (
    ClubStatsResponse,
    ShotHistoryRequest,
    TendenciesResponse,
)
from caddie_engine.club_stats.aggregate import compute_club_analytics, compute_club_stats
from caddie_engine.club_stats.models import ClubAnalytics
from caddie_engine.club_stats.personalization import build_player_insights
from caddie_engine.metrics.engine_metrics import observe_club_analytics
from caddie_engine.security import require_api_key

logger = logging.getLogger("caddie_engine.api")

router = APIRouter(
    prefix="/api/clubs",
    tags=["clubs"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/stats", response_model=ClubStatsResponse)
def post_club_stats(payload: dict):
    start = time.perf_counter()
    try:
        request = ShotHistoryRequest.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    stats = compute_club_stats(request.shots)
    logger.info(
        "club_stats",
        extra={
            "caddie_api": {
                "shots": len(request.shots),
                "clubs": len(stats),
                "duration_ms": (time.perf_counter() - start) * 1000,
            }
        },
    )
    return stats


@router.post("/tendencies", response_model=TendenciesResponse)
def post_tendencies(payload: dict):
    try:
        request = ShotHistoryRequest.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    insights = build_player_insights(request.shots, request.total_rounds)
    logger.info(
        "club_tendencies",
        extra={
            "caddie_api": {
                "shots": len(request.shots),
                "tendencies": len(insights.tendencies),
                "data_level": insights.data_quality.data_level.value,
            }
        },
    )
    return TendenciesResponse(
        tendencies=insights.tendencies, data_quality=insights.data_quality
    )


@router.post("/{club}/analytics", response_model=ClubAnalytics)
def post_club_analytics(club: str, payload: dict):
    try:
        request = ShotHistoryRequest.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    analytics = compute_club_analytics(request.shots, club, request.tendencies)
    observe_club_analytics(analytics)
    logger.info(
        "club_analytics",
        extra={
            "caddie_api": {
                "club": analytics.club,
                "locked": analytics.locked,
                "total_shots": analytics.total_shots,
            }
        },
    )
    return analytics


__all__ = ["router", "post_club_analytics", "post_club_stats", "post_tendencies"]
