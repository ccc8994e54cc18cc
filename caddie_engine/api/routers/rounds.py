from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from caddie_engine.api.errors import validation_error_response
from caddie_engine.api.schemas import InsightsResponse, RoundRequest
from caddie_engine.metrics.engine_metrics import observe_insights
from caddie_engine.rounds.insights import generate_round_insights
from caddie_engine.rounds.summary import RoundSummary, build_round_summary
from caddie_engine.security import require_api_key

logger = logging.getLogger("caddie_engine.api")

router = APIRouter(
    prefix="/api/rounds",
    tags=["rounds"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/insights", response_model=InsightsResponse)
def post_round_insights(payload: dict):
    start = time.perf_counter()
    try:
        request = RoundRequest.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    insights = generate_round_insights(request.scores, request.shots)
    observe_insights(insights)
    logger.info(
        "round_insights",
        extra={
            "caddie_api": {
                "holes": len(request.scores),
                "shots": len(request.shots),
                "insights": len(insights),
                "duration_ms": (time.perf_counter() - start) * 1000,
            }
        },
    )
    return InsightsResponse(insights=insights)


@router.post("/summary", response_model=RoundSummary)
def post_round_summary(payload: dict):
    try:
        request = RoundRequest.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    summary = build_round_summary(request.scores, request.shots)
    observe_insights(summary.insights)
    logger.info(
        "round_summary",
        extra={
            "caddie_api": {
                "holes": summary.holes_played,
                "to_par": summary.to_par_display,
                "insights": len(summary.insights),
            }
        },
    )
    return summary


__all__ = ["router", "post_round_insights", "post_round_summary"]
