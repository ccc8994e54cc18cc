from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from caddie_engine.api.errors import validation_error_response
from caddie_engine.api.schemas import HazardRequest
from caddie_engine.hazards.advisor import HazardSummary, summarize_hazards
from caddie_engine.security import require_api_key

logger = logging.getLogger("caddie_engine.api")

router = APIRouter(
    prefix="/api/hazards",
    tags=["hazards"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/summary", response_model=HazardSummary)
def post_hazard_summary(payload: dict):
    try:
        request = HazardRequest.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    summary = summarize_hazards(request.avoid_zones, request.warnings, request.safe_zone)
    logger.info(
        "hazard_summary",
        extra={"caddie_api": {"zones": len(summary.rows), "clear": summary.clear}},
    )
    return summary


__all__ = ["router", "post_hazard_summary"]
