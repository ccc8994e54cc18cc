from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from caddie_engine.api.errors import validation_error_response
from caddie_engine.api.schemas import (
    ClubSelectionRequest,
    ClubSelectionResponse,
    ComputeRequest,
    ComputeResponse,
)
from caddie_engine.clubs import DEFAULT_CLUB_DISTANCES
from caddie_engine.metrics.engine_metrics import observe_breakdown
from caddie_engine.playslike.breakdown import PlaysLikeBreakdown, build_plays_like_breakdown
from caddie_engine.playslike.club_selection import (
    detect_awkward_distance,
    select_clubs_for_distance,
)
from caddie_engine.playslike.conditions import (
    calculate_club_effective_reach,
    compute_playing_like_distance,
)
from caddie_engine.security import require_api_key
from caddie_engine.shots.models import Shot

logger = logging.getLogger("caddie_engine.api")

router = APIRouter(
    prefix="/api/playslike",
    tags=["playslike"],
    dependencies=[Depends(require_api_key)],
)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@router.post("/breakdown", response_model=PlaysLikeBreakdown)
def post_breakdown(payload: dict):
    start = time.perf_counter()
    try:
        shot = Shot.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    breakdown = build_plays_like_breakdown(shot)
    observe_breakdown(breakdown)
    logger.info(
        "playslike_breakdown",
        extra={
            "caddie_api": {
                "rows": len(breakdown.rows),
                "delta": breakdown.delta,
                "duration_ms": _elapsed_ms(start),
            }
        },
    )
    return breakdown


@router.post("/compute", response_model=ComputeResponse)
def post_compute(payload: dict):
    start = time.perf_counter()
    try:
        request = ComputeRequest.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    result = compute_playing_like_distance(
        request.distance,
        request.conditions,
        request.shot_bearing,
        request.player_elevation,
        request.target_elevation,
    )
    shot = result.to_shot(club=request.club)
    breakdown = build_plays_like_breakdown(shot)
    observe_breakdown(breakdown)
    logger.info(
        "playslike_compute",
        extra={
            "caddie_api": {
                "distance": request.distance,
                "effective_distance": shot.effective_distance,
                "duration_ms": _elapsed_ms(start),
            }
        },
    )
    return ComputeResponse(shot=shot, breakdown=breakdown, summary=result.summary)


@router.post("/clubs", response_model=ClubSelectionResponse)
def post_clubs(payload: dict):
    start = time.perf_counter()
    try:
        request = ClubSelectionRequest.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    result = compute_playing_like_distance(
        request.distance,
        request.conditions,
        request.shot_bearing,
        request.player_elevation,
        request.target_elevation,
    )
    bag = request.club_distances or DEFAULT_CLUB_DISTANCES
    selection = select_clubs_for_distance(result.playing_like_distance, bag, request.lie)
    primary_reach = None
    if selection.primary is not None:
        primary_reach = calculate_club_effective_reach(
            bag[selection.primary.club],
            request.conditions,
            request.shot_bearing,
            request.player_elevation,
            request.target_elevation,
        )
    awkward = None
    if request.distance_after_shot is not None:
        awkward = detect_awkward_distance(request.distance_after_shot, bag)

    logger.info(
        "playslike_clubs",
        extra={
            "caddie_api": {
                "clubs": len(bag),
                "primary": selection.primary.club if selection.primary else None,
                "duration_ms": _elapsed_ms(start),
            }
        },
    )
    return ClubSelectionResponse(
        target_distance=request.distance,
        plays_like_distance=result.playing_like_distance,
        selection=selection,
        primary_reach=primary_reach,
        awkward=awkward,
    )


__all__ = ["router", "post_breakdown", "post_clubs", "post_compute"]
