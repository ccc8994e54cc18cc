from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from caddie_engine.api.errors import validation_error_response
from caddie_engine.api.schemas import WeatherNotesResponse
from caddie_engine.security import require_api_key
from caddie_engine.weather.models import WeatherSnapshot
from caddie_engine.weather.notes import has_good_conditions, to_conditions, weather_notes

logger = logging.getLogger("caddie_engine.api")

router = APIRouter(
    prefix="/api/weather",
    tags=["weather"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/notes", response_model=WeatherNotesResponse)
def post_weather_notes(
    payload: dict,
    course_elevation: float = Query(default=0.0, alias="courseElevation"),
):
    try:
        snapshot = WeatherSnapshot.model_validate(payload)
    except (ValueError, TypeError) as exc:
        return validation_error_response(exc)

    notes = weather_notes(snapshot)
    good = has_good_conditions(snapshot)
    logger.info(
        "weather_notes",
        extra={"caddie_api": {"notes": len(notes), "good_conditions": good}},
    )
    return WeatherNotesResponse(
        notes=notes,
        good_conditions=good,
        conditions=to_conditions(snapshot, course_elevation),
    )


__all__ = ["router", "post_weather_notes"]
