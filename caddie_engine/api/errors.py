from __future__ import annotations

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError


class ErrorEnvelope(BaseModel):
    error_code: str
    message: str
    details: dict | None = None


def validation_error_response(exc: Exception) -> JSONResponse:
    """Top-level 422 envelope rather than FastAPI's nested ``detail`` list."""

    details = None
    message = str(exc)
    if isinstance(exc, ValidationError):
        errors = exc.errors(include_url=False, include_context=False)
        details = {"errors": errors}
        message = f"{exc.error_count()} validation error(s) for {exc.title}"
    return JSONResponse(
        status_code=422,
        content=ErrorEnvelope(
            error_code="validation_error", message=message, details=details
        ).model_dump(),
    )


__all__ = ["ErrorEnvelope", "validation_error_response"]
