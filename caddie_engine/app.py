from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from caddie_engine.api.health import health as _health_handler
from caddie_engine.api.routers.clubs import router as clubs_router
from caddie_engine.api.routers.hazards import router as hazards_router
from caddie_engine.api.routers.playslike import router as playslike_router
from caddie_engine.api.routers.rounds import router as rounds_router
from caddie_engine.api.routers.weather import router as weather_router
from caddie_engine.config import EngineSettings, load_settings
from caddie_engine.metrics import MetricsMiddleware, metrics_app


def create_app(settings: EngineSettings | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="Caddie Engine", version=settings.build_version)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(MetricsMiddleware)

    app.include_router(playslike_router)
    app.include_router(hazards_router)
    app.include_router(clubs_router)
    app.include_router(rounds_router)
    app.include_router(weather_router)
    app.add_api_route(
        "/health",
        _health_handler,
        methods=["GET"],
        response_model=None,
        tags=["health"],
    )

    metrics_router = APIRouter()

    @metrics_router.get("/metrics", include_in_schema=False)
    async def _metrics_endpoint(request: Request):
        return await metrics_app(request)

    app.include_router(metrics_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
