"""Environment-driven settings for the engine's HTTP surface and caches."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

_DEFAULT_CORS = "http://localhost,http://127.0.0.1"
_TRUTHY = {"1", "true", "yes", "on"}


class EngineConfigError(ValueError):
    """Raised when an environment variable cannot be parsed."""


@dataclass(frozen=True)
class ElevationCacheSettings:
    max_entries: int = 512
    ttl_seconds: float = 0.0


@dataclass(frozen=True)
class EngineSettings:
    require_api_key: bool = False
    api_keys: frozenset[str] = frozenset()
    cors_allow_origins: tuple[str, ...] = ("http://localhost", "http://127.0.0.1")
    elevation_cache: ElevationCacheSettings = field(
        default_factory=ElevationCacheSettings
    )
    build_version: str = "dev"
    git_sha: str = "unknown"


def _split_csv(raw: Optional[str]) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise EngineConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise EngineConfigError(f"{name} must be >= 0, got {value}")
    return value


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise EngineConfigError(f"{name} must be a number, got {raw!r}") from exc
    if value != value or value < 0:
        raise EngineConfigError(f"{name} must be >= 0, got {raw!r}")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> EngineSettings:
    source = os.environ if env is None else env
    return EngineSettings(
        require_api_key=source.get("REQUIRE_API_KEY", "0").strip().lower() in _TRUTHY,
        api_keys=frozenset(_split_csv(source.get("API_KEYS"))),
        cors_allow_origins=_split_csv(source.get("CORS_ALLOW_ORIGINS", _DEFAULT_CORS)),
        elevation_cache=ElevationCacheSettings(
            max_entries=_int(source, "ELEVATION_CACHE_MAX_ENTRIES", 512),
            ttl_seconds=_float(source, "ELEVATION_CACHE_TTL_SECONDS", 0.0),
        ),
        build_version=source.get("BUILD_VERSION", "dev"),
        git_sha=source.get("GIT_SHA", "unknown"),
    )


__all__ = [
    "ElevationCacheSettings",
    "EngineConfigError",
    "EngineSettings",
    "load_settings",
]
