from .elevation import (
    ElevationCache,
    ElevationChange,
    ElevationService,
    GeoPoint,
    cache_key,
)

__all__ = [
    "ElevationCache",
    "ElevationChange",
    "ElevationService",
    "GeoPoint",
    "cache_key",
]
