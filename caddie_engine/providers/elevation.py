"""Elevation lookups behind an injected, bounded cache.

The engine never talks to an elevation API itself; callers hand
:class:`ElevationService` a lookup callable (usually wrapping their HTTP
client) and the cache keeps repeated taps on the same spot cheap.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from caddie_engine.config import ElevationCacheSettings

logger = logging.getLogger(__name__)

ElevationLookup = Callable[[float, float], Optional[float]]


def cache_key(latitude: float, longitude: float) -> str:
    # ~1 m at 5 decimals
    return f"{latitude:.5f},{longitude:.5f}"


@dataclass
class CacheEntry:
    value: float
    expires_at: Optional[float]

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class ElevationCache:
    """Thread-safe LRU of elevations in feet, with an optional TTL."""

    def __init__(
        self,
        max_entries: int = 512,
        ttl_seconds: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_entries = max(0, max_entries)
        self._ttl = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    @classmethod
    def from_settings(cls, settings: ElevationCacheSettings) -> "ElevationCache":
        return cls(max_entries=settings.max_entries, ttl_seconds=settings.ttl_seconds)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, latitude: float, longitude: float) -> Optional[float]:
        key = cache_key(latitude, longitude)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.misses += 1
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return entry.value

    def set(self, latitude: float, longitude: float, elevation_ft: float) -> None:
        if self._max_entries == 0:
            return
        key = cache_key(latitude, longitude)
        expires_at = self._clock() + self._ttl if self._ttl > 0 else None
        with self._lock:
            self._entries[key] = CacheEntry(value=elevation_ft, expires_at=expires_at)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0


class GeoPoint(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    altitude: Optional[float] = None  # ft, when the device already knows it

    model_config = ConfigDict(populate_by_name=True)


class ElevationChange(BaseModel):
    elevation_change: Optional[float] = Field(default=None, alias="elevationChange")
    from_elevation: Optional[float] = Field(default=None, alias="fromElevation")
    to_elevation: Optional[float] = Field(default=None, alias="toElevation")

    model_config = ConfigDict(populate_by_name=True)


class ElevationService:
    def __init__(self, lookup: ElevationLookup, cache: ElevationCache) -> None:
        self._lookup = lookup
        self._cache = cache

    @property
    def cache(self) -> ElevationCache:
        return self._cache

    def elevation_at(self, point: GeoPoint) -> Optional[float]:
        if point.altitude is not None:
            return point.altitude
        cached = self._cache.get(point.latitude, point.longitude)
        if cached is not None:
            return cached
        value = self._lookup(point.latitude, point.longitude)
        if value is None:
            logger.debug(
                "elevation unavailable",
                extra={"elevation": {"key": cache_key(point.latitude, point.longitude)}},
            )
            return None
        self._cache.set(point.latitude, point.longitude, value)
        return value

    def elevation_change(self, start: GeoPoint, end: GeoPoint) -> ElevationChange:
        """Positive is uphill from ``start`` to ``end``."""

        from_elevation = self.elevation_at(start)
        to_elevation = self.elevation_at(end)
        change = None
        if from_elevation is not None and to_elevation is not None:
            change = to_elevation - from_elevation
        return ElevationChange(
            elevation_change=change,
            from_elevation=from_elevation,
            to_elevation=to_elevation,
        )


__all__ = [
    "ElevationCache",
    "ElevationChange",
    "ElevationLookup",
    "ElevationService",
    "GeoPoint",
    "cache_key",
]
