from concurrent.futures import ThreadPoolExecutor

from caddie_engine.config import ElevationCacheSettings
from caddie_engine.providers.elevation import (
    ElevationCache,
    ElevationService,
    GeoPoint,
    cache_key,
)


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class _Lookup:
    def __init__(self, values):
        self.values = values
        self.calls = []

    def __call__(self, latitude, longitude):
        self.calls.append((latitude, longitude))
        return self.values.get((latitude, longitude))


def test_cache_key_rounds_to_five_decimals():
    assert cache_key(37.123456789, -122.1) == "37.12346,-122.10000"


def test_lru_eviction():
    cache = ElevationCache(max_entries=2)
    cache.set(1.0, 1.0, 10.0)
    cache.set(2.0, 2.0, 20.0)

    assert cache.get(1.0, 1.0) == 10.0
    cache.set(3.0, 3.0, 30.0)

    assert cache.get(2.0, 2.0) is None
    assert cache.get(1.0, 1.0) == 10.0
    assert cache.get(3.0, 3.0) == 30.0
    assert len(cache) == 2


def test_ttl_expiry():
    clock = _Clock()
    cache = ElevationCache(max_entries=4, ttl_seconds=60, clock=clock)
    cache.set(1.0, 1.0, 10.0)

    clock.now = 59
    assert cache.get(1.0, 1.0) == 10.0
    clock.now = 60
    assert cache.get(1.0, 1.0) is None
    assert len(cache) == 0


def test_zero_size_disables_cache():
    cache = ElevationCache.from_settings(ElevationCacheSettings(max_entries=0))
    cache.set(1.0, 1.0, 10.0)

    assert cache.get(1.0, 1.0) is None
    assert cache.misses == 1


def test_hit_and_miss_counters():
    cache = ElevationCache()
    cache.get(1.0, 1.0)
    cache.set(1.0, 1.0, 10.0)
    cache.get(1.0, 1.0)

    assert (cache.hits, cache.misses) == (1, 1)
    cache.clear()
    assert (cache.hits, cache.misses, len(cache)) == (0, 0, 0)


def test_service_caches_lookups():
    lookup = _Lookup({(40.0, -105.0): 5280.0})
    service = ElevationService(lookup, ElevationCache())

    assert service.elevation_at(GeoPoint(latitude=40.0, longitude=-105.0)) == 5280.0
    assert service.elevation_at(GeoPoint(latitude=40.0, longitude=-105.0)) == 5280.0
    assert len(lookup.calls) == 1


def test_device_altitude_skips_lookup():
    lookup = _Lookup({})
    service = ElevationService(lookup, ElevationCache())

    point = GeoPoint(latitude=40.0, longitude=-105.0, altitude=100.0)

    assert service.elevation_at(point) == 100.0
    assert lookup.calls == []


def test_elevation_change_uphill():
    lookup = _Lookup({(40.001, -105.0): 130.0})
    service = ElevationService(lookup, ElevationCache())

    change = service.elevation_change(
        GeoPoint(latitude=40.0, longitude=-105.0, altitude=100.0),
        GeoPoint(latitude=40.001, longitude=-105.0),
    )

    assert change.elevation_change == 30.0
    assert change.model_dump(by_alias=True)["toElevation"] == 130.0


def test_missing_elevation_is_not_cached():
    lookup = _Lookup({})
    service = ElevationService(lookup, ElevationCache())
    point = GeoPoint(latitude=1.0, longitude=1.0)

    change = service.elevation_change(GeoPoint(latitude=0.0, longitude=0.0, altitude=0.0), point)
    service.elevation_at(point)

    assert change.elevation_change is None
    assert len(service.cache) == 0
    assert len(lookup.calls) == 2


def test_concurrent_writes_respect_bound():
    cache = ElevationCache(max_entries=16)

    def _write(i):
        cache.set(float(i), 0.0, float(i))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(_write, range(200)))

    assert len(cache) == 16
