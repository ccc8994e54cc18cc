import pytest

from caddie_engine.config import EngineConfigError, load_settings


def test_defaults():
    settings = load_settings({})

    assert not settings.require_api_key
    assert settings.api_keys == frozenset()
    assert settings.cors_allow_origins == ("http://localhost", "http://127.0.0.1")
    assert settings.elevation_cache.max_entries == 512
    assert settings.elevation_cache.ttl_seconds == 0.0
    assert settings.build_version == "dev"


def test_api_keys_and_cors_are_csv():
    settings = load_settings(
        {
            "REQUIRE_API_KEY": "true",
            "API_KEYS": "a, b,,",
            "CORS_ALLOW_ORIGINS": "https://app.example.com",
        }
    )

    assert settings.require_api_key
    assert settings.api_keys == frozenset({"a", "b"})
    assert settings.cors_allow_origins == ("https://app.example.com",)


def test_cache_settings_from_env():
    settings = load_settings(
        {"ELEVATION_CACHE_MAX_ENTRIES": "64", "ELEVATION_CACHE_TTL_SECONDS": "300"}
    )

    assert settings.elevation_cache.max_entries == 64
    assert settings.elevation_cache.ttl_seconds == 300.0


@pytest.mark.parametrize(
    "env",
    [
        {"ELEVATION_CACHE_MAX_ENTRIES": "lots"},
        {"ELEVATION_CACHE_MAX_ENTRIES": "-1"},
        {"ELEVATION_CACHE_TTL_SECONDS": "soon"},
        {"ELEVATION_CACHE_TTL_SECONDS": "-5"},
    ],
)
def test_bad_values_raise(env):
    with pytest.raises(EngineConfigError):
        load_settings(env)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("GIT_SHA", "abc123")

    assert load_settings().git_sha == "abc123"
