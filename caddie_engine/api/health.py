import platform
import time
from typing import Any, Dict

from caddie_engine.config import load_settings


async def health() -> Dict[str, Any]:
    settings = load_settings()
    return {
        "status": "ok",
        "version": settings.build_version,
        "git": settings.git_sha,
        "ts": time.time(),
        "env": {
            "require_api_key": settings.require_api_key,
            "elevation_cache_max_entries": settings.elevation_cache.max_entries,
        },
        "runtime": {
            "python": platform.python_version(),
        },
    }
