from .models import (
    Confidence,
    ElevationDetail,
    HazardZone,
    SafeZone,
    Shot,
    ShotAdjustments,
    TemperatureDetail,
    WindDetail,
    carry_misses,
)

__all__ = [
    "Confidence",
    "ElevationDetail",
    "HazardZone",
    "SafeZone",
    "Shot",
    "ShotAdjustments",
    "TemperatureDetail",
    "WindDetail",
    "carry_misses",
]
