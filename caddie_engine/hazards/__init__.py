from .advisor import (
    HazardRow,
    HazardSeverity,
    HazardSummary,
    HazardType,
    hazard_label,
    hazard_severity,
    summarize_hazards,
    summarize_shot_hazards,
)

__all__ = [
    "HazardRow",
    "HazardSeverity",
    "HazardSummary",
    "HazardType",
    "hazard_label",
    "hazard_severity",
    "summarize_hazards",
    "summarize_shot_hazards",
]
