"""Club identifiers, display names and default distance tables."""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Iterable, Optional

from .numbers import round_int

_WHITESPACE = re.compile(r"\s+")


class Club(str, Enum):
    DRIVER = "driver"
    THREE_WOOD = "3_wood"
    FIVE_WOOD = "5_wood"
    FOUR_HYBRID = "4_hybrid"
    FIVE_HYBRID = "5_hybrid"
    THREE_IRON = "3_iron"
    FOUR_IRON = "4_iron"
    FIVE_IRON = "5_iron"
    SIX_IRON = "6_iron"
    SEVEN_IRON = "7_iron"
    EIGHT_IRON = "8_iron"
    NINE_IRON = "9_iron"
    PW = "pw"
    GW = "gw"
    SW = "sw"
    LW = "lw"
    PUTTER = "putter"


CLUB_LABELS: Dict[Club, str] = {
    Club.DRIVER: "Driver",
    Club.THREE_WOOD: "3 Wood",
    Club.FIVE_WOOD: "5 Wood",
    Club.FOUR_HYBRID: "4 Hybrid",
    Club.FIVE_HYBRID: "5 Hybrid",
    Club.THREE_IRON: "3 Iron",
    Club.FOUR_IRON: "4 Iron",
    Club.FIVE_IRON: "5 Iron",
    Club.SIX_IRON: "6 Iron",
    Club.SEVEN_IRON: "7 Iron",
    Club.EIGHT_IRON: "8 Iron",
    Club.NINE_IRON: "9 Iron",
    Club.PW: "PW",
    Club.GW: "GW",
    Club.SW: "SW",
    Club.LW: "LW",
    Club.PUTTER: "Putter",
}

# Long-form names the app shows in pickers; short labels come from CLUB_LABELS.
_DISPLAY_NAME_ALIASES: Dict[str, Club] = {
    "pitching wedge": Club.PW,
    "gap wedge": Club.GW,
    "sand wedge": Club.SW,
    "lob wedge": Club.LW,
}

LONG_IRON_CLUBS = frozenset(
    {
        Club.THREE_IRON.value,
        Club.FOUR_IRON.value,
        Club.FIVE_IRON.value,
        Club.FOUR_HYBRID.value,
        Club.FIVE_HYBRID.value,
    }
)

# Share of driver distance, used when a player only knows their driver yardage.
CLUB_DISTANCE_PERCENTAGES: Dict[Club, Optional[float]] = {
    Club.DRIVER: 1.00,
    Club.THREE_WOOD: 0.89,
    Club.FIVE_WOOD: 0.85,
    Club.FOUR_HYBRID: 0.78,
    Club.FIVE_HYBRID: 0.74,
    Club.THREE_IRON: 0.78,
    Club.FOUR_IRON: 0.76,
    Club.FIVE_IRON: 0.72,
    Club.SIX_IRON: 0.68,
    Club.SEVEN_IRON: 0.64,
    Club.EIGHT_IRON: 0.59,
    Club.NINE_IRON: 0.54,
    Club.PW: 0.49,
    Club.GW: 0.44,
    Club.SW: 0.38,
    Club.LW: 0.33,
    Club.PUTTER: None,
}

DEFAULT_CLUB_DISTANCES: Dict[str, float] = {
    Club.DRIVER.value: 250.0,
    Club.THREE_WOOD.value: 230.0,
    Club.FIVE_WOOD.value: 215.0,
    Club.FOUR_HYBRID.value: 200.0,
    Club.FIVE_HYBRID.value: 190.0,
    Club.THREE_IRON.value: 205.0,
    Club.FOUR_IRON.value: 195.0,
    Club.FIVE_IRON.value: 185.0,
    Club.SIX_IRON.value: 175.0,
    Club.SEVEN_IRON.value: 165.0,
    Club.EIGHT_IRON.value: 155.0,
    Club.NINE_IRON.value: 145.0,
    Club.PW.value: 135.0,
    Club.GW.value: 120.0,
    Club.SW.value: 100.0,
    Club.LW.value: 80.0,
}


def parse_club(club_id: str | None) -> Club | None:
    if not club_id:
        return None
    try:
        return Club(club_id)
    except ValueError:
        return None


def club_label(club: Club) -> str:
    return CLUB_LABELS[club]


def club_display_name(club_id: str | None) -> str:
    """Return a display name for any club id, known or custom."""

    if not club_id:
        return "?"
    club = parse_club(club_id)
    if club is not None:
        return club_label(club)
    if club_id.startswith("w_"):
        return f"{club_id[2:]}° Wedge"
    return club_id.replace("_", " ")


def normalize_club_id(name: str | None) -> str | None:
    """Map a display name ("7 Iron", "Pitching Wedge") to its canonical id."""

    if not name:
        return None
    cleaned = _WHITESPACE.sub(" ", name.strip()).lower()
    if not cleaned:
        return None
    if cleaned in _DISPLAY_NAME_ALIASES:
        return _DISPLAY_NAME_ALIASES[cleaned].value
    for club, label in CLUB_LABELS.items():
        if cleaned == label.lower():
            return club.value
    return cleaned.replace(" ", "_")


def estimate_distances_from_driver(
    driver_yards: float, club_ids: Iterable[str]
) -> Dict[str, Optional[int]]:
    """Estimate a bag from a single driver yardage.

    Putters and custom wedges have no percentage and come back as ``None``.
    """

    distances: Dict[str, Optional[int]] = {}
    for club_id in club_ids:
        club = parse_club(club_id)
        pct = CLUB_DISTANCE_PERCENTAGES[club] if club is not None else None
        distances[club_id] = None if pct is None else round_int(driver_yards * pct)
    return distances


__all__ = [
    "CLUB_DISTANCE_PERCENTAGES",
    "CLUB_LABELS",
    "Club",
    "DEFAULT_CLUB_DISTANCES",
    "LONG_IRON_CLUBS",
    "club_display_name",
    "club_label",
    "estimate_distances_from_driver",
    "normalize_club_id",
    "parse_club",
]
