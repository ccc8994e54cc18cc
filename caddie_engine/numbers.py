from __future__ import annotations

import math
from typing import Iterable


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a scoreboard does: .5 always goes up (toward +inf)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(round_half_up(value))


def mean(values: Iterable[float]) -> float | None:
    items = list(values)
    if not items:
        return None
    return sum(items) / len(items)


def format_yards(value: float) -> str:
    """Render a yardage without a trailing ``.0``."""
    return f"{value:g}"


def signed(value: float) -> str:
    prefix = "+" if value > 0 else ""
    return f"{prefix}{format_yards(value)}"


__all__ = ["format_yards", "mean", "round_half_up", "round_int", "signed"]
