from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from caddie_engine.constants import HOLES_PER_NINE

FAIRWAY_HIT = "hit"
FAIRWAY_NOT_APPLICABLE = "na"


class HoleScore(BaseModel):
    hole: int = Field(ge=1)
    par: Optional[int] = None
    score: Optional[int] = None
    putts: Optional[int] = None
    fairway_hit: Optional[str] = None  # "hit", "na", or the way it was missed
    gir: Optional[bool] = None
    penalties: int = Field(default=0, ge=0)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("fairway_hit", mode="before")
    @classmethod
    def _fairway_from_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return FAIRWAY_HIT if value else "miss"
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("penalties", mode="before")
    @classmethod
    def _default_penalties(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def to_par(self) -> int:
        """Strokes over par, treating a missing score or par as zero."""
        return (self.score or 0) - (self.par or 0)

    @property
    def front_nine(self) -> bool:
        return self.hole <= HOLES_PER_NINE

    @property
    def fairway_counted(self) -> bool:
        return (
            self.par is not None
            and self.par >= 4
            and bool(self.fairway_hit)
            and self.fairway_hit != FAIRWAY_NOT_APPLICABLE
        )


class Insight(BaseModel):
    icon: str
    text: str
    rule: Optional[str] = None


__all__ = ["FAIRWAY_HIT", "FAIRWAY_NOT_APPLICABLE", "HoleScore", "Insight"]
