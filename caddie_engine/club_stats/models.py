from __future__ import annotations

from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MissDirection = Literal["Left", "Right", "Center"]


class ClubStats(BaseModel):
    club: str
    total_shots: int = Field(default=0, ge=0, alias="totalShots")

    avg_distance: Optional[float] = Field(default=None, alias="avgDistance")
    median_distance: Optional[float] = Field(default=None, alias="medianDistance")
    std_distance: Optional[float] = Field(default=None, alias="stdDistance")
    min_distance: Optional[int] = Field(default=None, alias="minDistance")
    max_distance: Optional[int] = Field(default=None, alias="maxDistance")
    last10_avg: Optional[float] = Field(default=None, alias="last10Avg")

    avg_offline: Optional[float] = Field(default=None, alias="avgOffline")  # + right
    std_offline: Optional[float] = Field(default=None, alias="stdOffline")
    miss_left_pct: int = Field(default=0, ge=0, le=100, alias="missLeftPct")
    miss_right_pct: int = Field(default=0, ge=0, le=100, alias="missRightPct")
    miss_short_pct: int = Field(default=0, ge=0, le=100, alias="missShortPct")
    miss_long_pct: int = Field(default=0, ge=0, le=100, alias="missLongPct")

    dispersion_radius: Optional[int] = Field(default=None, alias="dispersionRadius")
    lateral_dispersion: Optional[float] = Field(
        default=None, alias="lateralDispersion"
    )
    distance_dispersion: Optional[float] = Field(
        default=None, alias="distanceDispersion"
    )
    avg_distance_to_target: Optional[float] = Field(
        default=None, alias="avgDistanceToTarget"
    )

    model_config = ConfigDict(populate_by_name=True)


class ClubAnalytics(BaseModel):
    """What the analytics tab may show for one club.

    When ``locked`` is true ``stats`` is always ``None``; the caller only gets
    the progress message.
    """

    club: str
    label: str
    locked: bool
    total_shots: int = Field(alias="totalShots")
    shots_remaining: int = Field(default=0, alias="shotsRemaining")
    message: Optional[str] = None
    stats: Optional[ClubStats] = None
    miss_direction: Optional[MissDirection] = Field(default=None, alias="missDirection")
    tendency_note: Optional[str] = Field(default=None, alias="tendencyNote")

    model_config = ConfigDict(populate_by_name=True)


class TendencyData(BaseModel):
    description: str = ""

    model_config = ConfigDict(extra="allow")


class Tendency(BaseModel):
    type: str = Field(validation_alias=AliasChoices("type", "tendencyType"))
    key: str = Field(validation_alias=AliasChoices("key", "tendencyKey"))
    data: TendencyData = Field(
        default_factory=TendencyData,
        validation_alias=AliasChoices("data", "tendencyData"),
    )
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    sample_size: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("sampleSize", "sample_size"),
        serialization_alias="sampleSize",
    )

    @property
    def description(self) -> str:
        return self.data.description


__all__ = [
    "ClubAnalytics",
    "ClubStats",
    "MissDirection",
    "Tendency",
    "TendencyData",
]
