from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Wind(BaseModel):
    speed: float = Field(default=0.0, ge=0)  # mph
    direction: str = "N"
    gusts: Optional[float] = None


class CurrentWeather(BaseModel):
    temp: float  # °F
    feels_like: Optional[float] = Field(default=None, alias="feelsLike")
    condition: Optional[str] = None
    condition_text: Optional[str] = Field(default=None, alias="conditionText")
    wind: Wind = Field(default_factory=Wind)
    humidity: Optional[float] = Field(default=None, ge=0, le=100)
    precipitation: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)


class ForecastHour(BaseModel):
    time: str
    icon: Optional[str] = None
    temp: Optional[float] = None
    wind: Optional[float] = None
    precip: Optional[float] = None


class WeatherSnapshot(BaseModel):
    current: CurrentWeather
    forecast: List[ForecastHour] = Field(default_factory=list)
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")
    source: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class WeatherNote(BaseModel):
    icon: str
    text: str


__all__ = ["CurrentWeather", "ForecastHour", "WeatherNote", "WeatherSnapshot", "Wind"]
