"""Caddie notes for the pre-round conditions screen."""

from __future__ import annotations

from typing import List, Optional

from caddie_engine.playslike.conditions import PlayingConditions

from .models import WeatherNote, WeatherSnapshot

IDEAL_TEMP_F = (60.0, 75.0)
COLD_TEMP_F = 50.0
LIGHT_WIND_MPH = 10.0
MODERATE_WIND_MPH = 15.0
HUMID_PCT = 70.0
GOOD_DAY_TEMP_F = (55.0, 80.0)


def _temperature_note(temp: float) -> Optional[WeatherNote]:
    low, high = IDEAL_TEMP_F
    if low <= temp <= high:
        return WeatherNote(
            icon="🌡️", text="Ideal temps for scoring - ball flies normal distance"
        )
    if temp > high:
        return WeatherNote(
            icon="🔥", text="Hot conditions - stay hydrated, ball may fly 5-10 yards extra"
        )
    if temp < COLD_TEMP_F:
        return WeatherNote(
            icon="❄️", text="Cold temps - ball won't fly as far, add 1-2 clubs"
        )
    # 50-60°F is unremarkable.
    return None


def _wind_note(speed: float) -> WeatherNote:
    if speed < LIGHT_WIND_MPH:
        return WeatherNote(icon="✨", text="Light wind - great scoring conditions")
    if speed < MODERATE_WIND_MPH:
        return WeatherNote(icon="💨", text="Moderate wind - factor on exposed holes")
    return WeatherNote(icon="🌬️", text="Strong wind - expect 2-3 club differences")


def weather_notes(snapshot: WeatherSnapshot | None) -> List[WeatherNote]:
    if snapshot is None:
        return []
    current = snapshot.current
    notes: List[WeatherNote] = []
    temperature = _temperature_note(current.temp)
    if temperature is not None:
        notes.append(temperature)
    notes.append(_wind_note(current.wind.speed))
    if current.humidity is not None and current.humidity > HUMID_PCT:
        notes.append(WeatherNote(icon="💧", text="High humidity - ball may not fly as far"))
    return notes


def has_good_conditions(snapshot: WeatherSnapshot | None) -> bool:
    if snapshot is None:
        return False
    low, high = GOOD_DAY_TEMP_F
    current = snapshot.current
    return low <= current.temp <= high and current.wind.speed < MODERATE_WIND_MPH


def to_conditions(
    snapshot: WeatherSnapshot, course_elevation: float = 0.0
) -> PlayingConditions:
    """Reduce a snapshot to what the plays-like calculator needs."""

    current = snapshot.current
    return PlayingConditions(
        wind_speed=current.wind.speed,
        wind_direction=current.wind.direction,
        temperature=current.temp,
        course_elevation=course_elevation,
    )


__all__ = ["has_good_conditions", "to_conditions", "weather_notes"]
