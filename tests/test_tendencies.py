import pytest

from caddie_engine.club_stats.aggregate import compute_club_stats
from caddie_engine.club_stats.models import Tendency
from caddie_engine.club_stats.tendencies import (
    club_tendency_note,
    detect_tendencies,
    find_tendency,
    select_club_tendency,
    tendencies_by_type,
    tendency_confidence,
)
from caddie_engine.shots.models import Shot


def _tendency(key="7_iron_miss", confidence=0.5, type_="club_bias", description="note"):
    return Tendency(
        type=type_, key=key, data={"description": description}, confidence=confidence
    )


def test_tendency_accepts_stored_field_names():
    tendency = Tendency.model_validate(
        {
            "tendencyType": "club_bias",
            "tendencyKey": "7_iron_miss",
            "tendencyData": {"description": "Tends to miss 7 iron right", "direction": "right"},
            "confidence": 0.5,
            "sampleSize": 12,
        }
    )

    assert tendency.type == "club_bias"
    assert tendency.sample_size == 12
    assert tendency.description == "Tends to miss 7 iron right"
    assert tendency.data.direction == "right"
    assert tendency.model_dump(by_alias=True)["sampleSize"] == 12


def test_select_skips_low_confidence():
    weak = _tendency(confidence=0.2, description="weak")
    strong = _tendency(confidence=0.5, description="strong")

    assert select_club_tendency([weak, strong], "7_iron") is strong
    assert club_tendency_note([weak, strong], "7_iron") == "strong"


def test_select_takes_first_match():
    first = _tendency(confidence=0.3, description="first")
    second = _tendency(confidence=0.9, description="second")

    assert club_tendency_note([first, second], "7_iron") == "first"


def test_select_ignores_other_types_and_clubs():
    tendencies = [
        _tendency(type_="distance_range"),
        _tendency(key="8_iron_miss"),
        _tendency(key="7_iron_distance"),
    ]

    assert select_club_tendency(tendencies, "7_iron") is None
    assert club_tendency_note(tendencies, "7_iron") is None


def test_empty_description_gives_no_note():
    assert club_tendency_note([_tendency(description="")], "7_iron") is None


@pytest.mark.parametrize(
    "sample_size, confidence",
    [(4, 0.0), (5, 0.3), (9, 0.3), (10, 0.5), (15, 0.65), (20, 0.8), (30, 0.9), (50, 0.95)],
)
def test_tendency_confidence_steps(sample_size, confidence):
    assert tendency_confidence(sample_size) == confidence


def test_tendencies_by_type_filters_confidence():
    tendencies = [_tendency(confidence=0.2), _tendency(confidence=0.4), _tendency(type_="x")]

    assert len(tendencies_by_type(tendencies, "club_bias")) == 1


def test_club_lateral_and_distance_bias():
    shots = [
        Shot(club="7_iron", distance=140, distance_actual=150, distance_offline=6)
        for _ in range(6)
    ]

    tendencies = detect_tendencies(shots, compute_club_stats(shots))

    lateral = find_tendency(tendencies, "club_bias", "7_iron_miss")
    distance = find_tendency(tendencies, "club_bias", "7_iron_distance")
    assert lateral.description == "Tends to miss 7 iron 6.0 yards right"
    assert lateral.confidence == 0.3
    assert lateral.sample_size == 6
    assert distance.description == "Hits 7 iron 10 yards long on average"
    assert club_tendency_note(tendencies, "7_iron") == lateral.description


def test_long_iron_bias():
    shots = [Shot(club="4_iron", distance_actual=190, distance_offline=-5) for _ in range(8)]

    tendencies = detect_tendencies(shots, compute_club_stats(shots))

    long_irons = find_tendency(tendencies, "club_bias", "long_iron_miss")
    assert long_irons.description == "Tends to push long irons 5.0 yards left"


def test_distance_range_gir():
    results = ["green", "green", "fringe", "rough", "bunker"]
    shots = [Shot(distance=160, result=result) for result in results]

    tendencies = detect_tendencies(shots, {})

    band = find_tendency(tendencies, "distance_range", "150_175")
    assert band.description == "60% GIR from 150-175 yards"
    assert band.data.girPct == 60


def test_wind_condition():
    windy = [Shot(wind_speed=20, distance_offline=10) for _ in range(5)]
    calm = [Shot(wind_speed=5, distance_offline=-2) for _ in range(5)]

    tendencies = detect_tendencies(windy + calm, {})

    wind = find_tendency(tendencies, "condition", "wind_over_15")
    assert wind.description == "Misses 8.0 extra yards in wind above 15mph"


def test_rough_approaches():
    rough = [Shot(lie_type="rough", distance=150, distance_actual=135) for _ in range(5)]
    fairway = [
        Shot(lie_type="fairway", shot_number=2, distance=150, distance_actual=148)
        for _ in range(5)
    ]

    tendencies = detect_tendencies(rough + fairway, {})

    penalty = find_tendency(tendencies, "situational", "approach_from_rough")
    assert penalty.description == "Loses 13 yards from rough vs fairway"


def test_no_history_no_tendencies():
    assert detect_tendencies([], {}) == []
