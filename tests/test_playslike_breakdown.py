import pytest

from caddie_engine.playslike.breakdown import (
    NO_ADJUSTMENTS_MESSAGE,
    aim_guidance,
    build_plays_like_breakdown,
)
from caddie_engine.playslike.conditions import PlayingConditions, build_adjusted_shot
from caddie_engine.shots.models import (
    ElevationDetail,
    Shot,
    ShotAdjustments,
    TemperatureDetail,
    WindDetail,
)


def _shot(**adjustments) -> Shot:
    shot = Shot(distance=150, adjustments=ShotAdjustments(**adjustments))
    shot.effective_distance = shot.distance + shot.adjustments.effects_total()
    return shot


def test_neutral_shot_has_no_rows():
    breakdown = build_plays_like_breakdown(Shot(distance=150))

    assert breakdown.rows == []
    assert breakdown.empty
    assert breakdown.delta == 0
    assert breakdown.message == NO_ADJUSTMENTS_MESSAGE
    assert breakdown.aim_guidance is None


def test_small_effects_are_hidden_but_counted():
    shot = _shot(
        wind_detail=WindDetail(distance_effect=0.5, wind_effect="into"),
        temperature_detail=TemperatureDetail(distance_effect=3, description="Cold"),
        elevation_detail=ElevationDetail(
            elevation_delta=-6, slope_effect=-2, altitude_effect=1
        ),
    )

    breakdown = build_plays_like_breakdown(shot)

    assert [row.key for row in breakdown.rows] == ["temp", "elev", "alt"]
    assert breakdown.delta == pytest.approx(0.5)
    assert breakdown.effects_total == pytest.approx(0.5)
    assert breakdown.message is None


def test_elevation_and_altitude_rows():
    shot = _shot(
        elevation_detail=ElevationDetail(
            elevation_delta=-6, slope_effect=-2, altitude_effect=4
        )
    )

    rows = {row.key: row for row in build_plays_like_breakdown(shot).rows}

    assert rows["elev"].icon == "trending-down"
    assert rows["elev"].detail == "6ft downhill"
    assert rows["alt"].value == -4
    assert rows["alt"].label == "Altitude"


def test_uphill_row():
    shot = _shot(elevation_detail=ElevationDetail(elevation_delta=30, slope_effect=10))

    (row,) = build_plays_like_breakdown(shot).rows

    assert row.icon == "trending-up"
    assert row.detail == "30ft uphill"
    assert row.value == 10


def test_delta_is_not_filtered():
    shot = _shot(wind_detail=WindDetail(distance_effect=0.8, wind_effect="into"))

    breakdown = build_plays_like_breakdown(shot)

    assert breakdown.rows == []
    assert breakdown.delta == pytest.approx(0.8)


@pytest.mark.parametrize(
    "offset, expected",
    [
        (2, None),
        (3, "Aim 3 yards left for wind"),
        (4, "Aim 4 yards left for wind"),
    ],
)
def test_aim_guidance_threshold(offset, expected):
    wind = WindDetail(aim_offset_yards=offset, aim_direction="left")

    assert aim_guidance(wind) == expected


def test_aim_guidance_needs_direction():
    assert aim_guidance(WindDetail(aim_offset_yards=8)) is None
    assert aim_guidance(None) is None


def test_camel_case_payload():
    shot = Shot.model_validate(
        {
            "distance": 150,
            "effectiveDistance": 158,
            "adjustments": {"windDetail": {"distanceEffect": 8, "windEffect": "into"}},
        }
    )

    breakdown = build_plays_like_breakdown(shot)

    assert breakdown.rows[0].detail == "into"
    assert breakdown.rows[0].value == 8
    assert breakdown.delta == 8


@pytest.mark.parametrize(
    "conditions, elevations",
    [
        (PlayingConditions(wind_speed=12, wind_direction="NE", temperature=48), (None, None)),
        (PlayingConditions(wind_speed=7, wind_direction="S", temperature=91), (120, 95)),
        (PlayingConditions(wind_speed=20, wind_direction="W", course_elevation=5280), (10, 40)),
        (PlayingConditions(), (0, 14)),
    ],
)
def test_calculated_shots_keep_delta_equal_to_effects(conditions, elevations):
    shot = build_adjusted_shot(167, conditions, 30, *elevations)

    breakdown = build_plays_like_breakdown(shot)

    assert breakdown.delta == pytest.approx(breakdown.effects_total)
