from caddie_engine.hazards.advisor import (
    CLEAR_DETAIL,
    CLEAR_MESSAGE,
    HAZARD_LABELS,
    HAZARD_SEVERITY,
    HazardSeverity,
    HazardType,
    hazard_label,
    summarize_hazards,
    summarize_shot_hazards,
)
from caddie_engine.shots.models import HazardZone, SafeZone, Shot


def _zone(type_: str, distance: float = 12, direction: str = "left") -> HazardZone:
    return HazardZone(
        name=f"{type_} zone", type=type_, distance_to_edge=distance, direction=direction
    )


def test_every_hazard_type_has_label_and_severity():
    assert set(HAZARD_LABELS) == set(HazardType)
    assert set(HAZARD_SEVERITY) == set(HazardType)


def test_clear_summary_hides_safe_zone():
    summary = summarize_hazards([], [], SafeZone(direction="left"))

    assert summary.clear
    assert summary.message == CLEAR_MESSAGE
    assert summary.detail == CLEAR_DETAIL
    assert summary.rows == []
    assert summary.safe_zone is None


def test_rows_carry_severity_and_label():
    summary = summarize_hazards(
        [_zone("water"), _zone("bunker", 8, "right"), _zone("lava")],
        ["Trees short right"],
        SafeZone(direction="right", description="Wide fairway"),
    )

    assert not summary.clear
    assert [row.severity for row in summary.rows] == [
        HazardSeverity.RED,
        HazardSeverity.AMBER,
        HazardSeverity.AMBER,
    ]
    assert [row.label for row in summary.rows] == ["Water", "Bunker", "lava"]
    assert summary.rows[0].color == "#ef4444"
    assert summary.rows[0].distance_text == "12 yds to edge"
    assert summary.rows[1].direction == "RIGHT"
    assert summary.warnings == ["Trees short right"]
    assert summary.safe_zone.headline == "Favor right side"
    assert summary.safe_zone.detail == "Wide fairway"


def test_warnings_alone_are_not_clear():
    summary = summarize_hazards([], ["Strong crosswind"])

    assert not summary.clear
    assert summary.rows == []
    assert summary.message is None


def test_hazard_label_falls_back_to_raw_id():
    assert hazard_label("ob") == "Out of Bounds"
    assert hazard_label("cart_path") == "cart_path"


def test_shot_payload_summary():
    shot = Shot.model_validate(
        {
            "distance": 230,
            "avoidZones": [
                {"name": "Pond", "type": "water", "distanceToEdge": 6.5, "direction": "left"}
            ],
            "safeZone": {"direction": "right"},
        }
    )

    summary = summarize_shot_hazards(shot)

    assert summary.rows[0].name == "Pond"
    assert summary.rows[0].distance_text == "6.5 yds to edge"
    assert summary.safe_zone.headline == "Favor right side"
