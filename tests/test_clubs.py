import pytest

from caddie_engine.clubs import (
    CLUB_DISTANCE_PERCENTAGES,
    CLUB_LABELS,
    Club,
    club_display_name,
    estimate_distances_from_driver,
    normalize_club_id,
    parse_club,
)


def test_every_club_has_label_and_percentage():
    assert set(CLUB_LABELS) == set(Club)
    assert set(CLUB_DISTANCE_PERCENTAGES) == set(Club)


@pytest.mark.parametrize(
    "club_id, expected",
    [
        ("7_iron", "7 Iron"),
        ("pw", "PW"),
        ("driver", "Driver"),
        ("w_52", "52° Wedge"),
        ("driving_iron", "driving iron"),
        (None, "?"),
    ],
)
def test_club_display_name(club_id, expected):
    assert club_display_name(club_id) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("7 Iron", "7_iron"),
        ("Pitching Wedge", "pw"),
        ("  Sand   Wedge ", "sw"),
        ("PW", "pw"),
        ("Driving Iron", "driving_iron"),
        ("", None),
    ],
)
def test_normalize_club_id(name, expected):
    assert normalize_club_id(name) == expected


def test_parse_club_unknown_is_none():
    assert parse_club("7_iron") is Club.SEVEN_IRON
    assert parse_club("w_52") is None
    assert parse_club(None) is None


def test_estimate_distances_from_driver():
    estimates = estimate_distances_from_driver(250, ["driver", "7_iron", "putter", "w_52"])

    assert estimates == {"driver": 250, "7_iron": 160, "putter": None, "w_52": None}
