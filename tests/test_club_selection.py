from caddie_engine.playslike.club_selection import (
    detect_awkward_distance,
    select_clubs_for_distance,
)

BAG = {"7_iron": 160, "8_iron": 150, "9_iron": 140, "pw": 130}


def test_exact_match_is_high_confidence():
    selection = select_clubs_for_distance(148, BAG)

    assert selection.primary.club == "8_iron"
    assert selection.primary.confidence == "high"
    assert selection.primary.gap == 2
    assert selection.alternate.club == "9_iron"
    assert selection.alternate.note == "If you want to flight it down"
    assert selection.description == "8 Iron (150 yards) for 148 yard shot"


def test_longer_club_preferred_inside_window():
    selection = select_clubs_for_distance(152, BAG)

    assert selection.primary.club == "7_iron"
    assert selection.primary.confidence == "medium"
    assert selection.alternate.club == "8_iron"
    assert selection.alternate.gap == -2


def test_between_clubs_takes_longer_one():
    selection = select_clubs_for_distance(155, {"6_iron": 170, "8_iron": 140})

    assert selection.primary.club == "6_iron"
    assert selection.primary.note == "Between clubs - taking the longer one"
    assert selection.alternate.club == "8_iron"
    assert selection.alternate.gap == -15


def test_target_beyond_bag():
    selection = select_clubs_for_distance(200, BAG)

    assert selection.primary.club == "7_iron"
    assert selection.primary.confidence == "low"
    assert selection.primary.note == "Target is beyond your longest club"
    assert selection.alternate is None


def test_target_below_bag():
    selection = select_clubs_for_distance(90, BAG)

    assert selection.primary.club == "pw"
    assert selection.primary.confidence == "low"
    assert selection.primary.note == "Consider a partial swing or bump-and-run"


def test_lie_reduces_carry():
    selection = select_clubs_for_distance(144, {"7_iron": 160}, lie="rough")

    assert selection.primary.distance == 144
    assert selection.primary.confidence == "high"
    assert selection.lie_adjustment == "10% reduction for rough"


def test_fairway_has_no_lie_note():
    assert select_clubs_for_distance(150, BAG).lie_adjustment is None


def test_empty_bag():
    selection = select_clubs_for_distance(150, {})

    assert selection.primary is None
    assert selection.description == "No club data available"


def test_awkward_leave_suggests_full_wedge():
    awkward = detect_awkward_distance(40, {"pw": 130, "sw": 100, "7_iron": 160})

    assert awkward.is_awkward
    assert awkward.ideal_distance == 110
    assert awkward.problem == (
        "40 yards is awkward - too long for chip, too short for full swing"
    )
    assert awkward.recommendation == "Lay up to 110 yards instead for a full SW"


def test_awkward_leave_without_wedges():
    awkward = detect_awkward_distance(45, {"7_iron": 160})

    assert awkward.ideal_distance == 80
    assert awkward.recommendation == "Lay up to 80 yards instead for a full wedge"


def test_comfortable_leaves():
    short = detect_awkward_distance(20)
    full = detect_awkward_distance(60)

    assert not short.is_awkward
    assert short.description == "Good distance - chip or pitch range"
    assert not full.is_awkward
    assert full.description == "Good distance - full swing territory"
