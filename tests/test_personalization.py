import pytest

from caddie_engine.club_stats.models import ClubStats
from caddie_engine.club_stats.personalization import (
    DataLevel,
    aim_adjustment,
    blend_confidence,
    build_player_insights,
    determine_data_level,
    effective_club_distance,
    is_feature_ready,
)
from caddie_engine.shots.models import Shot


@pytest.mark.parametrize(
    "rounds, shots, level",
    [
        (0, 0, DataLevel.NONE),
        (1, 10, DataLevel.MINIMAL),
        (4, 50, DataLevel.MODERATE),
        (10, 150, DataLevel.STRONG),
        (10, 40, DataLevel.MINIMAL),
    ],
)
def test_determine_data_level(rounds, shots, level):
    assert determine_data_level(rounds, shots) is level


def test_feature_gates():
    assert is_feature_ready("club_distance_override", "moderate")
    assert not is_feature_ready("miss_compensation", DataLevel.MODERATE)
    assert not is_feature_ready("basic_stats_display", "none")
    assert not is_feature_ready("teleport", "strong")


@pytest.mark.parametrize(
    "sample_size, weight",
    [(4, 0.0), (5, 0.2), (10, 0.4), (20, 0.6), (30, 0.75), (50, 0.85)],
)
def test_blend_confidence(sample_size, weight):
    assert blend_confidence(sample_size) == weight


def test_effective_distance_blends_measured_and_entered():
    stats = ClubStats(club="7_iron", total_shots=12, avg_distance=150.0)

    assert effective_club_distance(stats, 160) == 156


def test_effective_distance_needs_enough_shots():
    stats = ClubStats(club="7_iron", total_shots=4, avg_distance=150.0)

    assert effective_club_distance(stats, 160) == 160
    assert effective_club_distance(None, 160) == 160


def test_aim_adjustment():
    assert aim_adjustment(ClubStats(club="7_iron", total_shots=12, avg_offline=5.0)) == -2.0
    assert aim_adjustment(ClubStats(club="7_iron", total_shots=9, avg_offline=5.0)) == 0.0
    assert aim_adjustment(ClubStats(club="7_iron", total_shots=12, avg_offline=2.0)) == 0.0


def test_build_player_insights():
    shots = [Shot(club="7_iron", distance_actual=150 + i) for i in range(10)]

    insights = build_player_insights(shots, total_rounds=1)

    assert insights.data_quality.total_shots == 10
    assert insights.data_quality.data_level is DataLevel.MINIMAL
    assert insights.data_quality.clubs_tracked == 1
    assert insights.club_stats["7_iron"].avg_distance == 154.5
