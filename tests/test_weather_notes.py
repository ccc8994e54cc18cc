from caddie_engine.weather.models import WeatherSnapshot
from caddie_engine.weather.notes import has_good_conditions, to_conditions, weather_notes


def _snapshot(temp, wind=5, humidity=None, direction="N") -> WeatherSnapshot:
    return WeatherSnapshot.model_validate(
        {
            "current": {
                "temp": temp,
                "wind": {"speed": wind, "direction": direction},
                "humidity": humidity,
            }
        }
    )


def test_ideal_day():
    snapshot = _snapshot(64, wind=12, humidity=68)

    texts = [note.text for note in weather_notes(snapshot)]

    assert texts == [
        "Ideal temps for scoring - ball flies normal distance",
        "Moderate wind - factor on exposed holes",
    ]
    assert has_good_conditions(snapshot)


def test_hot_humid_day():
    snapshot = _snapshot(85, wind=5, humidity=80)

    texts = [note.text for note in weather_notes(snapshot)]

    assert texts == [
        "Hot conditions - stay hydrated, ball may fly 5-10 yards extra",
        "Light wind - great scoring conditions",
        "High humidity - ball may not fly as far",
    ]
    assert not has_good_conditions(snapshot)


def test_cold_windy_day():
    snapshot = _snapshot(45, wind=20)

    texts = [note.text for note in weather_notes(snapshot)]

    assert texts == [
        "Cold temps - ball won't fly as far, add 1-2 clubs",
        "Strong wind - expect 2-3 club differences",
    ]
    assert not has_good_conditions(snapshot)


def test_mild_day_has_no_temperature_note():
    snapshot = _snapshot(55)

    assert len(weather_notes(snapshot)) == 1
    assert has_good_conditions(snapshot)


def test_missing_snapshot():
    assert weather_notes(None) == []
    assert not has_good_conditions(None)


def test_to_conditions():
    conditions = to_conditions(_snapshot(64, wind=12, direction="wsw"), course_elevation=1200)

    assert conditions.wind_speed == 12
    assert conditions.wind_direction == "WSW"
    assert conditions.temperature == 64
    assert conditions.course_elevation == 1200
