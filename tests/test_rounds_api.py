def _scores(card):
    return [hole.model_dump() for hole in card]


SHOTS = [
    {"club": "driver", "distanceActual": 250, "distanceOffline": 5},
    {"club": "driver", "distanceActual": 260, "distanceOffline": 6},
    {"club": "driver", "distanceActual": 255, "distanceOffline": 7},
    {"club": "7_iron", "distanceToTarget": 20, "distanceOffline": 8},
    {"club": "7_iron", "distanceToTarget": 22, "distanceOffline": -4},
    {"club": "7_iron", "distanceToTarget": 24},
]


def test_round_insights_endpoint(client, under_par_card):
    response = client.post(
        "/api/rounds/insights", json={"scores": _scores(under_par_card), "shots": SHOTS}
    )
    assert response.status_code == 200

    insights = response.json()["insights"]
    assert len(insights) == 5
    assert insights[0]["rule"] == "driver_distance"
    assert insights[0]["text"] == "Your driver averaged 255 yards today (3 drives)."


def test_round_insights_without_shots(client, under_par_card):
    response = client.post("/api/rounds/insights", json={"scores": _scores(under_par_card)})

    assert response.status_code == 200
    assert response.json()["insights"] == []


def test_round_summary_endpoint(client, under_par_card):
    response = client.post(
        "/api/rounds/summary", json={"scores": _scores(under_par_card), "shots": SHOTS}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["toParDisplay"] == "-6"
    assert data["distribution"]["birdies"] == 6
    assert data["achievements"] == ["Clean Sheet", "Birdie Fest", "Under Par"]
    assert len(data["insights"]) == 5


def test_round_rejects_hole_zero(client):
    response = client.post("/api/rounds/summary", json={"scores": [{"hole": 0, "par": 4}]})

    assert response.status_code == 422
    assert response.json()["error_code"] == "validation_error"
