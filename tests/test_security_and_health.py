SHOT = {"distance": 150}


def test_health_is_open(monkeypatch, client):
    monkeypatch.setenv("REQUIRE_API_KEY", "1")
    monkeypatch.setenv("BUILD_VERSION", "1.2.3")

    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "1.2.3"
    assert data["env"]["require_api_key"] is True


def test_routes_open_by_default(client):
    assert client.post("/api/playslike/breakdown", json=SHOT).status_code == 200


def test_api_key_required_when_enabled(monkeypatch, client):
    monkeypatch.setenv("REQUIRE_API_KEY", "1")
    monkeypatch.setenv("API_KEYS", "secret,other")

    missing = client.post("/api/playslike/breakdown", json=SHOT)
    wrong = client.post("/api/playslike/breakdown", json=SHOT, headers={"x-api-key": "nope"})
    header = client.post("/api/playslike/breakdown", json=SHOT, headers={"x-api-key": "secret"})
    query = client.post("/api/playslike/breakdown?apiKey=other", json=SHOT)

    assert missing.status_code == 401
    assert missing.json() == {"detail": "invalid api key"}
    assert wrong.status_code == 401
    assert header.status_code == 200
    assert query.status_code == 200


def test_enabled_without_keys_rejects_everything(monkeypatch, client):
    monkeypatch.setenv("REQUIRE_API_KEY", "1")

    response = client.post("/api/hazards/summary", json={}, headers={"x-api-key": "any"})

    assert response.status_code == 401


def test_metrics_endpoint(client):
    client.post("/api/playslike/breakdown", json=SHOT)
    client.post("/api/clubs/7_iron/analytics", json={"shots": []})

    response = client.get("/metrics")

    assert response.status_code == 200
    body = response.text
    assert "caddie_playslike_breakdowns_total" in body
    assert 'caddie_club_analytics_total{state="locked"}' in body
