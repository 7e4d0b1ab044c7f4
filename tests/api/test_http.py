from app.core.config import settings

API = settings.API_PREFIX


def test_health(client):
    response = client.get(f"{API}/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_options_preflight_returns_cors_headers(client):
    response = client.options(f"{API}/workouts/anything/exercises/x/sets")

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"
    assert response.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"


def test_cors_headers_on_regular_and_error_responses(client):
    ok = client.get(f"{API}/athletes")
    missing = client.get(f"{API}/athletes/unknown")

    assert ok.headers["Access-Control-Allow-Origin"] == "*"
    assert missing.status_code == 404
    assert missing.headers["Access-Control-Allow-Origin"] == "*"


def test_unsupported_method_returns_405_with_allow(client):
    response = client.patch(f"{API}/athletes", json={})

    assert response.status_code == 405
    assert "allow" in response.headers
    assert "error" in response.json()


def test_invalid_body_is_bad_request(client):
    response = client.post(f"{API}/workouts", json={"name": "x", "date": "2024-01-01", "blocks": [{"name": "b", "exercises": [{"exerciseName": "Squat", "sets": "lots", "reps": "5"}]}]})

    assert response.status_code == 400
    assert "error" in response.json()
