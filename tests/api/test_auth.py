from app.core.config import settings

API = settings.API_PREFIX


def test_login_with_valid_token_returns_identity(client, create_athlete):
    athlete = create_athlete()

    response = client.post(f"{API}/auth/login", json={"token": athlete["loginToken"]})

    assert response.status_code == 200
    assert response.json() == {
        "user": {
            "id": athlete["id"],
            "name": "Jane Doe",
            "email": "jane@example.com",
            "role": "user",
        }
    }


def test_login_with_unknown_token_is_unauthorized(client, create_athlete):
    create_athlete()

    response = client.post(f"{API}/auth/login", json={"token": "not-a-token"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


def test_login_without_token_is_bad_request(client):
    response = client.post(f"{API}/auth/login", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Token is required"}


def test_login_token_from_query_and_validate_path(client, create_athlete):
    athlete = create_athlete()

    by_query = client.get(f"{API}/auth/login", params={"token": athlete["loginToken"]})
    by_path = client.get(f"{API}/auth/validate/{athlete['loginToken']}")

    assert by_query.status_code == 200
    assert by_path.status_code == 200
    assert by_query.json() == by_path.json()
    assert client.get(f"{API}/auth/validate/unknown").status_code == 401


def test_login_by_name_is_case_insensitive(client, create_athlete):
    athlete = create_athlete(name="Jane Doe")

    by_query = client.get(f"{API}/auth/by-name", params={"player": "jane doe"})
    by_path = client.get(f"{API}/auth/by-name/JANE+DOE")

    assert by_query.status_code == 200
    assert by_query.json()["user"]["id"] == athlete["id"]
    assert by_path.status_code == 200
    assert by_path.json()["user"]["id"] == athlete["id"]


def test_login_by_name_errors(client, create_athlete):
    create_athlete(name="Jane Doe")

    assert client.get(f"{API}/auth/by-name").status_code == 400
    missing = client.get(f"{API}/auth/by-name/Nobody")
    assert missing.status_code == 401
    assert missing.json() == {"error": "Athlete not found"}
