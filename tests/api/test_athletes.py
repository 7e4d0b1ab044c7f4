from app.core.config import settings

API = settings.API_PREFIX


def test_create_athlete_issues_login_token(client):
    response = client.post(f"{API}/athletes", json={"name": "Jane Doe", "email": "jane@example.com"})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Jane Doe"
    assert body["email"] == "jane@example.com"
    assert body["loginToken"]
    assert body["id"]
    assert "createdAt" in body


def test_create_athlete_duplicate_email_conflicts(client, create_athlete):
    create_athlete(email="dup@example.com")

    response = client.post(f"{API}/athletes", json={"name": "Other", "email": "dup@example.com"})

    assert response.status_code == 409
    assert response.json() == {"error": "Email already exists"}


def test_create_athlete_requires_name_and_email(client):
    response = client.post(f"{API}/athletes", json={"name": "No Email"})

    assert response.status_code == 400
    assert response.json() == {"error": "Name and email are required"}


def test_password_is_stored_hashed(client, db):
    from app.models.athlete import Athlete

    response = client.post(
        f"{API}/athletes",
        json={"name": "Sam", "email": "sam@example.com", "password": "hunter22"},
    )
    assert response.status_code == 201
    assert "password" not in response.json()

    athlete = db.get(Athlete, response.json()["id"])
    assert athlete.password_hash
    assert athlete.password_hash != "hunter22"


def test_list_get_update_delete_athlete(client, create_athlete):
    athlete = create_athlete()

    listed = client.get(f"{API}/athletes")
    assert listed.status_code == 200
    assert [a["id"] for a in listed.json()] == [athlete["id"]]

    fetched = client.get(f"{API}/athletes/{athlete['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["loginToken"] == athlete["loginToken"]

    updated = client.put(f"{API}/athletes/{athlete['id']}", json={"name": "Jane Smith"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Jane Smith"
    assert updated.json()["email"] == "jane@example.com"

    deleted = client.delete(f"{API}/athletes/{athlete['id']}")
    assert deleted.status_code == 204
    assert client.get(f"{API}/athletes/{athlete['id']}").status_code == 404


def test_update_athlete_to_taken_email_conflicts(client, create_athlete):
    create_athlete(name="A", email="a@example.com")
    second = create_athlete(name="B", email="b@example.com")

    response = client.put(f"{API}/athletes/{second['id']}", json={"email": "a@example.com"})

    assert response.status_code == 409


def test_missing_athlete_returns_404(client):
    assert client.get(f"{API}/athletes/nope").status_code == 404
    assert client.put(f"{API}/athletes/nope", json={"name": "x"}).status_code == 404
    response = client.delete(f"{API}/athletes/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Athlete not found"}
