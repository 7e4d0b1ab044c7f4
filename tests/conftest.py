import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Keep the module-level engine off any real database before the app is imported
os.environ["DATABASE_URI"] = "sqlite://"
os.environ.pop("DATABASE_SERVICE_URI", None)

from app.core.config import settings  # noqa: E402
from app.db import session as db_session  # noqa: E402
from app.db.session import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
import app.models  # noqa: E402,F401  registers every table on Base.metadata

API = settings.API_PREFIX


@pytest.fixture()
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(test_engine, "connect", enable_sqlite_foreign_keys)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine, monkeypatch):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    # Background tasks open their own session through this name
    monkeypatch.setattr(db_session, "SessionLocal", TestingSessionLocal)
    return TestingSessionLocal


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    from app.main import app

    # Override dependency to use the test session
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def create_athlete(client):
    def _create(name="Jane Doe", email="jane@example.com", **extra):
        response = client.post(f"{API}/athletes", json={"name": name, "email": email, **extra})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def create_workout(client):
    def _create(**overrides):
        payload = {
            "name": "Lower body",
            "date": "2024-03-01",
            "blocks": [
                {
                    "name": "Warm-up",
                    "exercises": [
                        {"exerciseName": "Goblet Squat", "sets": 2, "reps": "10"},
                    ],
                },
                {
                    "name": "Main",
                    "exercises": [
                        {"exerciseName": "Back Squat", "sets": 3, "reps": "5", "weight": 100},
                        {"exerciseName": "Romanian Deadlift", "sets": 3, "reps": "8-10"},
                    ],
                },
            ],
        }
        payload.update(overrides)
        response = client.post(f"{API}/workouts", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
