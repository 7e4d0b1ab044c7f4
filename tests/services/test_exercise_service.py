import pytest

from app.models.exercise import Exercise
from app.repositories.exercise import ExerciseRepository
from app.services.exercise import ExerciseIdAllocationError, ExerciseService


def _seed(session_factory, *ids):
    # Seed through a separate session so the service session has no cached rows
    session = session_factory()
    try:
        for exercise_id in ids:
            session.add(Exercise(id=exercise_id, name=f"Exercise {exercise_id}"))
        session.commit()
    finally:
        session.close()


def test_create_retries_after_id_conflict(db, session_factory, monkeypatch):
    _seed(session_factory, "1", "2")
    # Simulate a concurrent writer: the computed candidate is already taken
    monkeypatch.setattr(ExerciseRepository, "next_id", lambda self: "2")

    exercise = ExerciseService(db).create_exercise({"name": "Deadlift"})

    assert exercise.id == "3"
    assert exercise.name == "Deadlift"


def test_create_gives_up_after_max_attempts(db, session_factory, monkeypatch):
    _seed(session_factory, "1", "2", "3")
    monkeypatch.setattr(ExerciseRepository, "next_id", lambda self: "1")

    with pytest.raises(ExerciseIdAllocationError):
        ExerciseService(db, max_attempts=3).create_exercise({"name": "Deadlift"})

    assert db.query(Exercise).count() == 3


def test_first_exercise_gets_id_one(db):
    exercise = ExerciseService(db).create_exercise({"name": "Squat"})

    assert exercise.id == "1"


def test_ids_sort_numerically(db, session_factory):
    _seed(session_factory, "2", "10", "9")

    assert ExerciseRepository(db).get_ids_ascending() == ["2", "9", "10"]
    assert ExerciseRepository(db).next_id() == "11"


def test_delete_repacks_remaining_ids(db, session_factory):
    _seed(session_factory, "1", "2", "3", "10")
    service = ExerciseService(db)

    service.delete_exercise(db.get(Exercise, "2"))

    remaining = sorted((e.id, e.name) for e in db.query(Exercise).all())
    assert remaining == [("1", "Exercise 1"), ("2", "Exercise 3"), ("3", "Exercise 10")]
