import pytest

from app.models.exercise import Exercise
from app.repositories.exercise import ExerciseRepository


def test_get_one_by_matches_every_filter(db):
    db.add_all([Exercise(id="1", name="Squat"), Exercise(id="2", name="Row")])
    db.commit()
    repo = ExerciseRepository(db)

    assert repo.get_one_by(name="Row").id == "2"
    assert repo.get_one_by(id="1", name="Row") is None
    assert repo.exists(name="Squat")


def test_get_one_by_rejects_unknown_field(db):
    db.add(Exercise(id="1", name="Squat"))
    db.commit()
    repo = ExerciseRepository(db)

    with pytest.raises(AttributeError):
        repo.get_one_by(nmae="Row")
    with pytest.raises(AttributeError):
        repo.exists(nmae="Row")
