import unittest

from app.services import completion as completion_service
from app.services.completion import (COMPLETED, IN_PROGRESS, NOT_STARTED,
                                     CompletionService, exercise_status)


class FakeExercise:
    def __init__(self, id, exercise_name, sets):
        self.id = id
        self.exercise_name = exercise_name
        self.sets = sets


class FakeSetRepository:
    def __init__(self, completed):
        # completed maps block exercise id -> completed set count
        self._completed = completed

    def count_completed(self, block_exercise_id, workout_id, athlete_id):
        return self._completed.get(block_exercise_id, 0)


class FakeCompletionRepository:
    def __init__(self):
        self.marked = []
        self.cleared = []

    def mark_complete(self, workout_id, athlete_id):
        self.marked.append((workout_id, athlete_id))

    def clear(self, workout_id, athlete_id):
        self.cleared.append((workout_id, athlete_id))


def make_service(exercises, completed):
    service = CompletionService(db=None)
    service._exercises_in_order = lambda workout_id: exercises
    service.set_repo = FakeSetRepository(completed)
    service.completion_repo = FakeCompletionRepository()
    return service


class TestExerciseStatus(unittest.TestCase):
    def test_all_planned_sets_done(self):
        self.assertEqual(exercise_status(3, 3), COMPLETED)

    def test_some_sets_done(self):
        self.assertEqual(exercise_status(1, 3), IN_PROGRESS)

    def test_nothing_done(self):
        self.assertEqual(exercise_status(0, 3), NOT_STARTED)

    def test_zero_planned_sets_never_completes(self):
        self.assertEqual(exercise_status(0, 0), NOT_STARTED)


class TestCompletionService(unittest.TestCase):
    def setUp(self):
        self.exercises = [FakeExercise("ex1", "Squat", 3), FakeExercise("ex2", "Row", 2)]

    def test_statuses_keyed_by_exercise_name(self):
        service = make_service(self.exercises, {"ex1": 3, "ex2": 1})

        statuses = service.exercise_statuses("w1", "a1")

        self.assertEqual(list(statuses), ["Squat", "Row"])
        self.assertEqual(statuses["Squat"], {"status": COMPLETED, "completed_sets": 3, "total_sets": 3})
        self.assertEqual(statuses["Row"]["status"], IN_PROGRESS)

    def test_refresh_marks_complete_when_every_exercise_is_done(self):
        service = make_service(self.exercises, {"ex1": 3, "ex2": 2})

        self.assertTrue(service.refresh_workout_completion("w1", "a1"))
        self.assertEqual(service.completion_repo.marked, [("w1", "a1")])
        self.assertEqual(service.completion_repo.cleared, [])

    def test_refresh_clears_when_any_exercise_is_unfinished(self):
        service = make_service(self.exercises, {"ex1": 3, "ex2": 1})

        self.assertFalse(service.refresh_workout_completion("w1", "a1"))
        self.assertEqual(service.completion_repo.cleared, [("w1", "a1")])

    def test_workout_without_exercises_is_not_complete(self):
        service = make_service([], {})

        self.assertFalse(service.is_workout_complete("w1", "a1"))


class FailingSession:
    def __init__(self):
        self.rolled_back = False
        self.closed = False

    def query(self, *args, **kwargs):
        raise RuntimeError("database went away")

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class TestRefreshTask(unittest.TestCase):
    def test_background_failure_is_logged_not_raised(self):
        session = FailingSession()
        original = completion_service.db_session.SessionLocal
        completion_service.db_session.SessionLocal = lambda: session
        try:
            with self.assertLogs("app.services.completion", level="ERROR"):
                completion_service.refresh_workout_completion_task("w1", "a1")
        finally:
            completion_service.db_session.SessionLocal = original

        self.assertTrue(session.rolled_back)
        self.assertTrue(session.closed)


if __name__ == "__main__":
    unittest.main()
