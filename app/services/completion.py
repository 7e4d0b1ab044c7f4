import logging
from typing import Dict

from sqlalchemy.orm import Session

from app.db import session as db_session
from app.models.workout import Block, BlockExercise
from app.repositories.workout_log import (ExerciseSetRepository,
                                          WorkoutCompletionRepository)

logger = logging.getLogger(__name__)

COMPLETED = "completed"
IN_PROGRESS = "in-progress"
NOT_STARTED = "not-started"


def exercise_status(completed_sets: int, planned_sets: int) -> str:
    """
    Derive the progress of one exercise from its completed and planned set counts.
    """
    if planned_sets > 0 and completed_sets == planned_sets:
        return COMPLETED
    if completed_sets > 0:
        return IN_PROGRESS
    return NOT_STARTED


class CompletionService:
    """
    Works out how far an athlete has got through a workout.
    """

    def __init__(self, db: Session):
        self.db = db
        self.set_repo = ExerciseSetRepository(db)
        self.completion_repo = WorkoutCompletionRepository(db)

    def _exercises_in_order(self, workout_id: str):
        return (
            self.db.query(BlockExercise)
            .join(Block, Block.id == BlockExercise.block_id)
            .filter(Block.workout_id == workout_id)
            .order_by(Block.order_index.asc(), BlockExercise.order_index.asc())
            .all()
        )

    def exercise_statuses(self, workout_id: str, athlete_id: str) -> Dict[str, Dict[str, object]]:
        """
        Per-exercise progress for an athlete, keyed by exercise name.

        Args:
            workout_id: Workout ID
            athlete_id: Athlete ID

        Returns:
            {exercise_name: {"status", "completed_sets", "total_sets"}}
        """
        statuses: Dict[str, Dict[str, object]] = {}
        for exercise in self._exercises_in_order(workout_id):
            done = self.set_repo.count_completed(exercise.id, workout_id, athlete_id)
            statuses[exercise.exercise_name] = {
                "status": exercise_status(done, exercise.sets),
                "completed_sets": done,
                "total_sets": exercise.sets,
            }
        return statuses

    def is_workout_complete(self, workout_id: str, athlete_id: str) -> bool:
        exercises = self._exercises_in_order(workout_id)
        if not exercises:
            return False
        for exercise in exercises:
            done = self.set_repo.count_completed(exercise.id, workout_id, athlete_id)
            if exercise_status(done, exercise.sets) != COMPLETED:
                return False
        return True

    def refresh_workout_completion(self, workout_id: str, athlete_id: str) -> bool:
        """
        Recompute and persist the workout completion fact.

        Args:
            workout_id: Workout ID
            athlete_id: Athlete ID

        Returns:
            True when every exercise in the workout is completed
        """
        complete = self.is_workout_complete(workout_id, athlete_id)
        if complete:
            self.completion_repo.mark_complete(workout_id, athlete_id)
        else:
            self.completion_repo.clear(workout_id, athlete_id)
        return complete


def refresh_workout_completion_task(workout_id: str, athlete_id: str) -> None:
    """
    Background entry point run after a set save; errors are logged, never raised.
    """
    db = db_session.SessionLocal()
    try:
        complete = CompletionService(db).refresh_workout_completion(workout_id, athlete_id)
        logger.info("Workout %s completion for athlete %s: %s", workout_id, athlete_id, complete)
    except Exception:
        logger.exception("Background completion check failed for workout %s", workout_id)
        db.rollback()
    finally:
        db.close()
