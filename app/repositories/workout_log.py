"""
Repositories for athlete-logged workout data: sets, notes and completion facts.
"""
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.workout import ExerciseNote, ExerciseSet, WorkoutCompletion
from app.repositories.base import BaseRepository


class ExerciseSetRepository(BaseRepository[ExerciseSet]):
    """
    Repository for ExerciseSet model operations.
    """

    def __init__(self, db: Session):
        super().__init__(ExerciseSet, db)

    def get_for_athlete(self, block_exercise_id: str, workout_id: str, athlete_id: str) -> List[ExerciseSet]:
        """
        Get an athlete's logged sets for one exercise of a workout.

        Args:
            block_exercise_id: Block exercise ID
            workout_id: Workout ID
            athlete_id: Athlete ID

        Returns:
            List of ExerciseSet instances ordered by set number
        """
        return (
            self.db.query(ExerciseSet)
            .filter(ExerciseSet.block_exercise_id == block_exercise_id)
            .filter(ExerciseSet.workout_id == workout_id)
            .filter(ExerciseSet.athlete_id == athlete_id)
            .order_by(ExerciseSet.set_number.asc())
            .all()
        )

    def count_completed(self, block_exercise_id: str, workout_id: str, athlete_id: str) -> int:
        return (
            self.db.query(ExerciseSet)
            .filter(ExerciseSet.block_exercise_id == block_exercise_id)
            .filter(ExerciseSet.workout_id == workout_id)
            .filter(ExerciseSet.athlete_id == athlete_id)
            .filter(ExerciseSet.completed.is_(True))
            .count()
        )

    def replace_for_athlete(
        self,
        block_exercise_id: str,
        workout_id: str,
        athlete_id: str,
        sets: List[ExerciseSet],
    ) -> None:
        """
        Upsert the given sets and delete stored sets that are not among them.

        Sets are keyed by their composite string ID, so saving the same set
        twice updates the row instead of inserting a duplicate.

        Args:
            block_exercise_id: Block exercise ID
            workout_id: Workout ID
            athlete_id: Athlete ID
            sets: Transient ExerciseSet objects with IDs already assigned
        """
        incoming = {exercise_set.set_number for exercise_set in sets}
        for exercise_set in sets:
            self.db.merge(exercise_set)
        for stored in self.get_for_athlete(block_exercise_id, workout_id, athlete_id):
            if stored.set_number not in incoming:
                self.db.delete(stored)
        self.db.commit()


class ExerciseNoteRepository(BaseRepository[ExerciseNote]):
    """
    Repository for ExerciseNote model operations.
    """

    def __init__(self, db: Session):
        super().__init__(ExerciseNote, db)

    def get_for_athlete(self, block_exercise_id: str, workout_id: str, athlete_id: str) -> Optional[ExerciseNote]:
        return self.get_one_by(
            block_exercise_id=block_exercise_id,
            workout_id=workout_id,
            athlete_id=athlete_id,
        )

    def upsert(self, block_exercise_id: str, workout_id: str, athlete_id: str, notes: str) -> ExerciseNote:
        """
        Insert or overwrite the single note for an exercise, workout and athlete.

        Args:
            block_exercise_id: Block exercise ID
            workout_id: Workout ID
            athlete_id: Athlete ID
            notes: Note text

        Returns:
            The persisted ExerciseNote
        """
        note = self.db.merge(
            ExerciseNote(
                id=f"{block_exercise_id}_{workout_id}_{athlete_id}",
                block_exercise_id=block_exercise_id,
                workout_id=workout_id,
                athlete_id=athlete_id,
                notes=notes,
                updated_at=datetime.now(timezone.utc),
            )
        )
        self.db.commit()
        return note


class WorkoutCompletionRepository(BaseRepository[WorkoutCompletion]):
    """
    Repository for WorkoutCompletion model operations (composite key model).
    """

    def __init__(self, db: Session):
        super().__init__(WorkoutCompletion, db)

    def get_workout_ids_for_athlete(self, athlete_id: str) -> List[str]:
        rows = (
            self.db.query(WorkoutCompletion.workout_id)
            .filter(WorkoutCompletion.athlete_id == athlete_id)
            .all()
        )
        return [row.workout_id for row in rows]

    def mark_complete(self, workout_id: str, athlete_id: str) -> None:
        self.db.merge(
            WorkoutCompletion(
                workout_id=workout_id,
                athlete_id=athlete_id,
                completed_at=datetime.now(timezone.utc),
            )
        )
        self.db.commit()

    def clear(self, workout_id: str, athlete_id: str) -> None:
        (
            self.db.query(WorkoutCompletion)
            .filter(WorkoutCompletion.workout_id == workout_id)
            .filter(WorkoutCompletion.athlete_id == athlete_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
