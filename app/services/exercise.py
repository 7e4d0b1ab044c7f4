import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.errors import is_unique_violation
from app.models.exercise import Exercise
from app.repositories.exercise import ExerciseRepository

logger = logging.getLogger(__name__)


class ExerciseIdAllocationError(RuntimeError):
    """Raised when no free sequential exercise ID was found within the retry bound."""


class ExerciseService:
    def __init__(self, db: Session, max_attempts: Optional[int] = None):
        self.db = db
        self.exercise_repo = ExerciseRepository(db)
        self.max_attempts = max_attempts or settings.EXERCISE_ID_MAX_ATTEMPTS

    def create_exercise(self, data: Dict[str, Any]) -> Exercise:
        """
        Insert an exercise under the next sequential ID.

        Two concurrent creations can compute the same ID; on a key conflict the
        candidate is bumped and the insert retried.

        Args:
            data: Column values without the ID

        Returns:
            The created Exercise

        Raises:
            ExerciseIdAllocationError: If every attempt hit a conflict
        """
        candidate = int(self.exercise_repo.next_id())
        for attempt in range(1, self.max_attempts + 1):
            try:
                exercise = self.exercise_repo.create({**data, "id": str(candidate)})
            except IntegrityError as e:
                if not is_unique_violation(e):
                    raise
                logger.warning(
                    "Exercise ID %s already taken (attempt %d/%d)", candidate, attempt, self.max_attempts
                )
                candidate += 1
                continue
            logger.info("Created exercise %s (%s)", exercise.id, exercise.name)
            return exercise

        raise ExerciseIdAllocationError(
            f"Failed to allocate an exercise ID after {self.max_attempts} attempts"
        )

    def update_exercise(self, exercise: Exercise, update_data: Dict[str, Any]) -> Exercise:
        # Empty strings clear optional fields
        for field in ("video_url", "category", "instructions"):
            if field in update_data and not update_data[field]:
                update_data[field] = None
        if "name" in update_data and not update_data["name"]:
            update_data.pop("name")
        update_data["updated_at"] = datetime.now(timezone.utc)
        return self.exercise_repo.update(exercise, update_data)

    def delete_exercise(self, exercise: Exercise) -> None:
        """
        Delete an exercise and re-pack the remaining IDs to 1..N.
        """
        self.exercise_repo.delete(exercise)
        changed = self.exercise_repo.reindex()
        if changed:
            logger.info("Re-indexed %d exercise IDs after delete", changed)
