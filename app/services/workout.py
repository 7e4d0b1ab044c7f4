import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.workout import Block, BlockExercise, ExerciseSet, Workout
from app.repositories.team import TeamAthleteRepository
from app.repositories.workout import WorkoutRepository
from app.repositories.workout_log import ExerciseSetRepository
from app.schemas.workout import BlockCreate, ExerciseSetEntry, WorkoutCreate, WorkoutUpdate

logger = logging.getLogger(__name__)


def build_blocks(workout_id: str, blocks_in: Optional[List[BlockCreate]]) -> List[Block]:
    """
    Turn the submitted block list into Block/BlockExercise rows.

    Order indexes come from list position and IDs are derived from them:
    "<workout>_block_<i>" and "<block>_ex_<j>".
    """
    blocks: List[Block] = []
    for block_index, block_in in enumerate(blocks_in or []):
        block_id = f"{workout_id}_block_{block_index}"
        block = Block(id=block_id, workout_id=workout_id, name=block_in.name, order_index=block_index)
        block.exercises = [
            BlockExercise(
                id=f"{block_id}_ex_{exercise_index}",
                block_id=block_id,
                exercise_name=exercise_in.exercise_name,
                sets=exercise_in.sets,
                reps=exercise_in.reps,
                weight=exercise_in.weight or None,
                order_index=exercise_index,
            )
            for exercise_index, exercise_in in enumerate(block_in.exercises or [])
        ]
        blocks.append(block)
    return blocks


class WorkoutService:
    def __init__(self, db: Session):
        self.db = db
        self.workout_repo = WorkoutRepository(db)
        self.team_athlete_repo = TeamAthleteRepository(db)
        self.set_repo = ExerciseSetRepository(db)

    def list_workouts(
        self,
        athlete_id: Optional[str] = None,
        team_id: Optional[str] = None,
        templates_only: bool = False,
    ) -> List[Workout]:
        """
        List workouts; an athlete sees their own workouts plus those of their teams.
        """
        team_ids: List[str] = []
        if athlete_id and not templates_only:
            team_ids = self.team_athlete_repo.get_team_ids_for_athlete(athlete_id)
        return self.workout_repo.search(
            athlete_id=athlete_id,
            team_ids=team_ids,
            team_id=team_id,
            templates_only=templates_only,
        )

    def create_workout(self, workout_in: WorkoutCreate) -> Workout:
        workout_id = str(uuid.uuid4())
        workout = Workout(
            id=workout_id,
            name=workout_in.name,
            date=workout_in.date,
            athlete_id=workout_in.athlete_id or None,
            team_id=workout_in.team_id or None,
        )
        workout.blocks = build_blocks(workout_id, workout_in.blocks)
        self.db.add(workout)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("Created workout %s with %d blocks", workout_id, len(workout.blocks))
        return self.workout_repo.get_by_id_with_blocks(workout_id)

    def update_workout(self, workout: Workout, workout_in: WorkoutUpdate) -> Workout:
        """
        Overwrite a workout's header and replace its blocks wholesale.

        Owners missing from the payload are cleared, so a workout can be turned
        back into a template.
        """
        if workout_in.name:
            workout.name = workout_in.name
        if workout_in.date:
            workout.date = workout_in.date
        workout.athlete_id = workout_in.athlete_id or None
        workout.team_id = workout_in.team_id or None

        try:
            self.workout_repo.clear_blocks(workout)
            workout.blocks = build_blocks(workout.id, workout_in.blocks)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.expire_all()
        return self.workout_repo.get_by_id_with_blocks(workout.id)

    def save_sets(
        self,
        workout_id: str,
        block_exercise_id: str,
        athlete_id: str,
        entries: List[ExerciseSetEntry],
    ) -> None:
        """
        Store an athlete's sets for one exercise, dropping sets no longer submitted.
        """
        now = datetime.now(timezone.utc)
        sets = [
            ExerciseSet(
                id=f"{block_exercise_id}_{athlete_id}_{entry.set}",
                block_exercise_id=block_exercise_id,
                workout_id=workout_id,
                athlete_id=athlete_id,
                set_number=entry.set,
                weight=entry.weight or None,
                reps=entry.reps or None,
                completed=entry.completed,
                completed_at=now if entry.completed else None,
            )
            for entry in entries
        ]
        try:
            self.set_repo.replace_for_athlete(block_exercise_id, workout_id, athlete_id, sets)
        except Exception:
            self.db.rollback()
            raise
