"""
Workout repository for database operations.
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from app.models.workout import Block, BlockExercise, Workout
from app.repositories.base import BaseRepository


class WorkoutRepository(BaseRepository[Workout]):
    """
    Repository for Workout model operations.
    """

    def __init__(self, db: Session):
        super().__init__(Workout, db)

    def _with_blocks(self):
        return self.db.query(Workout).options(
            selectinload(Workout.blocks).selectinload(Block.exercises)
        )

    def get_by_id_with_blocks(self, workout_id: str) -> Optional[Workout]:
        """
        Get workout by ID with eager loading of blocks and their exercises.

        Args:
            workout_id: Workout ID

        Returns:
            Workout instance with blocks loaded or None if not found
        """
        return self._with_blocks().filter(Workout.id == workout_id).first()

    def search(
        self,
        athlete_id: Optional[str] = None,
        team_ids: Optional[List[str]] = None,
        team_id: Optional[str] = None,
        templates_only: bool = False,
    ) -> List[Workout]:
        """
        List workouts, newest date first, with blocks loaded.

        Args:
            athlete_id: Include workouts assigned directly to this athlete
            team_ids: Teams of that athlete; their workouts are included too
            team_id: Restrict to workouts of a single team
            templates_only: Only workouts with neither athlete nor team

        Returns:
            List of Workout instances
        """
        query = self._with_blocks()

        if templates_only:
            query = query.filter(Workout.athlete_id.is_(None), Workout.team_id.is_(None))
        else:
            if athlete_id:
                if team_ids:
                    query = query.filter(
                        or_(Workout.athlete_id == athlete_id, Workout.team_id.in_(team_ids))
                    )
                else:
                    query = query.filter(Workout.athlete_id == athlete_id)
            if team_id:
                query = query.filter(Workout.team_id == team_id)

        return query.order_by(Workout.date.desc()).all()

    def get_by_team_id(self, team_id: str) -> List[Workout]:
        return self.search(team_id=team_id)

    def clear_blocks(self, workout: Workout) -> None:
        """
        Delete every block of a workout; block exercises and logged sets go with them.

        Args:
            workout: Workout instance
        """
        for block in list(workout.blocks):
            self.db.delete(block)
        self.db.flush()
        self.db.expire(workout, ["blocks"])

    def get_block_exercise(self, workout_id: str, block_exercise_id: str) -> Optional[BlockExercise]:
        """
        Get a block exercise, but only if it belongs to the given workout.

        Args:
            workout_id: Workout ID
            block_exercise_id: Block exercise ID

        Returns:
            BlockExercise instance or None if not found in that workout
        """
        return (
            self.db.query(BlockExercise)
            .join(Block, Block.id == BlockExercise.block_id)
            .filter(Block.workout_id == workout_id)
            .filter(BlockExercise.id == block_exercise_id)
            .first()
        )
