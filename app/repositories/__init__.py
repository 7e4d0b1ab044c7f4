"""
Repository layer for database access.
"""
from app.repositories.base import BaseRepository
from app.repositories.athlete import AthleteRepository
from app.repositories.team import TeamRepository, TeamAthleteRepository
from app.repositories.exercise import ExerciseRepository
from app.repositories.workout import WorkoutRepository
from app.repositories.workout_log import (
    ExerciseNoteRepository,
    ExerciseSetRepository,
    WorkoutCompletionRepository,
)

__all__ = [
    "BaseRepository",
    "AthleteRepository",
    "TeamRepository",
    "TeamAthleteRepository",
    "ExerciseRepository",
    "WorkoutRepository",
    "ExerciseSetRepository",
    "ExerciseNoteRepository",
    "WorkoutCompletionRepository",
]
