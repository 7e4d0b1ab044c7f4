from app.models.athlete import Athlete
from app.models.exercise import Exercise
from app.models.team import Team, TeamAthlete
from app.models.workout import (Block, BlockExercise, ExerciseNote,
                                ExerciseSet, Workout, WorkoutCompletion)

__all__ = [
    "Athlete",
    "Exercise",
    "Team",
    "TeamAthlete",
    "Workout",
    "Block",
    "BlockExercise",
    "ExerciseSet",
    "ExerciseNote",
    "WorkoutCompletion",
]
