from typing import List, Optional

from pydantic import field_validator

from app.schemas.base import CamelModel, stringify

class BlockExerciseBase(CamelModel):
    exercise_name: str
    sets: int
    reps: str
    weight: Optional[str] = None

    @field_validator("reps", "weight", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return stringify(value)

class BlockExerciseCreate(BlockExerciseBase):
    pass

class BlockExerciseResponse(BlockExerciseBase):
    id: str

class BlockCreate(CamelModel):
    name: str
    exercises: Optional[List[BlockExerciseCreate]] = None

class BlockResponse(CamelModel):
    id: str
    name: str
    exercises: List[BlockExerciseResponse] = []

class WorkoutBase(CamelModel):
    name: Optional[str] = None
    date: Optional[str] = None
    athlete_id: Optional[str] = None
    team_id: Optional[str] = None

class WorkoutCreate(WorkoutBase):
    blocks: Optional[List[BlockCreate]] = None

class WorkoutUpdate(WorkoutCreate):
    pass

class WorkoutResponse(WorkoutBase):
    id: str
    name: str
    date: str
    blocks: List[BlockResponse] = []

class ExerciseSetEntry(CamelModel):
    set: int
    weight: Optional[str] = None
    reps: Optional[str] = None
    completed: bool = False

    @field_validator("reps", "weight", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return stringify(value)

class ExerciseSetsSave(CamelModel):
    athlete_id: Optional[str] = None
    sets: Optional[List[ExerciseSetEntry]] = None

    @field_validator("sets")
    @classmethod
    def unique_set_numbers(cls, value):
        if value is not None:
            numbers = [entry.set for entry in value]
            if len(numbers) != len(set(numbers)):
                raise ValueError("Set numbers must be unique")
        return value

class ExerciseSetResponse(CamelModel):
    set: int
    weight: str = ""
    reps: str = ""
    completed: bool = False

class ExerciseNotesSave(CamelModel):
    athlete_id: Optional[str] = None
    notes: Optional[str] = None

class ExerciseNotesResponse(CamelModel):
    notes: str = ""

class ExerciseCompletionStatus(CamelModel):
    """Progress of one exercise: "completed", "in-progress" or "not-started"."""
    status: str
    completed_sets: int
    total_sets: int
