from typing import Dict, List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.workout import Workout
from app.repositories.workout import WorkoutRepository
from app.repositories.workout_log import (ExerciseNoteRepository,
                                          ExerciseSetRepository,
                                          WorkoutCompletionRepository)
from app.schemas.base import SuccessResponse
from app.schemas.workout import (ExerciseCompletionStatus, ExerciseNotesResponse,
                                 ExerciseNotesSave, ExerciseSetResponse,
                                 ExerciseSetsSave, WorkoutCreate,
                                 WorkoutResponse, WorkoutUpdate)
from app.services.completion import CompletionService, refresh_workout_completion_task
from app.services.workout import WorkoutService
from app.utils.constant import ERROR_MESSAGES

router = APIRouter()


def _get_workout_or_404(workout_id: str, db: Session) -> Workout:
    workout = WorkoutRepository(db).get_by_id_with_blocks(workout_id)
    if workout is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["WORKOUT_NOT_FOUND"])
    return workout


def _check_block_exercise(workout_id: str, exercise_id: str, db: Session) -> None:
    workout_repo = WorkoutRepository(db)
    if workout_repo.get_by_id(workout_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["WORKOUT_NOT_FOUND"])
    if workout_repo.get_block_exercise(workout_id, exercise_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["EXERCISE_NOT_FOUND"])


def _require_athlete_id(athlete_id: Optional[str]) -> str:
    if not athlete_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES["ATHLETE_ID_QUERY_REQUIRED"],
        )
    return athlete_id


@router.get("", response_model=List[WorkoutResponse])
def read_workouts(
    athlete_id: Optional[str] = Query(None, alias="athleteId"),
    team_id: Optional[str] = Query(None, alias="teamId"),
    templates_only: bool = Query(False, alias="templatesOnly"),
    db: Session = Depends(get_db)
):
    """
    List workouts, newest date first.

    An athlete sees workouts assigned to them and workouts of every team they
    belong to. Templates are workouts with neither an athlete nor a team.
    """
    return WorkoutService(db).list_workouts(
        athlete_id=athlete_id,
        team_id=team_id,
        templates_only=templates_only,
    )


@router.post("", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED)
def create_workout(workout_in: WorkoutCreate, db: Session = Depends(get_db)):
    if not workout_in.name or not workout_in.date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES["WORKOUT_NAME_DATE_REQUIRED"],
        )
    return WorkoutService(db).create_workout(workout_in)


# Declared before "/{workout_id}" so "completions" is not taken for an ID
@router.get("/completions", response_model=Dict[str, bool])
def read_completions(
    athlete_id: Optional[str] = Query(None, alias="athleteId"),
    db: Session = Depends(get_db)
):
    """
    Get the IDs of every workout the athlete has completed.
    """
    athlete_id = _require_athlete_id(athlete_id)
    workout_ids = WorkoutCompletionRepository(db).get_workout_ids_for_athlete(athlete_id)
    return {workout_id: True for workout_id in workout_ids}


@router.get("/{workout_id}", response_model=WorkoutResponse)
def read_workout(workout_id: str, db: Session = Depends(get_db)):
    return _get_workout_or_404(workout_id, db)


@router.put("/{workout_id}", response_model=WorkoutResponse)
def update_workout(workout_id: str, workout_in: WorkoutUpdate, db: Session = Depends(get_db)):
    """
    Update a workout; its blocks are replaced with the submitted ones.
    """
    workout = _get_workout_or_404(workout_id, db)
    return WorkoutService(db).update_workout(workout, workout_in)


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: str, db: Session = Depends(get_db)):
    workout = _get_workout_or_404(workout_id, db)
    WorkoutRepository(db).delete(workout)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{workout_id}/completion", response_model=Dict[str, ExerciseCompletionStatus])
def read_workout_completion(
    workout_id: str,
    athlete_id: Optional[str] = Query(None, alias="athleteId"),
    db: Session = Depends(get_db)
):
    """
    Get the athlete's progress on each exercise of a workout, keyed by exercise name.
    """
    athlete_id = _require_athlete_id(athlete_id)
    return CompletionService(db).exercise_statuses(workout_id, athlete_id)


@router.get("/{workout_id}/exercises/{exercise_id}/sets", response_model=List[ExerciseSetResponse])
def read_exercise_sets(
    workout_id: str,
    exercise_id: str,
    athlete_id: Optional[str] = Query(None, alias="athleteId"),
    db: Session = Depends(get_db)
):
    athlete_id = _require_athlete_id(athlete_id)
    sets = ExerciseSetRepository(db).get_for_athlete(exercise_id, workout_id, athlete_id)
    return [
        ExerciseSetResponse(
            set=exercise_set.set_number,
            weight=exercise_set.weight or "",
            reps=exercise_set.reps or "",
            completed=exercise_set.completed,
        )
        for exercise_set in sets
    ]


@router.post("/{workout_id}/exercises/{exercise_id}/sets", response_model=SuccessResponse)
def save_exercise_sets(
    workout_id: str,
    exercise_id: str,
    sets_in: ExerciseSetsSave,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db)
):
    """
    Save the athlete's sets for one exercise.

    Sets missing from the payload are deleted, so an empty list clears the
    exercise. Workout completion is recomputed after the response is sent.
    """
    if not sets_in.athlete_id or sets_in.sets is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["SETS_PAYLOAD_REQUIRED"])
    _check_block_exercise(workout_id, exercise_id, db)

    WorkoutService(db).save_sets(workout_id, exercise_id, sets_in.athlete_id, sets_in.sets)
    background_tasks.add_task(refresh_workout_completion_task, workout_id, sets_in.athlete_id)
    return SuccessResponse(message="Sets saved successfully")


@router.get("/{workout_id}/exercises/{exercise_id}/notes", response_model=ExerciseNotesResponse)
def read_exercise_notes(
    workout_id: str,
    exercise_id: str,
    athlete_id: Optional[str] = Query(None, alias="athleteId"),
    db: Session = Depends(get_db)
):
    athlete_id = _require_athlete_id(athlete_id)
    note = ExerciseNoteRepository(db).get_for_athlete(exercise_id, workout_id, athlete_id)
    return ExerciseNotesResponse(notes=(note.notes if note else None) or "")


@router.post("/{workout_id}/exercises/{exercise_id}/notes", response_model=SuccessResponse)
def save_exercise_notes(
    workout_id: str,
    exercise_id: str,
    notes_in: ExerciseNotesSave,
    db: Session = Depends(get_db)
):
    if not notes_in.athlete_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["ATHLETE_ID_BODY_REQUIRED"])
    _check_block_exercise(workout_id, exercise_id, db)

    ExerciseNoteRepository(db).upsert(exercise_id, workout_id, notes_in.athlete_id, notes_in.notes or "")
    return SuccessResponse(message="Notes saved successfully")
