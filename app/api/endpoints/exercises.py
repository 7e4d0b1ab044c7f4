from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.repositories.exercise import ExerciseRepository
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseUpdate
from app.services.exercise import ExerciseIdAllocationError, ExerciseService
from app.utils.constant import ERROR_MESSAGES

router = APIRouter()

@router.get("", response_model=List[ExerciseResponse], response_model_exclude_none=True)
def read_exercises(db: Session = Depends(get_db)):
    exercise_repo = ExerciseRepository(db)
    return exercise_repo.get_all_by_name()

@router.post("", response_model=ExerciseResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def create_exercise(exercise: ExerciseCreate, db: Session = Depends(get_db)):
    if not exercise.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["EXERCISE_NAME_REQUIRED"])

    exercise_data = {
        "name": exercise.name,
        "video_url": exercise.video_url or None,
        "category": exercise.category or None,
        "instructions": exercise.instructions or None,
    }
    try:
        return ExerciseService(db).create_exercise(exercise_data)
    except ExerciseIdAllocationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.get("/{exercise_id}", response_model=ExerciseResponse, response_model_exclude_none=True)
def read_exercise(exercise_id: str, db: Session = Depends(get_db)):
    exercise_repo = ExerciseRepository(db)
    exercise = exercise_repo.get_by_id(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail=ERROR_MESSAGES["EXERCISE_NOT_FOUND"])
    return exercise

@router.put("/{exercise_id}", response_model=ExerciseResponse, response_model_exclude_none=True)
def update_exercise(exercise_id: str, exercise: ExerciseUpdate, db: Session = Depends(get_db)):
    exercise_repo = ExerciseRepository(db)
    db_exercise = exercise_repo.get_by_id(exercise_id)
    if db_exercise is None:
        raise HTTPException(status_code=404, detail=ERROR_MESSAGES["EXERCISE_NOT_FOUND"])

    update_data = exercise.model_dump(exclude_unset=True)
    return ExerciseService(db).update_exercise(db_exercise, update_data)

@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(exercise_id: str, db: Session = Depends(get_db)):
    """
    Delete an exercise; the remaining exercises are renumbered 1..N.
    """
    exercise_repo = ExerciseRepository(db)
    db_exercise = exercise_repo.get_by_id(exercise_id)
    if db_exercise is None:
        raise HTTPException(status_code=404, detail=ERROR_MESSAGES["EXERCISE_NOT_FOUND"])

    ExerciseService(db).delete_exercise(db_exercise)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
