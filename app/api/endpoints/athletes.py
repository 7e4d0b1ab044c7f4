import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import generate_login_token, get_password_hash
from app.db.errors import is_unique_violation
from app.db.session import get_db
from app.repositories.athlete import AthleteRepository
from app.schemas.athlete import AthleteCreate, AthleteResponse, AthleteUpdate
from app.utils.constant import ERROR_MESSAGES

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[AthleteResponse])
def read_athletes(db: Session = Depends(get_db)):
    return AthleteRepository(db).get_all_newest_first()


@router.post("", response_model=AthleteResponse, status_code=status.HTTP_201_CREATED)
def create_athlete(athlete_in: AthleteCreate, db: Session = Depends(get_db)):
    """
    Create an athlete and issue their login token.
    """
    if not athlete_in.name or not athlete_in.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ERROR_MESSAGES["ATHLETE_NAME_EMAIL_REQUIRED"],
        )

    athlete_data = {
        "id": str(uuid.uuid4()),
        "name": athlete_in.name,
        "email": athlete_in.email,
        "password_hash": get_password_hash(athlete_in.password),
        "login_token": generate_login_token(),
    }
    try:
        athlete = AthleteRepository(db).create(athlete_data)
    except IntegrityError as e:
        if not is_unique_violation(e):
            raise
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=ERROR_MESSAGES["EMAIL_ALREADY_EXISTS"])

    logger.info("Created athlete %s (%s)", athlete.id, athlete.email)
    return athlete


@router.get("/{athlete_id}", response_model=AthleteResponse)
def read_athlete(athlete_id: str, db: Session = Depends(get_db)):
    athlete = AthleteRepository(db).get_by_id(athlete_id)
    if athlete is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["ATHLETE_NOT_FOUND"])
    return athlete


@router.put("/{athlete_id}", response_model=AthleteResponse)
def update_athlete(athlete_id: str, athlete_in: AthleteUpdate, db: Session = Depends(get_db)):
    """
    Update an athlete's name, email or password.
    """
    athlete_repo = AthleteRepository(db)
    athlete = athlete_repo.get_by_id(athlete_id)
    if athlete is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["ATHLETE_NOT_FOUND"])

    update_data = athlete_in.model_dump(exclude_unset=True, exclude_none=True)
    password = update_data.pop("password", None)
    if password:
        update_data["password_hash"] = get_password_hash(password)
    if not update_data:
        return athlete

    try:
        return athlete_repo.update(athlete, update_data)
    except IntegrityError as e:
        if not is_unique_violation(e):
            raise
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=ERROR_MESSAGES["EMAIL_ALREADY_EXISTS"])


@router.delete("/{athlete_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_athlete(athlete_id: str, db: Session = Depends(get_db)):
    athlete_repo = AthleteRepository(db)
    athlete = athlete_repo.get_by_id(athlete_id)
    if athlete is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["ATHLETE_NOT_FOUND"])
    athlete_repo.delete(athlete)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
