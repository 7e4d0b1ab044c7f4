from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.athlete import Athlete
from app.repositories.athlete import AthleteRepository
from app.schemas.auth import AuthResponse, AuthUser, LoginRequest
from app.utils.constant import ERROR_MESSAGES

router = APIRouter()


def _auth_response(athlete: Optional[Athlete], missing: str) -> AuthResponse:
    if athlete is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=missing)
    return AuthResponse(user=AuthUser(id=athlete.id, name=athlete.name, email=athlete.email))


def _login_with_token(token: Optional[str], db: Session) -> AuthResponse:
    if not token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["TOKEN_REQUIRED"])
    return _auth_response(AthleteRepository(db).get_by_login_token(token), ERROR_MESSAGES["INVALID_TOKEN"])


def _login_with_name(name: Optional[str], db: Session) -> AuthResponse:
    # Links built by hand encode spaces as "+"
    name = (name or "").replace("+", " ").strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["PLAYER_NAME_REQUIRED"])
    return _auth_response(AthleteRepository(db).get_by_name_insensitive(name), ERROR_MESSAGES["ATHLETE_NOT_FOUND"])


@router.post("/login", response_model=AuthResponse)
def login(login_in: LoginRequest, db: Session = Depends(get_db)):
    """
    Exchange a login token for the athlete's identity.
    """
    return _login_with_token(login_in.token, db)


@router.get("/login", response_model=AuthResponse)
def login_from_link(token: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return _login_with_token(token, db)


@router.get("/validate/{token}", response_model=AuthResponse)
def validate_token(token: str, db: Session = Depends(get_db)):
    return _login_with_token(token, db)


@router.get("/by-name", response_model=AuthResponse)
def login_by_name_query(player: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """
    Log in by athlete name, matched case-insensitively.
    """
    return _login_with_name(player, db)


@router.get("/by-name/{name}", response_model=AuthResponse)
def login_by_name(name: str, db: Session = Depends(get_db)):
    return _login_with_name(name, db)
