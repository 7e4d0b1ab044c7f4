from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.db.errors import is_unique_violation
from app.db.session import get_db
from app.repositories.athlete import AthleteRepository
from app.repositories.team import TeamAthleteRepository, TeamRepository
from app.schemas.team import TeamAthleteAdd, TeamCreate, TeamResponse, TeamUpdate
from app.services.team import TeamService
from app.utils.constant import ERROR_MESSAGES

router = APIRouter()


def _get_team_or_404(team_id: str, db: Session):
    team = TeamRepository(db).get_by_id(team_id)
    if team is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["TEAM_NOT_FOUND"])
    return team


@router.get("", response_model=List[TeamResponse])
def read_teams(db: Session = Depends(get_db)):
    """
    Get all teams, newest first, with their athletes and workouts.
    """
    team_service = TeamService(db)
    return [team_service.to_response(team) for team in TeamRepository(db).get_all_newest_first()]


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
def create_team(team_in: TeamCreate, db: Session = Depends(get_db)):
    if not team_in.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["TEAM_NAME_REQUIRED"])

    team_service = TeamService(db)
    team = team_service.create_team(team_in.name, team_in.description)
    return team_service.to_response(team, include_members=False)


@router.get("/{team_id}", response_model=TeamResponse)
def read_team(team_id: str, db: Session = Depends(get_db)):
    team = _get_team_or_404(team_id, db)
    return TeamService(db).to_response(team)


@router.put("/{team_id}", response_model=TeamResponse)
def update_team(team_id: str, team_in: TeamUpdate, db: Session = Depends(get_db)):
    team = _get_team_or_404(team_id, db)
    update_data = team_in.model_dump(exclude_unset=True)
    if not update_data.get("name"):
        update_data.pop("name", None)

    team_service = TeamService(db)
    team = team_service.update_team(team, update_data)
    return team_service.to_response(team)


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_team(team_id: str, db: Session = Depends(get_db)):
    team = _get_team_or_404(team_id, db)
    TeamRepository(db).delete(team)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{team_id}/athletes", status_code=status.HTTP_204_NO_CONTENT)
def add_team_athlete(team_id: str, member_in: TeamAthleteAdd, db: Session = Depends(get_db)):
    """
    Add an athlete to a team.
    """
    if not member_in.athlete_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ERROR_MESSAGES["ATHLETE_ID_REQUIRED"])
    _get_team_or_404(team_id, db)
    if not AthleteRepository(db).exists(id=member_in.athlete_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["ATHLETE_NOT_FOUND"])

    try:
        TeamService(db).add_athlete(team_id, member_in.athlete_id)
    except IntegrityError as e:
        if not is_unique_violation(e):
            raise
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=ERROR_MESSAGES["ATHLETE_ALREADY_IN_TEAM"])
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{team_id}/athletes/{athlete_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_team_athlete(team_id: str, athlete_id: str, db: Session = Depends(get_db)):
    team_athlete_repo = TeamAthleteRepository(db)
    membership = team_athlete_repo.get_by_composite_key(team_id, athlete_id)
    if membership is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ERROR_MESSAGES["ATHLETE_NOT_IN_TEAM"])
    team_athlete_repo.delete(membership)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
