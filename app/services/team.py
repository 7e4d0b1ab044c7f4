import logging
import uuid
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.models.team import Team
from app.repositories.team import TeamAthleteRepository, TeamRepository
from app.repositories.workout import WorkoutRepository
from app.schemas.athlete import AthleteSummary
from app.schemas.team import TeamResponse
from app.schemas.workout import WorkoutResponse

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, db: Session):
        self.db = db
        self.team_repo = TeamRepository(db)
        self.team_athlete_repo = TeamAthleteRepository(db)
        self.workout_repo = WorkoutRepository(db)

    def to_response(self, team: Team, include_members: bool = True) -> TeamResponse:
        """
        Shape a team with its athletes and fully nested workouts.

        Args:
            team: Team instance
            include_members: Load athletes and workouts; False returns empty lists

        Returns:
            TeamResponse
        """
        response = TeamResponse.model_validate(
            {
                "id": team.id,
                "name": team.name,
                "description": team.description,
                "created_at": team.created_at,
            }
        )
        if include_members:
            response.athletes = [
                AthleteSummary.model_validate(athlete)
                for athlete in self.team_athlete_repo.get_athletes_for_team(team.id)
            ]
            response.workouts = [
                WorkoutResponse.model_validate(workout)
                for workout in self.workout_repo.get_by_team_id(team.id)
            ]
        return response

    def create_team(self, name: str, description: Optional[str]) -> Team:
        team = self.team_repo.create(
            {"id": str(uuid.uuid4()), "name": name, "description": description or None}
        )
        logger.info("Created team %s (%s)", team.id, team.name)
        return team

    def update_team(self, team: Team, update_data: Dict[str, Any]) -> Team:
        # An empty description clears it, as on create
        if "description" in update_data:
            update_data["description"] = update_data["description"] or None
        if not update_data:
            return team
        return self.team_repo.update(team, update_data)

    def add_athlete(self, team_id: str, athlete_id: str) -> None:
        self.team_athlete_repo.create({"team_id": team_id, "athlete_id": athlete_id})
        logger.info("Added athlete %s to team %s", athlete_id, team_id)
