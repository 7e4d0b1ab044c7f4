"""
Team and team-membership repositories.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.athlete import Athlete
from app.models.team import Team, TeamAthlete
from app.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """
    Repository for Team model operations.
    """

    def __init__(self, db: Session):
        super().__init__(Team, db)

    def get_all_newest_first(self) -> List[Team]:
        return self.get_all(Team.created_at.desc())


class TeamAthleteRepository(BaseRepository[TeamAthlete]):
    """
    Repository for the team/athlete join table (composite key model).
    """

    def __init__(self, db: Session):
        super().__init__(TeamAthlete, db)

    def get_by_composite_key(self, team_id: str, athlete_id: str) -> Optional[TeamAthlete]:
        """
        Get a membership row by composite key.

        Args:
            team_id: Team ID
            athlete_id: Athlete ID

        Returns:
            TeamAthlete instance or None if the athlete is not in the team
        """
        return (
            self.db.query(TeamAthlete)
            .filter(TeamAthlete.team_id == team_id)
            .filter(TeamAthlete.athlete_id == athlete_id)
            .first()
        )

    def get_athletes_for_team(self, team_id: str) -> List[Athlete]:
        """
        Get the athletes belonging to a team.

        Args:
            team_id: Team ID

        Returns:
            List of Athlete instances
        """
        return (
            self.db.query(Athlete)
            .join(TeamAthlete, TeamAthlete.athlete_id == Athlete.id)
            .filter(TeamAthlete.team_id == team_id)
            .all()
        )

    def get_team_ids_for_athlete(self, athlete_id: str) -> List[str]:
        rows = (
            self.db.query(TeamAthlete.team_id)
            .filter(TeamAthlete.athlete_id == athlete_id)
            .all()
        )
        return [row.team_id for row in rows]
