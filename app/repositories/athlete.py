"""
Athlete repository for database operations.
"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.athlete import Athlete
from app.repositories.base import BaseRepository


class AthleteRepository(BaseRepository[Athlete]):
    """
    Repository for Athlete model operations.
    """

    def __init__(self, db: Session):
        super().__init__(Athlete, db)

    def get_all_newest_first(self) -> List[Athlete]:
        """
        Get every athlete, most recently created first.

        Returns:
            List of Athlete instances
        """
        return self.get_all(Athlete.created_at.desc())

    def get_by_login_token(self, token: str) -> Optional[Athlete]:
        """
        Get athlete by login token.

        Args:
            token: Login token issued at creation

        Returns:
            Athlete instance or None if the token is unknown
        """
        return self.db.query(Athlete).filter(Athlete.login_token == token).first()

    def get_by_name_insensitive(self, name: str) -> Optional[Athlete]:
        """
        Get athlete by exact name match (case-insensitive).

        Args:
            name: Athlete name

        Returns:
            Athlete instance or None if not found
        """
        return (
            self.db.query(Athlete)
            .filter(func.lower(Athlete.name) == name.lower())
            .first()
        )

