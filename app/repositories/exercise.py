"""
Exercise repository for database operations.
"""
from typing import Any, List

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.models.exercise import Exercise
from app.repositories.base import BaseRepository
from app.utils.helper import safe_int_convert


class ExerciseRepository(BaseRepository[Exercise]):
    """
    Repository for Exercise model operations.
    """

    def __init__(self, db: Session):
        super().__init__(Exercise, db)

    def get_all_by_name(self) -> List[Exercise]:
        """
        Get all exercises ordered alphabetically.

        Returns:
            List of Exercise instances
        """
        return self.get_all(Exercise.name.asc())

    def get_ids_ascending(self) -> List[str]:
        """
        Get every exercise ID sorted by numeric value.

        IDs are stored as text, so ordering happens here rather than in SQL
        where "10" would sort before "9".

        Returns:
            List of ID strings
        """
        ids = [row.id for row in self.db.query(Exercise.id).all()]
        return sorted(ids, key=safe_int_convert)

    def next_id(self) -> str:
        """
        Compute the next sequential ID (highest numeric ID + 1).

        Returns:
            Candidate ID string, "1" for an empty table
        """
        ids = self.get_ids_ascending()
        if not ids:
            return "1"
        return str(safe_int_convert(ids[-1]) + 1)

    def reindex(self) -> int:
        """
        Re-pack exercise IDs into a gapless 1..N sequence.

        Rows are rewritten in ascending order, so each target ID has already
        been vacated by the time it is assigned.

        Returns:
            Number of rows whose ID changed
        """
        changed = 0
        for index, current_id in enumerate(self.get_ids_ascending()):
            new_id = str(index + 1)
            if current_id == new_id:
                continue
            self.db.execute(
                update(Exercise)
                .where(Exercise.id == current_id)
                .values(id=new_id)
                .execution_options(synchronize_session=False)
            )
            changed += 1
        self.db.commit()
        self.db.expire_all()
        return changed

    def bulk_insert(self, exercises: List[dict[str, Any]]) -> None:
        """
        Bulk insert exercises.

        Args:
            exercises: List of exercise dictionaries
        """
        self.db.bulk_insert_mappings(Exercise.__mapper__, exercises)
        self.db.commit()
