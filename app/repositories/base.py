"""
Base repository with generic CRUD operations.
"""
from typing import Any, Dict, Generic, List, Optional, Protocol, Type, TypeVar

from sqlalchemy.orm import Session


class HasID(Protocol):
    id: Any

ModelType = TypeVar("ModelType", bound=HasID)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class shared by every table keyed by a text ``id``.

    Writes commit immediately; a failed commit is rolled back before the
    error propagates so the request session can still be used to answer.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def get_by_id(self, id: str) -> Optional[ModelType]:
        """
        Get a single record by ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all(self, *order_by: Any) -> List[ModelType]:
        """
        Get every record, optionally ordered.

        Args:
            *order_by: Column expressions passed to ORDER BY

        Returns:
            List of model instances
        """
        query = self.db.query(self.model)
        if order_by:
            query = query.order_by(*order_by)
        return query.all()

    def get_one_by(self, **filters: Any) -> Optional[ModelType]:
        """
        Get the first record matching every field filter.

        Raises:
            AttributeError: If a filter names a field the model does not have
        """
        query = self.db.query(self.model)
        for field, value in filters.items():
            query = query.filter(getattr(self.model, field) == value)
        return query.first()

    def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Insert a record built from column values and return it refreshed.

        Server-side defaults such as created_at are loaded by the refresh.

        Raises:
            sqlalchemy.exc.IntegrityError: On key or constraint conflicts
        """
        db_obj = self.model(**obj_in)
        self.db.add(db_obj)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        # Unknown keys are ignored
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        self.db.add(db_obj)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ModelType) -> None:
        """
        Delete a record; dependent rows go through ON DELETE CASCADE.
        """
        self.db.delete(db_obj)
        self._commit()

    def exists(self, **filters: Any) -> bool:
        return self.get_one_by(**filters) is not None
