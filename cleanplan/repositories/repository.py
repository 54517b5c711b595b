from sqlalchemy import Select, delete, select
from sqlalchemy.orm import Session
from typing import Generic, Type, TypeVar, Optional, Dict, Any
from cleanplan.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Base repository with common create operations."""

    def __init__(self, model: Type[T], db: Session):
        """
        Initialize repository with model and database session.

        Args:
            model: The SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def create(self, obj: T) -> T:
        """Create a new record."""
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def create_from_dict(self, data: Dict[str, Any]) -> T:
        """Create a new record from dictionary."""
        obj = self.model(**data)
        return self.create(obj)


class OwnedRepository(BaseRepository[T]):
    """
    Repository for rows that belong to a user.

    Every read and write filters on ``user_id`` in the same statement,
    so rows of other users behave exactly like missing rows.
    """

    def owned(self, user_id: int) -> Select:
        """Select statement restricted to one user's rows."""
        return select(self.model).where(self.model.user_id == user_id)

    def get(self, user_id: int, id: int) -> Optional[T]:
        """Get a single record by ID, or None if missing or owned by someone else."""
        stmt = self.owned(user_id).where(self.model.id == id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_for_user(self, user_id: int, data: Dict[str, Any]) -> T:
        """Create a new record owned by the given user."""
        return self.create_from_dict({**data, "user_id": user_id})

    def delete(self, user_id: int, id: int) -> bool:
        """
        Delete a record by ID. Dependent rows go with it through ON DELETE CASCADE.

        Returns True if deleted, False if nothing matched.
        """
        stmt = delete(self.model).where(
            self.model.id == id,
            self.model.user_id == user_id,
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount > 0
