from sqlalchemy import Row, select, update
from sqlalchemy.orm import Session
from typing import Optional
from cleanplan.models.user import User
from cleanplan.repositories.repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def email_exists(self, email: str) -> bool:
        """Check if email already exists."""
        return self.db.query(User).filter(User.email == email).count() > 0

    def get_safe(self, user_id: int) -> Optional[Row]:
        """Get the id, email and theme of a user without loading the password hash."""
        stmt = select(User.id, User.email, User.theme_color).where(User.id == user_id)
        return self.db.execute(stmt).first()

    def update_theme(self, user_id: int, theme_color: str) -> Optional[Row]:
        """
        Set a user's theme color.

        Returns:
            The updated id, email and theme, or None if no user matched
        """
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(theme_color=theme_color)
            .returning(User.id, User.email, User.theme_color)
        )
        row = self.db.execute(stmt).first()
        self.db.commit()
        return row
