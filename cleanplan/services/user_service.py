import logging
from sqlalchemy.orm import Session
from cleanplan.repositories.user_repository import UserRepository
from cleanplan.schemas.user import SafeUser
from cleanplan.core.exception import ResourceNotFoundException

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for user operations."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def get_safe_user(self, user_id: int) -> SafeUser:
        """Get a user without the password hash."""
        row = self.user_repo.get_safe(user_id)
        if row is None:
            raise ResourceNotFoundException("User", user_id)
        return SafeUser.model_validate(row)

    def update_theme(self, user_id: int, theme_color: str) -> SafeUser:
        """
        Update the user's theme color.

        Raises:
            ResourceNotFoundException: If no user was updated
        """
        row = self.user_repo.update_theme(user_id, theme_color)
        if row is None:
            raise ResourceNotFoundException("User", user_id)

        logger.info("Updated theme for user %s", user_id)
        return SafeUser.model_validate(row)
