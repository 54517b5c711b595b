import logging
from sqlalchemy.orm import Session
from cleanplan.models.user import User
from cleanplan.repositories.user_repository import UserRepository
from cleanplan.schemas.user import SafeUser, Token, UserCreate
from cleanplan.security import (
    create_session_token,
    get_password_hash,
    normalize_email,
    read_session_token,
    verify_password,
)
from cleanplan.config import settings
from cleanplan.core.exception import AuthenticationException, DuplicateResourceException

logger = logging.getLogger(__name__)


class AuthService:
    """Service layer for authentication operations."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def register(self, user_data: UserCreate) -> SafeUser:
        """
        Register a new user.

        Validates that the email is unique and hashes the password before storing.
        """
        if self.user_repo.email_exists(user_data.email):
            raise DuplicateResourceException("User", user_data.email)

        user = User(
            email=user_data.email,
            hashed_password=get_password_hash(user_data.password),
            theme_color=user_data.theme_color or settings.DEFAULT_THEME_COLOR,
        )
        user = self.user_repo.create(user)

        logger.info("Registered user %s", user.id)
        return SafeUser.model_validate(user)

    def authenticate(self, email: str, password: str) -> SafeUser:
        """
        Check an email and password pair.

        Raises:
            AuthenticationException: If the email is unknown or the password is wrong
        """
        normalized = normalize_email(email)
        user = self.user_repo.get_by_email(normalized) if normalized else None

        if not user or not verify_password(password, user.hashed_password):
            logger.warning("Failed login attempt for %s", email)
            raise AuthenticationException("Incorrect email or password")

        return SafeUser.model_validate(user)

    def login(self, email: str, password: str) -> Token:
        """
        Login user and return access token.
        """
        user = self.authenticate(email, password)
        return Token(access_token=create_session_token(user.id), token_type="bearer")

    def restore_session(self, token: str) -> SafeUser:
        """
        Resolve a token back to the user it was issued for.

        Raises:
            AuthenticationException: If the token is invalid, expired
                or its user no longer exists
        """
        user_id = read_session_token(token)
        if user_id is None:
            raise AuthenticationException("Could not validate credentials")

        row = self.user_repo.get_safe(user_id)
        if row is None:
            raise AuthenticationException("User not found")

        return SafeUser.model_validate(row)
