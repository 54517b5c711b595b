"""
Credentials and session tokens.

A session token is a signed JWT whose subject is the user ID, valid for
ACCESS_TOKEN_EXPIRE_MINUTES. Emails are compared in their normalized form,
the same form EmailStr stores at registration.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from email_validator import EmailNotValidError, validate_email
from jwt.exceptions import PyJWTError
from passlib.context import CryptContext
from .config import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def normalize_email(email: str) -> Optional[str]:
    """Canonical form of an email address, or None if it isn't one."""
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return None


def create_session_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token that identifies the user until it expires."""
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": str(user_id),
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def read_session_token(token: str) -> Optional[int]:
    """
    Get the user ID a session token was issued for.

    Returns:
        The user ID, or None if the token is forged, expired or malformed
    """
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except PyJWTError:
        return None

    try:
        return int(claims["sub"])
    except (KeyError, ValueError, TypeError):
        return None
