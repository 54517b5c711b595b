from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    theme_color: Optional[str] = Field(None, max_length=50)


class SafeUser(BaseModel):
    """User fields that can leave the server; never carries the password hash."""
    id: int
    email: str
    theme_color: str

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
