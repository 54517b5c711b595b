from sqlalchemy import String, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from typing import List, TYPE_CHECKING
from cleanplan.config import settings
from cleanplan.models.base import BaseModel
if TYPE_CHECKING:
    from cleanplan.models.apartment import Apartment
    from cleanplan.models.employee import Employee


class User(BaseModel):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(Text)

    # Preferences
    theme_color: Mapped[str] = mapped_column(
        String(50), nullable=False, default=settings.DEFAULT_THEME_COLOR
    )

    # Relationships
    apartments: Mapped[List["Apartment"]] = relationship(
        "Apartment",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    employees: Mapped[List["Employee"]] = relationship(
        "Employee",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
