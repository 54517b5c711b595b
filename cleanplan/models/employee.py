from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, TYPE_CHECKING
from cleanplan.models.base import BaseModel
from cleanplan.models.associations import assignments
if TYPE_CHECKING:
    from cleanplan.models.apartment import Apartment
    from cleanplan.models.user import User


class Employee(BaseModel):
    """Staff member who can be assigned to cleaning jobs."""

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="employees")

    apartments: Mapped[List["Apartment"]] = relationship(
        "Apartment",
        secondary=assignments,
        back_populates="employees",
        order_by="Apartment.cleaning_date.desc()",
        passive_deletes=True,
        lazy="selectin",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
