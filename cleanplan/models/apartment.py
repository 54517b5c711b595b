from sqlalchemy import String, ForeignKey, Enum as SQLEnum, Text, Numeric, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional, TYPE_CHECKING
from decimal import Decimal
import enum
from cleanplan.models.base import BaseModel
from cleanplan.models.associations import assignments
if TYPE_CHECKING:
    from cleanplan.models.employee import Employee
    from cleanplan.models.user import User


class ApartmentStatus(str, enum.Enum):
    """Cleaning job progress"""

    TO_DO = "to_do"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class PaymentStatus(str, enum.Enum):
    """Whether the job has been paid for"""

    UNPAID = "unpaid"
    PAID = "paid"


class Apartment(BaseModel):
    """
    A cleaning job for one apartment on one day.

    Dates are stored as 'YYYY-MM-DD' strings and start times as 'HH:MM',
    so ordering and range filters compare them lexicographically.
    """

    __tablename__ = "apartments"
    __table_args__ = (
        CheckConstraint("price IS NULL OR price >= 0", name="ck_apartments_price_non_negative"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    cleaning_date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    start_time: Mapped[Optional[str]] = mapped_column(String(5), nullable=True, default=None)

    # Status
    status: Mapped[ApartmentStatus] = mapped_column(
        SQLEnum(ApartmentStatus), default=ApartmentStatus.TO_DO, nullable=False
    )
    payment_status: Mapped[PaymentStatus] = mapped_column(
        SQLEnum(PaymentStatus), default=PaymentStatus.UNPAID, nullable=False
    )

    # Details
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True, default=None)

    # Owner
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="apartments")

    employees: Mapped[List["Employee"]] = relationship(
        "Employee",
        secondary=assignments,
        back_populates="apartments",
        order_by="Employee.id",
        passive_deletes=True,
        lazy="selectin",
    )
