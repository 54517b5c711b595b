from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional
from datetime import date
from decimal import Decimal
from cleanplan.models.apartment import ApartmentStatus, PaymentStatus
from cleanplan.schemas.employee import EmployeeResponse

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ApartmentBase(BaseModel):
    """Base apartment schema with common fields."""
    name: str = Field(..., min_length=1, max_length=255, description="Apartment name")
    cleaning_date: date = Field(..., description="Day of the cleaning job")
    start_time: Optional[str] = Field(None, pattern=TIME_PATTERN, description="Start time as HH:MM")
    status: ApartmentStatus = Field(ApartmentStatus.TO_DO, description="Job progress")
    payment_status: PaymentStatus = Field(PaymentStatus.UNPAID, description="Payment state")
    notes: Optional[str] = Field(None, description="Free-form notes")
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2, description="Price of the job")

    @field_validator("start_time", "price", mode="before")
    @classmethod
    def blank_as_none(cls, v: Any) -> Any:
        """Forms send empty strings for untouched optional fields."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ApartmentCreate(ApartmentBase):
    """Schema for creating an apartment together with its assigned employees."""
    employee_ids: List[int] = Field(default_factory=list, description="Employees assigned to the job")

    @field_validator("employee_ids")
    @classmethod
    def validate_employee_ids(cls, v: List[int]) -> List[int]:
        if any(employee_id < 1 for employee_id in v):
            raise ValueError("Employee IDs must be positive")
        return v

    def to_row(self) -> dict:
        """Column values as stored, with the date in 'YYYY-MM-DD' form."""
        data = self.model_dump(exclude={"employee_ids"})
        data["cleaning_date"] = self.cleaning_date.isoformat()
        return data


class ApartmentUpdate(ApartmentCreate):
    """
    Schema for replacing an apartment's details.

    The employee list replaces the current assignments entirely.
    """
    pass


class ApartmentResponse(ApartmentBase):
    id: int
    user_id: int

    class Config:
        from_attributes = True


class ApartmentWithEmployees(ApartmentResponse):
    employees: List[EmployeeResponse] = []
