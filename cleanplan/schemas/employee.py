from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date
from decimal import Decimal
from cleanplan.models.apartment import ApartmentStatus, PaymentStatus


class EmployeeBase(BaseModel):
    """Base employee schema with common fields."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class EmployeeCreate(EmployeeBase):
    """Schema for creating a new employee."""
    pass


class EmployeeResponse(EmployeeBase):
    id: int
    user_id: int

    class Config:
        from_attributes = True


class AssignedApartment(BaseModel):
    """Apartment summary shown under an employee."""
    id: int
    name: str
    cleaning_date: date
    start_time: Optional[str] = None
    status: ApartmentStatus
    payment_status: PaymentStatus
    price: Optional[Decimal] = None

    class Config:
        from_attributes = True


class EmployeeWithApartments(EmployeeResponse):
    apartments: List[AssignedApartment] = []
