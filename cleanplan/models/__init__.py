from cleanplan.models.base import Base, BaseModel
from cleanplan.models.associations import assignments
from cleanplan.models.user import User
from cleanplan.models.apartment import Apartment, ApartmentStatus, PaymentStatus
from cleanplan.models.employee import Employee

__all__ = [
    # Base
    "Base",
    "BaseModel",
    # Associations
    "assignments",
    # User
    "User",
    # Apartment
    "Apartment",
    "ApartmentStatus",
    "PaymentStatus",
    # Employee
    "Employee",
]
