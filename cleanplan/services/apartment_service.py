import logging
from datetime import date
from sqlalchemy.orm import Session
from typing import List, Optional
from cleanplan.models.apartment import Apartment
from cleanplan.repositories.apartment_repository import ApartmentRepository
from cleanplan.repositories.employee_repository import EmployeeRepository
from cleanplan.schemas.apartment import ApartmentCreate, ApartmentUpdate
from cleanplan.core.exception import (
    ResourceNotFoundException,
    BadRequestException,
    ValidationException
)

logger = logging.getLogger(__name__)


class ApartmentService:
    """Service layer for apartment operations."""

    def __init__(self, db: Session):
        self.db = db
        self.apartment_repo = ApartmentRepository(db)
        self.employee_repo = EmployeeRepository(db)

    def list_apartments(
        self,
        user_id: int,
        sort_by: Optional[str] = None,
        search: Optional[str] = None
    ) -> List[Apartment]:
        """List the user's apartments, each with its assigned employees."""
        return self.apartment_repo.get_by_user(user_id, sort_by=sort_by, search=search)

    def get_apartment(self, user_id: int, apartment_id: int) -> Apartment:
        """
        Get one apartment with its employees.

        Raises:
            ResourceNotFoundException: If missing or owned by another user
        """
        apartment = self.apartment_repo.get(user_id, apartment_id)
        if not apartment:
            raise ResourceNotFoundException("Apartment", apartment_id)
        return apartment

    def create_apartment(self, user_id: int, data: ApartmentCreate) -> Apartment:
        """
        Create an apartment and assign employees to it.

        Raises:
            BadRequestException: If an employee doesn't belong to the user
        """
        employee_ids = self._check_employees(user_id, data.employee_ids)
        apartment = self.apartment_repo.create_with_employees(
            user_id, data.to_row(), employee_ids
        )
        logger.info(
            "Created apartment %s for user %s with %d employees",
            apartment.id, user_id, len(employee_ids)
        )
        return apartment

    def update_apartment(
        self,
        user_id: int,
        apartment_id: int,
        data: ApartmentUpdate
    ) -> Apartment:
        """
        Update an apartment, replacing its assigned employees.

        Raises:
            BadRequestException: If an employee doesn't belong to the user
            ResourceNotFoundException: If the apartment is missing or owned by another user
        """
        employee_ids = self._check_employees(user_id, data.employee_ids)
        apartment = self.apartment_repo.update_with_employees(
            user_id, apartment_id, data.to_row(), employee_ids
        )
        if not apartment:
            raise ResourceNotFoundException("Apartment", apartment_id)

        logger.info("Updated apartment %s for user %s", apartment_id, user_id)
        return apartment

    def delete_apartment(self, user_id: int, apartment_id: int) -> bool:
        """
        Delete an apartment and its assignments.

        Deleting an apartment that is already gone is not an error.

        Returns:
            True if a row was deleted
        """
        deleted = self.apartment_repo.delete(user_id, apartment_id)
        if deleted:
            logger.info("Deleted apartment %s for user %s", apartment_id, user_id)
        return deleted

    def list_by_month(self, user_id: int, year: int, month: int) -> List[Apartment]:
        """Apartments cleaned in the given month, newest first."""
        if not 1 <= month <= 12:
            raise ValidationException("must be between 1 and 12", field="month")
        try:
            date(year, month, 1)
        except ValueError as e:
            raise ValidationException(str(e), field="year") from e
        return self.apartment_repo.get_by_month(user_id, year, month)

    def list_by_date(self, user_id: int, year: int, month: int, day: int) -> List[Apartment]:
        """Apartments cleaned on the given day, latest start time first."""
        try:
            cleaning_date = date(year, month, day)
        except ValueError as e:
            raise ValidationException(str(e), field="date") from e
        return self.apartment_repo.get_by_date(user_id, cleaning_date)

    def _check_employees(self, user_id: int, employee_ids: List[int]) -> List[int]:
        """De-duplicate employee IDs and make sure they all belong to the user."""
        unique_ids = list(dict.fromkeys(employee_ids))
        owned = self.employee_repo.get_owned_ids(user_id, unique_ids)
        missing = [employee_id for employee_id in unique_ids if employee_id not in owned]
        if missing:
            raise BadRequestException(
                f"Employees not found: {', '.join(str(i) for i in missing)}"
            )
        return unique_ids
