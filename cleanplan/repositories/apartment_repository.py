from calendar import monthrange
from datetime import date
from sqlalchemy import delete, insert, or_, update
from sqlalchemy.orm import Session
from typing import Any, Dict, Iterable, List, Optional
from cleanplan.database import transaction
from cleanplan.models.apartment import Apartment
from cleanplan.models.associations import assignments
from cleanplan.repositories.repository import OwnedRepository


class ApartmentRepository(OwnedRepository[Apartment]):
    """Repository for apartment operations."""

    def __init__(self, db: Session):
        super().__init__(Apartment, db)

    def get_by_user(
        self,
        user_id: int,
        sort_by: Optional[str] = None,
        search: Optional[str] = None
    ) -> List[Apartment]:
        """
        Get all apartments of a user with their employees.

        Args:
            user_id: Owner ID
            sort_by: "name" for name descending, anything else for newest cleaning date first
            search: Optional substring matched against name or notes
        """
        stmt = self.owned(user_id)

        if search:
            stmt = stmt.where(
                or_(
                    Apartment.name.contains(search, autoescape=True),
                    Apartment.notes.contains(search, autoescape=True)
                )
            )

        if sort_by == "name":
            stmt = stmt.order_by(Apartment.name.desc())
        else:
            stmt = stmt.order_by(Apartment.cleaning_date.desc())

        return list(self.db.execute(stmt).scalars().all())

    def get_by_month(self, user_id: int, year: int, month: int) -> List[Apartment]:
        """
        Get apartments cleaned within a calendar month.

        Args:
            user_id: Owner ID
            year: Year
            month: Month (1-12)
        """
        first_day = date(year, month, 1)
        last_day = date(year, month, monthrange(year, month)[1])

        stmt = (
            self.owned(user_id)
            .where(
                Apartment.cleaning_date >= first_day.isoformat(),
                Apartment.cleaning_date <= last_day.isoformat()
            )
            .order_by(Apartment.cleaning_date.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_by_date(self, user_id: int, day: date) -> List[Apartment]:
        """Get apartments cleaned on one day, latest start time first."""
        stmt = (
            self.owned(user_id)
            .where(Apartment.cleaning_date == day.isoformat())
            .order_by(Apartment.start_time.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_with_employees(
        self,
        user_id: int,
        data: Dict[str, Any],
        employee_ids: Iterable[int]
    ) -> Apartment:
        """
        Create an apartment and its assignments in one transaction.

        If any assignment fails (unknown employee, duplicate pair),
        the apartment is not created either.
        """
        apartment = Apartment(**data, user_id=user_id)
        with transaction(self.db):
            self.db.add(apartment)
            self.db.flush()
            self._insert_assignments(apartment.id, employee_ids)

        self.db.refresh(apartment)
        return apartment

    def update_with_employees(
        self,
        user_id: int,
        apartment_id: int,
        data: Dict[str, Any],
        employee_ids: Iterable[int]
    ) -> Optional[Apartment]:
        """
        Update an apartment and replace its whole assignment set in one transaction.

        Returns:
            Updated apartment, or None if the user owns no apartment with this ID
        """
        with transaction(self.db):
            stmt = (
                update(Apartment)
                .where(Apartment.id == apartment_id, Apartment.user_id == user_id)
                .values(**data)
                .returning(Apartment.id)
            )
            updated_id = self.db.execute(stmt).scalar_one_or_none()
            if updated_id is None:
                return None

            self.db.execute(
                delete(assignments).where(assignments.c.apartment_id == updated_id)
            )
            self._insert_assignments(updated_id, employee_ids)

        return self.get(user_id, updated_id)

    def _insert_assignments(self, apartment_id: int, employee_ids: Iterable[int]) -> None:
        rows = [
            {"apartment_id": apartment_id, "employee_id": employee_id}
            for employee_id in employee_ids
        ]
        if rows:
            self.db.execute(insert(assignments), rows)
