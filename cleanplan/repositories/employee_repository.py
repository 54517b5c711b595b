from sqlalchemy import or_, select
from sqlalchemy.orm import Session
from typing import Iterable, List, Optional, Set
from cleanplan.models.employee import Employee
from cleanplan.repositories.repository import OwnedRepository


class EmployeeRepository(OwnedRepository[Employee]):
    """Repository for employee operations."""

    def __init__(self, db: Session):
        super().__init__(Employee, db)

    def get_by_user(self, user_id: int, search: Optional[str] = None) -> List[Employee]:
        """Get all employees of a user with their apartments, by last then first name descending."""
        stmt = self.owned(user_id)

        if search:
            stmt = stmt.where(
                or_(
                    Employee.first_name.contains(search, autoescape=True),
                    Employee.last_name.contains(search, autoescape=True)
                )
            )

        stmt = stmt.order_by(Employee.last_name.desc(), Employee.first_name.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get_owned_ids(self, user_id: int, employee_ids: Iterable[int]) -> Set[int]:
        """Return the subset of the given IDs that belong to the user."""
        ids = list(employee_ids)
        if not ids:
            return set()

        stmt = select(Employee.id).where(
            Employee.user_id == user_id,
            Employee.id.in_(ids)
        )
        return set(self.db.execute(stmt).scalars().all())
