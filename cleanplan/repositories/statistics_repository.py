from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session
from typing import List
from cleanplan.models.apartment import Apartment
from cleanplan.models.associations import assignments
from cleanplan.models.employee import Employee


class StatisticsRepository:
    """Aggregate queries over one user's apartments and assignments."""

    def __init__(self, db: Session):
        self.db = db

    def count_apartments(self, user_id: int) -> int:
        stmt = select(func.count()).select_from(Apartment).where(Apartment.user_id == user_id)
        return self.db.execute(stmt).scalar_one()

    def top_employees(self, user_id: int, limit: int = 3) -> List[dict]:
        """
        Employees with the most assigned apartments.

        Ties are ordered by last name, first name, then ID.
        """
        apartment_count = func.count(assignments.c.apartment_id).label("apartment_count")
        stmt = (
            select(
                Employee.id,
                Employee.first_name,
                Employee.last_name,
                apartment_count
            )
            .join(assignments, assignments.c.employee_id == Employee.id)
            .where(Employee.user_id == user_id)
            .group_by(Employee.id, Employee.first_name, Employee.last_name)
            .order_by(
                desc(apartment_count),
                Employee.last_name,
                Employee.first_name,
                Employee.id
            )
            .limit(limit)
        )

        results = self.db.execute(stmt).all()
        return [
            {
                "employee_id": r.id,
                "first_name": r.first_name,
                "last_name": r.last_name,
                "count": int(r.apartment_count)
            }
            for r in results
        ]

    def busiest_days(self, user_id: int, limit: int = 3) -> List[dict]:
        """
        Cleaning dates with the most apartments.

        Ties are ordered earliest date first.
        """
        apartment_count = func.count().label("apartment_count")
        stmt = (
            select(Apartment.cleaning_date, apartment_count)
            .where(Apartment.user_id == user_id)
            .group_by(Apartment.cleaning_date)
            .order_by(desc(apartment_count), Apartment.cleaning_date)
            .limit(limit)
        )

        results = self.db.execute(stmt).all()
        return [
            {"date": r.cleaning_date, "count": int(r.apartment_count)}
            for r in results
        ]
