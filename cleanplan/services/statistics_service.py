from datetime import date
from sqlalchemy.orm import Session
from cleanplan.repositories.statistics_repository import StatisticsRepository
from cleanplan.schemas.statistics import DayStat, EmployeeStat, Statistics


class StatisticsService:
    """Service layer for the per-user dashboard figures."""

    def __init__(self, db: Session):
        self.db = db
        self.statistics_repo = StatisticsRepository(db)

    def get_statistics(self, user_id: int) -> Statistics:
        """
        Totals and rankings for one user.

        Returns:
            Apartment count, top 3 employees by assignments
            and top 3 days by number of cleanings
        """
        top_employees = [
            EmployeeStat(
                name=f"{r['first_name'] or ''} {r['last_name'] or ''}".strip(),
                count=r["count"]
            )
            for r in self.statistics_repo.top_employees(user_id)
        ]
        busiest_days = [
            DayStat(date=date.fromisoformat(r["date"]), count=r["count"])
            for r in self.statistics_repo.busiest_days(user_id)
        ]

        return Statistics(
            total_orders=self.statistics_repo.count_apartments(user_id),
            top_employees=top_employees,
            busiest_days=busiest_days
        )
