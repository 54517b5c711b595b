import pytest
from datetime import date
from sqlalchemy.orm import Session
from cleanplan.schemas.statistics import DayStat, EmployeeStat
from cleanplan.services.apartment_service import ApartmentService
from cleanplan.services.statistics_service import StatisticsService


@pytest.mark.unit
class TestStatisticsService:
    """Unit tests for StatisticsService."""

    def test_empty_user(self, db_session: Session, test_user):
        stats = StatisticsService(db_session).get_statistics(test_user.id)

        assert stats.total_orders == 0
        assert stats.top_employees == []
        assert stats.busiest_days == []

    def test_counts_and_rankings(self, db_session: Session, test_user, make_employee, apartment_data):
        """Five apartments, three for E1 and two for E2."""
        apartment_service = ApartmentService(db_session)
        e1 = make_employee(test_user, "Mario", "Rossi")
        e2 = make_employee(test_user, "Anna", "Bianchi")
        plan = [
            (date(2024, 3, 1), [e1.id]),
            (date(2024, 3, 1), [e1.id]),
            (date(2024, 3, 2), [e1.id]),
            (date(2024, 3, 2), [e2.id]),
            (date(2024, 3, 3), [e2.id]),
        ]
        for day, employee_ids in plan:
            apartment_service.create_apartment(
                test_user.id, apartment_data(cleaning_date=day, employee_ids=employee_ids)
            )

        stats = StatisticsService(db_session).get_statistics(test_user.id)

        assert stats.total_orders == 5
        assert stats.top_employees == [
            EmployeeStat(name="Mario Rossi", count=3),
            EmployeeStat(name="Anna Bianchi", count=2),
        ]
        # Equal counts: earliest day first
        assert stats.busiest_days == [
            DayStat(date=date(2024, 3, 1), count=2),
            DayStat(date=date(2024, 3, 2), count=2),
            DayStat(date=date(2024, 3, 3), count=1),
        ]

    def test_employee_ties_and_limit(self, db_session: Session, test_user, make_employee, apartment_data):
        """Only three employees, equal counts ordered by last then first name."""
        apartment_service = ApartmentService(db_session)
        staff = [
            make_employee(test_user, "Zeno", "Verdi"),
            make_employee(test_user, "Bruno", "Bianchi"),
            make_employee(test_user, "Alba", "Bianchi"),
            make_employee(test_user, "Carla", "Rossi"),
        ]
        apartment_service.create_apartment(
            test_user.id, apartment_data(employee_ids=[e.id for e in staff])
        )

        stats = StatisticsService(db_session).get_statistics(test_user.id)

        assert [s.name for s in stats.top_employees] == ["Alba Bianchi", "Bruno Bianchi", "Carla Rossi"]
        assert all(s.count == 1 for s in stats.top_employees)

    def test_other_users_data_excluded(self, db_session: Session, test_user, other_user, make_employee, apartment_data):
        apartment_service = ApartmentService(db_session)
        foreign = make_employee(other_user, "Luigi", "Gialli")
        apartment_service.create_apartment(
            other_user.id, apartment_data(employee_ids=[foreign.id])
        )

        stats = StatisticsService(db_session).get_statistics(test_user.id)

        assert stats.total_orders == 0
        assert stats.top_employees == []
        assert stats.busiest_days == []
