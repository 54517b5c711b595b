import pytest
from sqlalchemy.orm import Session
from cleanplan.repositories.apartment_repository import ApartmentRepository
from cleanplan.repositories.employee_repository import EmployeeRepository


@pytest.mark.unit
class TestEmployeeRepository:
    """Unit tests for EmployeeRepository."""

    def test_create_for_user(self, db_session: Session, test_user):
        repo = EmployeeRepository(db_session)

        employee = repo.create_for_user(test_user.id, {"first_name": "Giulia", "last_name": "Neri"})

        assert employee.id is not None
        assert employee.user_id == test_user.id
        assert employee.full_name == "Giulia Neri"

    def test_get_by_user_order(self, db_session: Session, test_user, make_employee):
        """Last name descending, then first name descending."""
        repo = EmployeeRepository(db_session)
        make_employee(test_user, "Anna", "Rossi")
        make_employee(test_user, "Marco", "Rossi")
        make_employee(test_user, "Paolo", "Bianchi")

        names = [e.full_name for e in repo.get_by_user(test_user.id)]

        assert names == ["Marco Rossi", "Anna Rossi", "Paolo Bianchi"]

    def test_get_by_user_search(self, db_session: Session, test_user, other_user, make_employee):
        repo = EmployeeRepository(db_session)
        make_employee(test_user, "Anna", "Rossi")
        make_employee(test_user, "Rosa", "Verdi")
        make_employee(test_user, "Paolo", "Bianchi")
        make_employee(other_user, "Rossella", "Gialli")

        names = [e.full_name for e in repo.get_by_user(test_user.id, search="Ros")]

        assert names == ["Rosa Verdi", "Anna Rossi"]

    def test_employees_carry_apartments(self, db_session: Session, test_user, employees, apartment_data):
        repo = EmployeeRepository(db_session)
        apartment_repo = ApartmentRepository(db_session)
        e1 = employees[0]
        apartment = apartment_repo.create_with_employees(
            test_user.id, apartment_data().to_row(), [e1.id]
        )

        fetched = repo.get(test_user.id, e1.id)

        assert [a.id for a in fetched.apartments] == [apartment.id]

    def test_delete_cascades_assignments(self, db_session: Session, test_user, employees, apartment_data):
        """Deleting an employee removes them from their apartments."""
        repo = EmployeeRepository(db_session)
        apartment_repo = ApartmentRepository(db_session)
        e1, e2, _ = employees
        apartment = apartment_repo.create_with_employees(
            test_user.id, apartment_data().to_row(), [e1.id, e2.id]
        )

        assert repo.delete(test_user.id, e1.id) is True

        fetched = apartment_repo.get(test_user.id, apartment.id)
        assert [e.id for e in fetched.employees] == [e2.id]

    def test_delete_other_users_employee(self, db_session: Session, test_user, other_user, employees):
        repo = EmployeeRepository(db_session)

        assert repo.delete(other_user.id, employees[0].id) is False
        assert repo.get(test_user.id, employees[0].id) is not None
        assert repo.get(other_user.id, employees[0].id) is None

    def test_get_owned_ids(self, db_session: Session, test_user, other_user, employees, make_employee):
        repo = EmployeeRepository(db_session)
        foreign = make_employee(other_user, "Luigi", "Gialli")

        owned = repo.get_owned_ids(test_user.id, [employees[0].id, foreign.id, 9999])

        assert owned == {employees[0].id}
        assert repo.get_owned_ids(test_user.id, []) == set()
