import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from cleanplan.models.employee import Employee
from cleanplan.repositories.employee_repository import EmployeeRepository
from cleanplan.schemas.employee import EmployeeCreate
from cleanplan.core.exception import ResourceNotFoundException

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service layer for employee operations."""

    def __init__(self, db: Session):
        self.db = db
        self.employee_repo = EmployeeRepository(db)

    def list_employees(self, user_id: int, search: Optional[str] = None) -> List[Employee]:
        return self.employee_repo.get_by_user(user_id, search=search)

    def get_employee(self, user_id: int, employee_id: int) -> Employee:
        employee = self.employee_repo.get(user_id, employee_id)
        if not employee:
            raise ResourceNotFoundException("Employee", employee_id)
        return employee

    def create_employee(self, user_id: int, data: EmployeeCreate) -> Employee:
        employee = self.employee_repo.create_for_user(user_id, data.model_dump())
        logger.info("Created employee %s for user %s", employee.id, user_id)
        return employee

    def delete_employee(self, user_id: int, employee_id: int) -> bool:
        """Delete an employee; their assignments are removed with them."""
        deleted = self.employee_repo.delete(user_id, employee_id)
        if deleted:
            logger.info("Deleted employee %s for user %s", employee_id, user_id)
        return deleted
