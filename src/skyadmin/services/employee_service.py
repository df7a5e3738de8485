"""
Employee account management.

Handles:
- Login (username / password / locked account checks)
- Account creation with the default password
- Paged listing filtered by name
- Enabling / disabling accounts
- Reading and editing profile fields

Audit columns are never set here: EmployeeRepository's write methods are
tagged with @auto_fill and stamp them from the operation context.
"""
from sqlalchemy.orm import Session
from opentelemetry import trace
import logging

from skyadmin import constants
from skyadmin.api.schemas import EmployeeIn, EmployeeLogin, EmployeeOut, EmployeePageQuery, PageResult
from skyadmin.auth.password import get_password_hash, verify_password
from skyadmin.exceptions import (
    AccountLockedError,
    AccountNotFoundError,
    EmployeeNotFoundError,
    PasswordError,
)
from skyadmin.metrics import employee_created_total, employee_login_total
from skyadmin.models.employee import Employee
from skyadmin.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class EmployeeService:
    """Service for employee accounts."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = EmployeeRepository(db)

    def login(self, login: EmployeeLogin) -> Employee:
        """
        Check credentials and return the employee.

        Raises:
            AccountNotFoundError: No employee with that username
            PasswordError: Password does not match
            AccountLockedError: Account is disabled
        """
        with tracer.start_as_current_span("service.employee_login") as span:
            span.set_attribute("employee.username", login.username)

            employee = self.repository.get_by_username(login.username)

            if employee is None:
                employee_login_total.labels(outcome="not_found").inc()
                logger.info("Login failed: unknown username=%s", login.username)
                raise AccountNotFoundError(constants.ACCOUNT_NOT_FOUND)

            if not verify_password(login.password, employee.password):
                employee_login_total.labels(outcome="bad_password").inc()
                logger.info("Login failed: bad password for username=%s", login.username)
                raise PasswordError(constants.PASSWORD_ERROR)

            if employee.status == constants.STATUS_DISABLE:
                employee_login_total.labels(outcome="locked").inc()
                logger.info("Login refused: locked account username=%s", login.username)
                raise AccountLockedError(constants.ACCOUNT_LOCKED)

        employee_login_total.labels(outcome="success").inc()
        logger.info("Employee logged in id=%s", employee.id)
        return employee

    def save(self, employee_in: EmployeeIn) -> Employee:
        """Create an enabled account with the default password."""
        employee = Employee(
            username=employee_in.username,
            name=employee_in.name,
            phone=employee_in.phone,
            sex=employee_in.sex,
            id_number=employee_in.id_number,
            status=constants.STATUS_ENABLE,
            password=get_password_hash(constants.DEFAULT_PASSWORD),
        )
        employee = self.repository.insert(employee)
        employee_created_total.inc()
        return employee

    def page_query(self, query: EmployeePageQuery) -> PageResult[EmployeeOut]:
        total, records = self.repository.page_query(
            page=query.page,
            page_size=query.page_size,
            name=query.name,
        )
        return PageResult[EmployeeOut](
            total=total,
            records=[EmployeeOut.model_validate(e) for e in records],
        )

    def start_or_stop(self, status: int, employee_id: int) -> Employee:
        """Enable (1) or disable (0) an account."""
        patch = Employee(id=employee_id, status=status)
        employee = self.repository.update(patch)
        if employee is None:
            raise EmployeeNotFoundError(constants.EMPLOYEE_NOT_FOUND)

        logger.info("Employee id=%s status set to %s", employee_id, status)
        return employee

    def get_by_id(self, employee_id: int) -> Employee:
        employee = self.repository.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(constants.EMPLOYEE_NOT_FOUND)

        # Detach before masking so the hash is never overwritten
        self.db.expunge(employee)
        employee.password = constants.MASKED_PASSWORD
        return employee

    def update(self, employee_in: EmployeeIn) -> Employee:
        """Edit profile fields; fields left as None are not touched."""
        if employee_in.id is None:
            raise EmployeeNotFoundError(constants.EMPLOYEE_NOT_FOUND)

        patch = Employee(
            id=employee_in.id,
            username=employee_in.username,
            name=employee_in.name,
            phone=employee_in.phone,
            sex=employee_in.sex,
            id_number=employee_in.id_number,
        )
        employee = self.repository.update(patch)
        if employee is None:
            raise EmployeeNotFoundError(constants.EMPLOYEE_NOT_FOUND)
        return employee
