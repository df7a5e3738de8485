# src/skyadmin/repositories/employee_repository.py

from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from opentelemetry import trace

from skyadmin import constants
from skyadmin.auto_fill import OperationType, auto_fill
from skyadmin.exceptions import UsernameAlreadyExistsError
from skyadmin.models.employee import Employee

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class EmployeeRepository:
    """
    Raw persistence of Employee.

    insert/update are tagged with @auto_fill, so the entity passed in has its
    audit columns stamped before anything is written.
    """

    def __init__(self, db: Session):
        self.db = db

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    @staticmethod
    def _patchable_columns() -> list[str]:
        return [attr.key for attr in inspect(Employee).column_attrs if attr.key != "id"]

    def _commit(self, employee: Employee, action: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            logger.warning(
                "Integrity error on %s of Employee username=%s",
                action,
                employee.username,
            )
            self.db.rollback()
            raise UsernameAlreadyExistsError(employee.username)
        except Exception:
            logger.exception("DB %s failed for Employee id=%s", action, employee.id)
            self.db.rollback()
            raise

    # -------------------------------------------------------------------------
    # CREATE
    # -------------------------------------------------------------------------
    @auto_fill(OperationType.INSERT)
    def insert(self, employee: Employee) -> Employee:
        with tracer.start_as_current_span("db.insert_employee") as span:
            span.set_attribute("employee.username", employee.username or "")

            self.db.add(employee)
            self._commit(employee, "insert")
            self.db.refresh(employee)

        logger.info(
            "Created Employee: id=%s username=%s create_user=%s",
            employee.id,
            employee.username,
            employee.create_user,
        )
        return employee

    # -------------------------------------------------------------------------
    # UPDATE (partial)
    # -------------------------------------------------------------------------
    @auto_fill(OperationType.UPDATE)
    def update(self, employee: Employee) -> Employee | None:
        """
        Partial update keyed on ``employee.id``.

        Only attributes that are not None on ``employee`` are written, so a
        patch carrying just id + status touches nothing else. update_user is
        always written.
        Returns the stored row, or None when no row has that id.
        """
        with tracer.start_as_current_span("db.update_employee") as span:
            span.set_attribute("employee.id", str(employee.id))

            stored = self.db.get(Employee, employee.id)
            if stored is None:
                logger.warning("Attempted update of missing Employee id=%s", employee.id)
                return None

            if stored is not employee:
                for key in self._patchable_columns():
                    value = getattr(employee, key)
                    # An absent actor is recorded as null, not skipped
                    if value is not None or key == constants.UPDATE_USER:
                        setattr(stored, key, value)

            self._commit(employee, "update")
            self.db.refresh(stored)

        logger.info(
            "Updated Employee id=%s update_user=%s",
            stored.id,
            stored.update_user,
        )
        return stored

    # -------------------------------------------------------------------------
    # READ HELPERS
    # -------------------------------------------------------------------------
    def get_by_username(self, username: str) -> Employee | None:
        with tracer.start_as_current_span("db.get_employee_by_username"):
            return (
                self.db.query(Employee)
                .filter(Employee.username == username)
                .first()
            )

    def get_by_id(self, employee_id: int) -> Employee | None:
        with tracer.start_as_current_span("db.get_employee_by_id") as span:
            span.set_attribute("employee.id", str(employee_id))
            return self.db.get(Employee, employee_id)

    def page_query(
        self,
        *,
        page: int,
        page_size: int,
        name: str | None = None,
    ) -> tuple[int, list[Employee]]:
        """Return (total, records) for one page, newest first."""
        with tracer.start_as_current_span("db.page_query_employees") as span:
            span.set_attribute("page", page)
            span.set_attribute("page_size", page_size)

            query = self.db.query(Employee)
            if name:
                query = query.filter(Employee.name.like(f"%{name}%"))

            total = query.count()
            records = (
                query.order_by(Employee.create_time.desc(), Employee.id.desc())
                .offset((page - 1) * page_size)
                .limit(page_size)
                .all()
            )

        logger.debug(
            "Paged Employees page=%d size=%d name=%s -> %d of %d",
            page,
            page_size,
            name,
            len(records),
            total,
        )
        return total, records
