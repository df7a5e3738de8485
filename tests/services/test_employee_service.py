from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from skyadmin import constants, context
from skyadmin.api.schemas import EmployeeIn, EmployeeLogin, EmployeePageQuery
from skyadmin.auth.password import get_password_hash, verify_password
from skyadmin.exceptions import (
    AccountLockedError,
    AccountNotFoundError,
    EmployeeNotFoundError,
    PasswordError,
)
from skyadmin.models.employee import Employee
from skyadmin.services.employee_service import EmployeeService

T = datetime(2024, 5, 1, 9, 30, 0)
T2 = datetime(2024, 5, 2, 18, 0, 0)


def _new_employee(username="zhangsan", name="Zhang San"):
    return EmployeeIn(
        username=username,
        name=name,
        phone="13800000000",
        sex="1",
        id_number="110101199001011234",
    )


def _service_with_stored(employee):
    service = EmployeeService(MagicMock())
    service.repository = MagicMock()
    service.repository.get_by_username.return_value = employee
    return service


def test_login_success():
    stored = SimpleNamespace(id=1, password=get_password_hash("secret"), status=1)
    service = _service_with_stored(stored)

    assert service.login(EmployeeLogin(username="admin", password="secret")) is stored


def test_login_unknown_username():
    service = _service_with_stored(None)

    with pytest.raises(AccountNotFoundError) as exc:
        service.login(EmployeeLogin(username="ghost", password="x"))

    assert exc.value.message == constants.ACCOUNT_NOT_FOUND


def test_login_wrong_password():
    stored = SimpleNamespace(id=1, password=get_password_hash("secret"), status=1)
    service = _service_with_stored(stored)

    with pytest.raises(PasswordError):
        service.login(EmployeeLogin(username="admin", password="wrong"))


def test_login_locked_account():
    stored = SimpleNamespace(id=1, password=get_password_hash("secret"), status=0)
    service = _service_with_stored(stored)

    with pytest.raises(AccountLockedError):
        service.login(EmployeeLogin(username="admin", password="secret"))


def test_save_creates_enabled_account_with_default_password(db):
    with context.actor_scope(1):
        employee = EmployeeService(db).save(_new_employee())

    assert employee.id is not None
    assert employee.status == constants.STATUS_ENABLE
    assert employee.password != constants.DEFAULT_PASSWORD
    assert verify_password(constants.DEFAULT_PASSWORD, employee.password)
    assert employee.create_user == 1


def test_start_or_stop_toggles_status(db):
    service = EmployeeService(db)
    created = service.save(_new_employee())

    disabled = service.start_or_stop(constants.STATUS_DISABLE, created.id)

    assert disabled.status == constants.STATUS_DISABLE
    assert disabled.name == "Zhang San"


def test_start_or_stop_missing_employee(db):
    with pytest.raises(EmployeeNotFoundError):
        EmployeeService(db).start_or_stop(constants.STATUS_DISABLE, 12345)


def test_get_by_id_masks_password_without_touching_stored_hash(db):
    service = EmployeeService(db)
    created = service.save(_new_employee())
    employee_id = created.id
    db.expunge_all()

    employee = service.get_by_id(employee_id)
    assert employee.password == constants.MASKED_PASSWORD

    db.commit()
    stored = service.repository.get_by_id(employee_id)
    assert verify_password(constants.DEFAULT_PASSWORD, stored.password)


def test_get_by_id_missing(db):
    with pytest.raises(EmployeeNotFoundError):
        EmployeeService(db).get_by_id(404)


def test_update_requires_id(db):
    with pytest.raises(EmployeeNotFoundError):
        EmployeeService(db).update(EmployeeIn(name="No Id"))


def test_page_query_returns_page_result(db):
    service = EmployeeService(db)
    service.save(_new_employee(username="a1", name="Alice"))
    service.save(_new_employee(username="b1", name="Bob"))

    result = service.page_query(EmployeePageQuery(name="Ali", page=1, page_size=10))

    assert result.total == 1
    assert result.records[0].username == "a1"


def test_insert_then_update_end_to_end(db, fixed_clock):
    service = EmployeeService(db)

    with context.actor_scope(7):
        created = service.save(_new_employee())
    employee_id = created.id

    assert (created.create_time, created.create_user) == (T, 7)
    assert (created.update_time, created.update_user) == (T, 7)

    fixed_clock(T2)
    with context.actor_scope(9):
        updated = service.update(EmployeeIn(id=employee_id, phone="13900000000"))

    assert updated.phone == "13900000000"
    assert (updated.update_time, updated.update_user) == (T2, 9)
    assert (updated.create_time, updated.create_user) == (T, 7)
