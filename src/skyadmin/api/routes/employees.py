# src/skyadmin/api/routes/employees.py

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from skyadmin.api.schemas import (
    EmployeeIn,
    EmployeeLogin,
    EmployeeLoginOut,
    EmployeeOut,
    EmployeePageQuery,
    PageResult,
    Result,
)
from skyadmin.auth.admin_token import require_actor
from skyadmin.db.database import get_db
from skyadmin.services.employee_service import EmployeeService

import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin/employee",
    tags=["Employees"],
)


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)


# ----------------------------------------
# POST /admin/employee/login
# ----------------------------------------
@router.post("/login", response_model=Result[EmployeeLoginOut])
def login(
    payload: EmployeeLogin,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = service.login(payload)
    return Result.success(
        EmployeeLoginOut(id=employee.id, user_name=employee.username, name=employee.name)
    )


# ----------------------------------------
# POST /admin/employee/logout
# ----------------------------------------
@router.post("/logout", response_model=Result[None])
def logout():
    return Result.success()


# ----------------------------------------
# POST /admin/employee
# ----------------------------------------
@router.post("", response_model=Result[EmployeeOut])
def save(
    payload: EmployeeIn,
    actor_id: int = Depends(require_actor),
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("Create employee username=%s by actor=%s", payload.username, actor_id)
    employee = service.save(payload)
    return Result.success(EmployeeOut.model_validate(employee))


# ----------------------------------------
# GET /admin/employee/page
# ----------------------------------------
@router.get("/page", response_model=Result[PageResult[EmployeeOut]])
def page(
    name: str | None = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=500, alias="pageSize"),
    actor_id: int = Depends(require_actor),
    service: EmployeeService = Depends(get_employee_service),
):
    query = EmployeePageQuery(name=name, page=page, page_size=page_size)
    return Result.success(service.page_query(query))


# ----------------------------------------
# POST /admin/employee/status/{status}?id=
# ----------------------------------------
@router.post("/status/{status}", response_model=Result[None])
def start_or_stop(
    status: int = Path(..., ge=0, le=1),
    id: int = Query(...),
    actor_id: int = Depends(require_actor),
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("Set status=%s on employee id=%s by actor=%s", status, id, actor_id)
    service.start_or_stop(status, id)
    return Result.success()


# ----------------------------------------
# GET /admin/employee/{employee_id}
# ----------------------------------------
@router.get("/{employee_id}", response_model=Result[EmployeeOut])
def get_by_id(
    employee_id: int,
    actor_id: int = Depends(require_actor),
    service: EmployeeService = Depends(get_employee_service),
):
    return Result.success(EmployeeOut.model_validate(service.get_by_id(employee_id)))


# ----------------------------------------
# PUT /admin/employee
# ----------------------------------------
@router.put("", response_model=Result[None])
def update(
    payload: EmployeeIn,
    actor_id: int = Depends(require_actor),
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("Update employee id=%s by actor=%s", payload.id, actor_id)
    service.update(payload)
    return Result.success()
