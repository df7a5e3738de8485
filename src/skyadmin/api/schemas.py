# src/skyadmin/api/schemas.py

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input, serializes as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --------------------------
# Response envelope
# --------------------------
class Result(BaseModel, Generic[T]):
    """
    Envelope returned by every admin endpoint.
    code: 1 = success, 0 = failure (msg says why)
    """
    code: int
    msg: str | None = None
    data: T | None = None

    @classmethod
    def success(cls, data=None) -> "Result":
        return cls(code=1, data=data)

    @classmethod
    def error(cls, msg: str) -> "Result":
        return cls(code=0, msg=msg)


class PageResult(CamelModel, Generic[T]):
    total: int
    records: list[T]


# --------------------------
# Employee DTOs
# --------------------------
class EmployeeLogin(CamelModel):
    username: str
    password: str


class EmployeeIn(CamelModel):
    id: int | None = None
    username: str | None = None
    name: str | None = None
    phone: str | None = None
    sex: str | None = None
    id_number: str | None = None


class EmployeePageQuery(CamelModel):
    name: str | None = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=500)


class EmployeeOut(CamelModel):
    id: int
    username: str
    name: str
    phone: str | None = None
    sex: str | None = None
    id_number: str | None = None
    status: int
    create_time: datetime | None = None
    update_time: datetime | None = None
    create_user: int | None = None
    update_user: int | None = None


class EmployeeLoginOut(CamelModel):
    id: int
    user_name: str
    name: str
