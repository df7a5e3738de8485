from sqlalchemy import Column, Integer, String
from skyadmin.db.database import Base
from skyadmin.models.base_model import bigint_pk, short_string
from skyadmin.models.mixins import AuditMixin
from skyadmin.constants import STATUS_ENABLE


class Employee(Base, AuditMixin):
    """
    Back-office account of a restaurant employee.

    status: 1 = enabled, 0 = disabled (locked out of login)
    """
    __tablename__ = "employee"

    id = bigint_pk()
    name = short_string(32, nullable=False)
    username = Column(String(32), unique=True, nullable=False)
    password = Column(String(128), nullable=False)
    phone = short_string(11)
    sex = short_string(2)
    id_number = short_string(18)
    status = Column(Integer, nullable=False, default=STATUS_ENABLE)

    def __repr__(self) -> str:
        return f"<Employee id={self.id} username={self.username!r} status={self.status}>"
