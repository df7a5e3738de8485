# src/skyadmin/repositories/__init__.py
from .employee_repository import EmployeeRepository

__all__ = [
    "EmployeeRepository",
]
