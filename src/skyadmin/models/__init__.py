from skyadmin.db.database import Base

# Import all models so metadata can discover them
from .employee import Employee

__all__ = ["Base", "Employee"]
