"""Shared constants: account status, default password, user-facing messages."""

import os

# Employee.status values
STATUS_ENABLE = 1
STATUS_DISABLE = 0

# Password assigned to newly created employees
DEFAULT_PASSWORD = os.getenv("DEFAULT_EMPLOYEE_PASSWORD", "123456")

# Value returned instead of the stored hash when an employee is read back
MASKED_PASSWORD = "****"

# Attribute names of the audit fields stamped by skyadmin.auto_fill
CREATE_TIME = "create_time"
CREATE_USER = "create_user"
UPDATE_TIME = "update_time"
UPDATE_USER = "update_user"

# Messages
ACCOUNT_NOT_FOUND = "Account does not exist"
PASSWORD_ERROR = "Incorrect password"
ACCOUNT_LOCKED = "Account is locked"
EMPLOYEE_NOT_FOUND = "Employee not found"
USER_NOT_LOGIN = "User not logged in"
UNKNOWN_ERROR = "Unknown error"
