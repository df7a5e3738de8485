"""
Authentication helpers for the admin API.

- password.py: bcrypt hashing / verification of employee passwords
- admin_token.py: admin JWT decoding and the ``require_actor`` dependency
"""

from skyadmin.auth.password import get_password_hash, verify_password
from skyadmin.auth.admin_token import decode_actor_id, require_actor

__all__ = [
    "get_password_hash",
    "verify_password",
    "decode_actor_id",
    "require_actor",
]
