"""
Admin token decoding.

Tokens are minted by the identity service that fronts the admin console and
signed with the shared JWT_ADMIN_SECRET. The ``empId`` claim carries the
employee id of the caller.
"""
import os
import logging

from fastapi import HTTPException, status
from jose import JWTError, jwt

from skyadmin import constants
from skyadmin.context import get_current_actor

logger = logging.getLogger(__name__)

EMP_ID_CLAIM = "empId"


def decode_actor_id(token: str) -> int | None:
    """
    Verify an admin JWT and return the employee id it carries.

    Returns None for an invalid token or one without a usable ``empId`` claim.
    """
    try:
        payload = jwt.decode(
            token,
            key=os.getenv("JWT_ADMIN_SECRET", "sky-admin-dev-secret"),
            algorithms=[os.getenv("JWT_ALGORITHM", "HS256")],
        )
    except JWTError as e:
        logger.info("Rejected admin token: %s", e)
        return None

    emp_id = payload.get(EMP_ID_CLAIM)
    try:
        return int(emp_id) if emp_id is not None else None
    except (TypeError, ValueError):
        logger.warning("Admin token has non-numeric %s claim: %r", EMP_ID_CLAIM, emp_id)
        return None


def require_actor() -> int:
    """FastAPI dependency: the actor bound for this request, or 401."""
    actor_id = get_current_actor()
    if actor_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=constants.USER_NOT_LOGIN,
        )
    return actor_id
