"""
Actor context middleware.

Binds the employee id carried by the admin token to skyadmin.context before
the route runs, and clears it when the request finishes, whether it
succeeded or not.
"""

from __future__ import annotations

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from skyadmin import context
from skyadmin.auth.admin_token import decode_actor_id

logger = logging.getLogger(__name__)

# Header used by the admin console; a standard bearer token also works
ADMIN_TOKEN_HEADER = "token"


def _token_from_request(request: Request) -> str | None:
    auth = request.headers.get("Authorization")
    if auth and auth.startswith("Bearer "):
        return auth[7:].strip()
    return request.headers.get(ADMIN_TOKEN_HEADER)


def actor_id_from_request(request: Request) -> int | None:
    """Return the actor id from the request's admin token, if valid."""
    token = _token_from_request(request)
    if not token:
        return None
    return decode_actor_id(token)


class ActorContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        actor_id = actor_id_from_request(request)
        context.set_current_actor(actor_id)
        if actor_id is not None:
            logger.debug("Bound actor=%s for %s %s", actor_id, request.method, request.url.path)
        try:
            return await call_next(request)
        finally:
            context.clear()
