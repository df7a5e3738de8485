"""Operation context: the actor responsible for the current request.

Middleware binds the authenticated employee id at request entry and clears it
at request exit. Anything running inside that request (services, repositories,
the audit auto-fill decorator) can read it without it being threaded through
every call.

The value lives in a ContextVar, so it is scoped to the current thread / asyncio
task. Worker threads reused by a threadpool keep their last binding until it is
cleared, which is why ``clear()`` must run in a ``finally`` block.

Usage:
    set_current_actor(7)
    actor_id = get_current_actor()   # 7
    clear()
    get_current_actor()              # None
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_current_actor_id: ContextVar[int | None] = ContextVar(
    "current_actor_id", default=None
)


def set_current_actor(actor_id: int | None) -> None:
    """Bind the actor id to the current execution context."""
    _current_actor_id.set(actor_id)


def get_current_actor() -> int | None:
    """Return the bound actor id, or None when nothing is bound."""
    return _current_actor_id.get()


def clear() -> None:
    """Unbind the actor for the current execution context."""
    _current_actor_id.set(None)


@contextmanager
def actor_scope(actor_id: int | None) -> Iterator[int | None]:
    """Bind ``actor_id`` for the duration of a ``with`` block.

    The previous binding is restored on exit, so scopes nest.
    """
    token = _current_actor_id.set(actor_id)
    try:
        yield actor_id
    finally:
        _current_actor_id.reset(token)
