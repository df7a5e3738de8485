"""
Automatic audit-field filling for persistence operations.

Repository methods that write an entity are tagged with ``@auto_fill``:

    class EmployeeRepository:
        @auto_fill(OperationType.INSERT)
        def insert(self, employee: Employee) -> Employee:
            ...

Right before the tagged method body runs, the first parameter after ``self``
(passed positionally or by keyword) is stamped in place:

- INSERT: create_time, create_user, update_time, update_user
- UPDATE: update_time, update_user

The timestamp is captured once per call, so create_time == update_time on an
insert. The actor comes from ``skyadmin.context`` and may be None.

Any entity type works as long as it exposes the attributes named in
``skyadmin.constants`` (see ``Auditable``; ORM models get them from
``AuditMixin``).

Failure policy is controlled by AUTO_FILL_STRICT (default "true"):
strict raises AuditFillError and the write never runs; otherwise the failure
is logged and the write proceeds without audit stamps.
"""

from __future__ import annotations

import functools
import inspect
import logging
import os
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from skyadmin import constants
from skyadmin.context import get_current_actor
from skyadmin.exceptions import AuditFillError
from skyadmin.metrics import audit_fill_failures_total, audit_fill_total

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_UNSET: Any = object()


class OperationType(str, Enum):
    INSERT = "insert"
    UPDATE = "update"


@runtime_checkable
class Auditable(Protocol):
    """Capability shared by every entity whose writes are audited."""

    create_time: datetime | None
    create_user: int | None
    update_time: datetime | None
    update_user: int | None


# (attribute, is_timestamp) in the order they are set
_FIELDS: dict[OperationType, tuple[tuple[str, bool], ...]] = {
    OperationType.INSERT: (
        (constants.CREATE_TIME, True),
        (constants.CREATE_USER, False),
        (constants.UPDATE_TIME, True),
        (constants.UPDATE_USER, False),
    ),
    OperationType.UPDATE: (
        (constants.UPDATE_TIME, True),
        (constants.UPDATE_USER, False),
    ),
}


def _now() -> datetime:
    return datetime.now()


def _is_strict() -> bool:
    return os.getenv("AUTO_FILL_STRICT", "true").strip().lower() not in ("0", "false", "no")


def fill_audit_fields(
    entity: Auditable,
    operation_type: OperationType,
    *,
    now: datetime | None = None,
    actor_id: int | None = _UNSET,
) -> bool:
    """
    Stamp the audit attributes required by ``operation_type`` onto ``entity``.

    Args:
        entity: Object to mutate in place.
        operation_type: INSERT or UPDATE.
        now: Timestamp to use; captured once from the clock when omitted.
        actor_id: Actor to record; read from the operation context when omitted.

    Returns:
        True when every attribute was set, False when a failure was logged
        and swallowed (non-strict mode).

    Raises:
        AuditFillError: In strict mode, when the entity lacks an attribute or
            setting it fails.
    """
    fields = _FIELDS.get(operation_type)
    if fields is None:
        return False

    if now is None:
        now = _now()
    if actor_id is _UNSET:
        actor_id = get_current_actor()

    entity_type = type(entity).__name__
    field = None
    try:
        for field, is_timestamp in fields:
            if not hasattr(entity, field):
                raise AuditFillError(
                    entity_type, field, "entity does not expose this attribute"
                )
            setattr(entity, field, now if is_timestamp else actor_id)
    except Exception as exc:
        audit_fill_failures_total.labels(
            operation=operation_type.value, entity=entity_type
        ).inc()
        error = exc if isinstance(exc, AuditFillError) else AuditFillError(
            entity_type, field, f"{type(exc).__name__}: {exc}"
        )
        if _is_strict():
            logger.error("Audit fill failed: %s", error.message)
            if error is exc:
                raise
            raise error from exc
        logger.exception("Audit fill failed, continuing without audit stamps: %s", error.message)
        return False

    audit_fill_total.labels(operation=operation_type.value).inc()
    logger.debug(
        "Filled audit fields op=%s entity=%s actor=%s",
        operation_type.value,
        entity_type,
        actor_id,
    )
    return True


def auto_fill(operation_type: OperationType) -> Callable[[F], F]:
    """Tag a persistence operation so its entity argument gets audit stamps."""

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        params = list(signature.parameters)
        # Skip the receiver when decorating a method
        offset = 1 if params and params[0] in ("self", "cls") else 0
        entity_param = params[offset] if len(params) > offset else None

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            entity = None
            if entity_param is not None:
                # Positional or keyword, under whatever name the operation uses
                entity = signature.bind_partial(*args, **kwargs).arguments.get(entity_param)

            if entity is None:
                logger.debug("auto_fill: %s called without an entity", func.__qualname__)
            else:
                fill_audit_fields(entity, operation_type)

            return func(*args, **kwargs)

        wrapper.__auto_fill__ = operation_type
        return wrapper  # type: ignore[return-value]

    return decorator
