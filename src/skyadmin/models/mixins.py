"""
Mixins for SQLAlchemy models.
Provides the audit column set stamped by skyadmin.auto_fill.
"""
from sqlalchemy import Column, DateTime

from skyadmin.models.base_model import actor_id


class AuditMixin:
    """
    Adds audit columns to any model.

    Provides:
    - create_time: when the record was inserted
    - create_user: employee id of the creator
    - update_time: when the record was last written
    - update_user: employee id of the last writer

    Values are not defaulted by the database: repository methods tagged with
    @auto_fill set them from the clock and the current operation context.

    Usage:
        class MyModel(Base, AuditMixin):
            __tablename__ = "my_table"
            id = bigint_pk()
            # create_time, update_user, etc. are inherited automatically
    """

    create_time = Column(
        DateTime,
        comment="Local time when record was created"
    )

    create_user = actor_id()

    update_time = Column(
        DateTime,
        comment="Local time when record was last updated"
    )

    update_user = actor_id()
