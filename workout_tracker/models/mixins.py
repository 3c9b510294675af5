"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, func


class CreatedAtMixin:
    """Mixin to add a server-stamped created_at column.

    Users and workouts are never updated in place, so there is no updated_at.
    """

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
