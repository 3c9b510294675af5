"""Workout model."""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from workout_tracker.database import Base
from workout_tracker.models.mixins import CreatedAtMixin


class Workout(Base, CreatedAtMixin):
    """One logged exercise with its sets, owned by a single user."""

    __tablename__ = "workouts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id = Column(String(100), nullable=False)
    exercise_name = Column(String(100), nullable=False)
    sets_data = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    # Client-local time string, stored and ordered exactly as received
    workout_timestamp = Column(String(50), nullable=False)

    # Relationships
    user = relationship("User", back_populates="workouts")
