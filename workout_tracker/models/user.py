"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from workout_tracker.database import Base
from workout_tracker.models.mixins import CreatedAtMixin


class User(Base, CreatedAtMixin):
    """User model for authentication and workout ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    workouts = relationship(
        "Workout",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
