"""SQLAlchemy models."""

from workout_tracker.models.user import User
from workout_tracker.models.workout import Workout

__all__ = [
    "User",
    "Workout",
]
