"""Pydantic schemas for API requests and responses."""

from workout_tracker.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from workout_tracker.schemas.workout import (
    MessageResponse,
    WorkoutCreate,
    WorkoutEnvelope,
    WorkoutListResponse,
    WorkoutResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "WorkoutCreate",
    "WorkoutResponse",
    "WorkoutEnvelope",
    "WorkoutListResponse",
    "MessageResponse",
]
