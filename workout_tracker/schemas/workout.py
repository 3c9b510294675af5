"""Workout schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkoutCreate(BaseModel):
    """Log a workout.

    `sets` is kept as `Any` so the service decides what counts as invalid data;
    its entries (reps, weight, ...) are stored without structural checks.
    """

    exercise_id: str | None = Field(None, max_length=100)
    exercise_name: str | None = Field(None, max_length=100)
    sets: Any = None
    workout_timestamp: str | None = Field(None, max_length=50)

    @field_validator("exercise_id", "exercise_name", "workout_timestamp", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        """Numbers (e.g. epoch-millisecond timestamps) are stored in their text form."""
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value


class WorkoutResponse(BaseModel):
    """Workout response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    exercise_id: str
    exercise_name: str
    sets_data: list[Any]
    workout_timestamp: str
    created_at: datetime


class WorkoutEnvelope(BaseModel):
    workout: WorkoutResponse


class WorkoutListResponse(BaseModel):
    workouts: list[WorkoutResponse]


class MessageResponse(BaseModel):
    message: str
