"""Workout API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from workout_tracker.api.dependencies import get_current_user_id, get_workout_service
from workout_tracker.schemas.workout import (
    MessageResponse,
    WorkoutCreate,
    WorkoutEnvelope,
    WorkoutListResponse,
    WorkoutResponse,
)
from workout_tracker.services.workout_service import WorkoutService

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.get("", response_model=WorkoutListResponse)
def get_workouts(
    user_id: Annotated[int, Depends(get_current_user_id)],
    workout_service: Annotated[WorkoutService, Depends(get_workout_service)],
):
    """Get all workouts of the current user, latest timestamp first."""
    workouts = workout_service.list_workouts(user_id)
    return WorkoutListResponse(
        workouts=[WorkoutResponse.model_validate(w) for w in workouts],
    )


@router.post("", response_model=WorkoutEnvelope)
def create_workout(
    workout_data: WorkoutCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    workout_service: Annotated[WorkoutService, Depends(get_workout_service)],
):
    """Log a new workout."""
    workout = workout_service.create_workout(user_id, workout_data)
    return WorkoutEnvelope(workout=WorkoutResponse.model_validate(workout))


@router.delete("/{workout_id}", response_model=MessageResponse)
def delete_workout(
    workout_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    workout_service: Annotated[WorkoutService, Depends(get_workout_service)],
):
    """Delete one of the current user's workouts."""
    workout_service.delete_workout(user_id, workout_id)
    return MessageResponse(message="Workout deleted")
