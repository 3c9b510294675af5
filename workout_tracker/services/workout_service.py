"""Workout service: per-user reads and writes on the workouts table."""

import logging

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from workout_tracker.errors import InternalError, NotFound, ValidationError
from workout_tracker.models.workout import Workout
from workout_tracker.schemas.workout import WorkoutCreate

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service for workout-related operations.

    Every query is filtered on ``user_id``; that filter is the only thing
    keeping one user's workouts away from another.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_workouts(self, user_id: int) -> list[Workout]:
        """Get all of a user's workouts, newest first.

        Ordering compares ``workout_timestamp`` as a plain string, so it is
        only chronological when clients send a sortable format.
        """
        try:
            return (
                self.db.query(Workout)
                .filter(Workout.user_id == user_id)
                .order_by(Workout.workout_timestamp.desc(), Workout.id.desc())
                .all()
            )
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Get workouts error")
            raise InternalError("Failed to fetch workouts") from None

    def create_workout(self, user_id: int, data: WorkoutCreate) -> Workout:
        """Log a workout for the user."""
        if (
            not data.exercise_id
            or not data.exercise_name
            or not isinstance(data.sets, list)
            or data.workout_timestamp is None
        ):
            raise ValidationError("Invalid workout data")

        workout = Workout(
            user_id=user_id,
            exercise_id=data.exercise_id,
            exercise_name=data.exercise_name,
            sets_data=data.sets,
            workout_timestamp=data.workout_timestamp,
        )
        try:
            self.db.add(workout)
            self.db.commit()
            self.db.refresh(workout)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Add workout error")
            raise InternalError("Failed to add workout") from None

        logger.info(f"User {user_id} logged workout {workout.id} ({workout.exercise_id})")
        return workout

    def delete_workout(self, user_id: int, workout_id: int) -> None:
        """Delete one of the user's workouts.

        A workout owned by someone else is reported exactly like a missing one.
        """
        try:
            result = self.db.execute(
                delete(Workout)
                .where(Workout.id == workout_id, Workout.user_id == user_id)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Delete workout error")
            raise InternalError("Failed to delete workout") from None

        if result.rowcount == 0:
            raise NotFound("Workout not found")

        logger.info(f"User {user_id} deleted workout {workout_id}")
