"""FastAPI dependencies for settings, authentication and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from workout_tracker.config import Settings
from workout_tracker.database import get_db
from workout_tracker.errors import Unauthenticated
from workout_tracker.services.auth import AuthService, InvalidTokenError, decode_access_token
from workout_tracker.services.workout_service import WorkoutService

# auto_error=False so a missing header gets our own 401 body instead of FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> int:
    """Get the authenticated user's id from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token provided")

    try:
        return decode_access_token(credentials.credentials, settings)
    except InvalidTokenError:
        raise Unauthenticated("Invalid token") from None


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, settings)


def get_workout_service(
    db: Annotated[Session, Depends(get_db)],
) -> WorkoutService:
    """Get workout service with dependencies."""
    return WorkoutService(db)
