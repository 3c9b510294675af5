"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends

from workout_tracker.api.dependencies import get_auth_service
from workout_tracker.schemas.auth import AuthResponse, UserLogin, UserRegister
from workout_tracker.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    return auth_service.register(user_data)


@router.post("/login", response_model=AuthResponse)
def login(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    credentials: Annotated[UserLogin | None, Body()] = None,
):
    """Login with email and password.

    A request without a body fails like any other bad login.
    """
    return auth_service.login(credentials or UserLogin())
