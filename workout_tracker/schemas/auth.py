"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserRegister(BaseModel):
    """User registration request.

    Fields are optional here so that a missing field is reported as
    "All fields are required" by the service rather than as a schema error.
    """

    username: str | None = Field(None, max_length=50)
    email: str | None = Field(None, max_length=100)
    password: str | None = Field(None, max_length=128)


class UserLogin(BaseModel):
    """User login request.

    No length limits: an email or password that could never be stored is just
    a failed login.
    """

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Public user information."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    user: UserResponse
