"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from workout_tracker.config import Settings
from workout_tracker.errors import DuplicateUser, InternalError, InvalidCredentials, ValidationError
from workout_tracker.models.user import User
from workout_tracker.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class InvalidTokenError(Exception):
    """Token is malformed, badly signed, expired or carries no usable user id."""


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognizable hash
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, settings: Settings) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str, settings: Settings) -> int:
    """Decode and validate a JWT token, returning the user id it was issued for."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Token has no valid subject") from e


class AuthService:
    """Registration and login against the users table."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def _auth_response(self, user: User) -> AuthResponse:
        return AuthResponse(
            token=create_access_token(user.id, self.settings),
            user=UserResponse.model_validate(user),
        )

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def register(self, data: UserRegister) -> AuthResponse:
        """Create a user and issue a token for it."""
        if not data.username or not data.email or not data.password:
            raise ValidationError("All fields are required")

        user = User(
            username=data.username,
            email=data.email,
            password_hash=get_password_hash(data.password),
        )
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError:
            self.db.rollback()
            raise DuplicateUser("Username or email already exists") from None
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Register error")
            raise InternalError("Registration failed") from None

        logger.info(f"Registered user {user.id} ({user.username})")
        return self._auth_response(user)

    def login(self, credentials: UserLogin) -> AuthResponse:
        """Check email and password, issuing a token on success.

        Unknown email and wrong password fail with the same error.
        """
        if not credentials.email or not credentials.password:
            raise InvalidCredentials("Invalid credentials")

        try:
            user = self.get_user_by_email(credentials.email)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Login error")
            raise InternalError("Login failed") from None

        if not user or not verify_password(credentials.password, user.password_hash):
            logger.info(f"Failed login for {credentials.email}")
            raise InvalidCredentials("Invalid credentials")

        return self._auth_response(user)
