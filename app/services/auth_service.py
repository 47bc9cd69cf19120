"""Registration, login, token verification and profile lookup."""

import logging

import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthError, ConflictError, NotFoundError, ValidationError, is_unique_violation
from app.core.security import (
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.models.user import User
from app.schemas.auth import TokenClaims, UserPublic

logger = logging.getLogger(__name__)

# Same message for unknown user and wrong password.
INVALID_CREDENTIALS = "Invalid username or password."


def _require_credentials(username: str | None, password: str | None) -> tuple[str, str]:
    if not username or not username.strip() or not password:
        raise ValidationError("Username and password are required")
    return username.strip(), password


def validate_registration(username: str | None, password: str | None) -> tuple[str, str]:
    """Check registration input; return the normalized (username, password)."""
    username, password = _require_credentials(username, password)
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise ValidationError(
            f"Username must be between {USERNAME_MIN_LEN} and {USERNAME_MAX_LEN} characters"
        )
    if len(password) < PASSWORD_MIN_LEN:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LEN} characters long"
        )
    return username, password


def issue_token(user: User) -> str:
    return create_access_token(user_id=user.id, username=user.username)


def register(db: Session, username: str | None, password: str | None) -> tuple[str, UserPublic]:
    """Create a user with role 'user' and return (token, public view)."""
    username, password = validate_registration(username, password)

    user = User(username=username, password_hash=hash_password(password), role="user")
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise ConflictError("Username already exists") from e
        raise
    db.refresh(user)
    logger.info("User registered: id=%s username=%s", user.id, user.username)
    return issue_token(user), UserPublic.model_validate(user)


def login(db: Session, username: str | None, password: str | None) -> tuple[str, UserPublic]:
    """Check credentials and return (token, public view)."""
    username, password = _require_credentials(username, password)

    user = db.query(User).filter(User.username == username).first()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed for username=%s", username)
        raise AuthError(INVALID_CREDENTIALS)
    return issue_token(user), UserPublic.model_validate(user)


def verify(token: str | None) -> TokenClaims:
    """
    Validate a bearer token and return the identity it carries.

    Missing token -> AuthError 401; malformed, expired, badly signed or
    incomplete token -> AuthError 403.
    """
    if not token:
        raise AuthError("Access token is required", status_code=401)
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.info("Rejected token: %s", e)
        raise AuthError("Invalid or expired token", status_code=403) from e
    user_id = payload.get("id")
    username = payload.get("username")
    if not isinstance(user_id, int) or not isinstance(username, str):
        raise AuthError("Invalid token payload", status_code=403)
    return TokenClaims(id=user_id, username=username)


def get_profile(db: Session, user_id: int) -> UserPublic:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserPublic.model_validate(user)
