"""Register, login and profile routes, plus the bearer-token auth dependencies."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import AuthError
from app.models.user import User
from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    TokenClaims,
)
from app.services import auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Dependency: require a valid Bearer JWT. 401 if missing, 403 if invalid or expired."""
    token = credentials.credentials if credentials is not None else None
    return auth_service.verify(token)


def get_current_user(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: verified token plus the user's current role from the database."""
    user = db.get(User, claims.id)
    if user is None:
        raise AuthError("User not found")
    return CurrentUser.model_validate(user)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Create an account (username 3-50 chars, password at least 6) and return a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    token, user = auth_service.register(db, body.username, body.password)
    return AuthResponse(message="User registered successfully", token=token, user=user)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Authenticate with username and password; returns a JWT access token."""
    token, user = auth_service.login(db, body.username, body.password)
    return AuthResponse(message="Login successful", token=token, user=user)


@router.get("/profile", response_model=ProfileResponse)
def profile(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> ProfileResponse:
    """Return the public profile of the token's user; 404 if the user no longer exists."""
    user = auth_service.get_profile(db, claims.id)
    return ProfileResponse(message="Profile retrieved successfully", user=user)
