"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Credentials for registration. Length rules are enforced by the auth service."""

    username: str | None = Field(default=None, description="Username (3-50 chars)")
    password: str | None = Field(default=None, description="Password (at least 6 chars)")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class UserPublic(BaseModel):
    """User data returned to clients (no password hash)."""

    id: int
    username: str
    role: str
    station_code: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Body of register/login responses."""

    success: bool = True
    message: str
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: UserPublic


class ProfileResponse(BaseModel):
    """Body of GET /auth/profile."""

    success: bool = True
    message: str
    user: UserPublic


class TokenClaims(BaseModel):
    """Identity carried by a verified bearer token."""

    id: int
    username: str


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role) for dependency injection."""

    id: int
    username: str
    role: str

    class Config:
        from_attributes = True
