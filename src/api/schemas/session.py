"""Pydantic schemas for session API endpoints."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Credentials for logging in."""

    username: str
    password: str


class SessionResponse(BaseModel):
    """Current authentication state."""

    logged_in: bool
    username: str | None = None
