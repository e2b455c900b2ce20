"""Pydantic request/response schemas."""

from wisata.schemas.auth import (
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    PublicUser,
    RegisterRequest,
    RegisterResponse,
    SuperAdminCheckResponse,
    SuperAdminInitRequest,
    SuperAdminInitResponse,
)
from wisata.schemas.health import HealthResponse

__all__ = [
    "HealthResponse",
    "IdentityResponse",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "PublicUser",
    "RegisterRequest",
    "RegisterResponse",
    "SuperAdminCheckResponse",
    "SuperAdminInitRequest",
    "SuperAdminInitResponse",
]
