"""Pydantic request/response schemas."""

from gatekeeper.schemas.auth import (
    AuthResponse,
    CurrentUser,
    SecretResponse,
    SignupRequest,
    UserOut,
    UsersListResponse,
)
from gatekeeper.schemas.health import HealthResponse
from gatekeeper.schemas.resources import (
    ClothesCreate,
    ClothesOut,
    ClothesUpdate,
    FoodCreate,
    FoodOut,
    FoodUpdate,
)

__all__ = [
    "AuthResponse",
    "ClothesCreate",
    "ClothesOut",
    "ClothesUpdate",
    "CurrentUser",
    "FoodCreate",
    "FoodOut",
    "FoodUpdate",
    "HealthResponse",
    "SecretResponse",
    "SignupRequest",
    "UserOut",
    "UsersListResponse",
]
