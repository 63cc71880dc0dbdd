"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gatekeeper.core.permissions import DEFAULT_ROLE, ROLE_CAPABILITIES, known_roles


class SignupRequest(BaseModel):
    """New account details."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=8, max_length=128, description="Password")
    role: str = Field(default=DEFAULT_ROLE, description="Role granting CRUD capabilities")

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: str) -> str:
        if v not in ROLE_CAPABILITIES:
            raise ValueError(f"role must be one of {list(known_roles())}")
        return v


class UserOut(BaseModel):
    """Public view of a user (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class AuthResponse(BaseModel):
    """Returned by signup and signin: the user and a bearer token for it."""

    user: UserOut
    token: str = Field(..., description="JWT bearer token")


class CurrentUser(BaseModel):
    """Authenticated identity (from token claims) for dependency injection."""

    username: str
    role: str


class SecretResponse(BaseModel):
    message: str


class UsersListResponse(BaseModel):
    """Response for GET /users."""

    users: list[str]
