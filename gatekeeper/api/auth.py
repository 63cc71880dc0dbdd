"""Signup, signin (HTTP Basic) and bearer-protected auth routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPBasicCredentials
from sqlalchemy.orm import Session

from gatekeeper.api.deps import (
    get_authenticator,
    get_basic_credentials,
    get_current_user,
    require_capability,
)
from gatekeeper.core.database import get_db
from gatekeeper.schemas.auth import (
    AuthResponse,
    CurrentUser,
    SecretResponse,
    SignupRequest,
    UserOut,
    UsersListResponse,
)
from gatekeeper.services.users import Authenticator, list_usernames

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> AuthResponse:
    """Create an account and return it together with a bearer token."""
    user, token = authenticator.signup(db, body.username, body.password, body.role)
    return AuthResponse(user=UserOut.model_validate(user), token=token)


@router.post("/signin", response_model=AuthResponse)
def signin(
    credentials: Annotated[HTTPBasicCredentials, Depends(get_basic_credentials)],
    db: Annotated[Session, Depends(get_db)],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> AuthResponse:
    """
    Authenticate with HTTP Basic credentials; returns the user and a bearer token.
    Send the token as: Authorization: Bearer <token>
    """
    user, token = authenticator.signin(db, credentials.username, credentials.password)
    return AuthResponse(user=UserOut.model_validate(user), token=token)


@router.get("/secret", response_model=SecretResponse)
def secret(_user: Annotated[CurrentUser, Depends(get_current_user)]) -> SecretResponse:
    return SecretResponse(message="Welcome to the secret area")


@router.get("/users", response_model=UsersListResponse)
def users(
    _user: Annotated[CurrentUser, Depends(require_capability("delete"))],
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List usernames; requires the delete capability."""
    return UsersListResponse(users=list_usernames(db))
