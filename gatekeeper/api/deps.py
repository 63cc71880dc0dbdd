"""Shared FastAPI dependencies: token service, authenticator, registry and auth guards."""

import json
from collections.abc import Callable
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBasic,
    HTTPBasicCredentials,
    HTTPBearer,
)

from gatekeeper.core.config import get_settings
from gatekeeper.core.errors import Unauthorized, ValidationError
from gatekeeper.core.permissions import require
from gatekeeper.core.security import TokenService
from gatekeeper.schemas.auth import CurrentUser
from gatekeeper.services.registry import ModelRegistry, build_registry
from gatekeeper.services.users import Authenticator

bearer = HTTPBearer(auto_error=False)
basic = HTTPBasic(auto_error=False)


@lru_cache
def get_token_service() -> TokenService:
    return TokenService.from_settings(get_settings())


@lru_cache
def get_authenticator() -> Authenticator:
    return Authenticator(get_token_service(), bcrypt_rounds=get_settings().BCRYPT_ROUNDS)


@lru_cache
def get_registry() -> ModelRegistry:
    return build_registry()


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> CurrentUser:
    """Dependency: require a valid Bearer token and return its claims. Raises Unauthorized otherwise."""
    if credentials is None:
        raise Unauthorized()
    claims = tokens.validate(credentials.credentials)
    return CurrentUser(username=claims.username, role=claims.role)


def require_capability(verb: str) -> Callable[..., CurrentUser]:
    """Build a dependency that authenticates the caller, then checks role capability for verb."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        require(current_user.role, verb)
        return current_user

    dependency.__name__ = f"require_{verb}"
    return dependency


async def get_basic_credentials(request: Request) -> HTTPBasicCredentials:
    """Dependency: HTTP Basic credentials, or Unauthorized if absent or undecodable."""
    try:
        credentials = await basic(request)
    except HTTPException as e:
        # HTTPBasic raises its own 401 for bad base64 even with auto_error=False.
        raise Unauthorized() from e
    if credentials is None:
        raise Unauthorized()
    return credentials


async def json_body(request: Request) -> Any:
    """
    Dependency: the decoded JSON request body, or None when empty.

    Declared after the route guards so auth is decided before the body is parsed.
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise ValidationError("Malformed JSON body") from e
