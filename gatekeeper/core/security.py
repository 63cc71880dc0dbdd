"""Password hashing and JWT creation/verification for authentication."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from gatekeeper.core.config import Settings
from gatekeeper.core.errors import Unauthorized

logger = logging.getLogger(__name__)

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

REQUIRED_CLAIMS = ["sub", "role", "exp", "iat"]


def hash_password(plain_password: str, rounds: int = 12) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Identity recovered from a verified token."""

    username: str
    role: str


class TokenService:
    """
    Issues and validates signed bearer tokens.

    Holds only the signing configuration, which is read-only after construction,
    so one instance can serve concurrent requests.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 15) -> None:
        if not secret:
            raise ValueError("token secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def issue(self, username: str, role: str, now: datetime | None = None) -> str:
        """Create a JWT with sub (username), role, iat and exp."""
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": username,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the embedded claims.
        Raises Unauthorized for any failure; the cause is only logged.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError as e:
            logger.info("Rejected bearer token: %s", type(e).__name__)
            raise Unauthorized() from e
        username = payload.get("sub")
        role = payload.get("role")
        if not isinstance(username, str) or not username or not isinstance(role, str):
            logger.info("Rejected bearer token: invalid claims")
            raise Unauthorized()
        return TokenClaims(username=username, role=role)
