"""Credential store access: signup, signin and user listing."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gatekeeper.core.errors import Conflict, Unauthorized, ValidationError
from gatekeeper.core.permissions import ROLE_CAPABILITIES, known_roles
from gatekeeper.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    TokenService,
    hash_password,
    verify_password,
)
from gatekeeper.models.user import User

logger = logging.getLogger(__name__)


class Authenticator:
    """
    Verifies credentials against the users table and issues bearer tokens.

    Stateless apart from the injected TokenService; the DB session is passed per call.
    """

    def __init__(self, tokens: TokenService, bcrypt_rounds: int = 12) -> None:
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    def signup(self, db: Session, username: str, password: str, role: str = "user") -> tuple[User, str]:
        """Create a user and return it with a fresh token. Raises Conflict on duplicate username."""
        username = username.strip()
        if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
            raise ValidationError("Invalid username length.")
        if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
            raise ValidationError("Invalid password length.")
        if role not in ROLE_CAPABILITIES:
            raise ValidationError(f"role must be one of {list(known_roles())}")

        if db.query(User).filter(User.username == username).first() is not None:
            raise Conflict(f"User '{username}' already exists.")
        user = User(
            username=username,
            password_hash=hash_password(password, rounds=self.bcrypt_rounds),
            role=role,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent signup for the same name.
            db.rollback()
            raise Conflict(f"User '{username}' already exists.") from e
        db.refresh(user)
        logger.info("Created user %s with role %s", user.username, user.role)
        return user, self.tokens.issue(user.username, user.role)

    def signin(self, db: Session, username: str, password: str) -> tuple[User, str]:
        """Verify basic credentials. Unknown user and wrong password fail identically."""
        user = db.query(User).filter(User.username == username).first()
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed signin for %r", username)
            raise Unauthorized()
        return user, self.tokens.issue(user.username, user.role)


def list_usernames(db: Session) -> list[str]:
    """All usernames ordered by id."""
    return [u.username for u in db.query(User).order_by(User.id).all()]
