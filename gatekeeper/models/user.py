"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, Integer, String

from gatekeeper.models.base import Base


class User(Base):
    """
    User account for bearer-token authentication and role-based access control.

    role: one of the roles in gatekeeper.core.permissions.ROLE_CAPABILITIES
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
