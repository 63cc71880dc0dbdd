"""SQLAlchemy ORM models."""

from gatekeeper.models.base import Base
from gatekeeper.models.clothes import Clothes
from gatekeeper.models.food import Food
from gatekeeper.models.user import User

__all__ = ["Base", "Clothes", "Food", "User"]
