"""SQLAlchemy declarative Base shared by users and resource collections."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; Base.metadata drives init_db() and Alembic."""
