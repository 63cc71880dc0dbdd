"""ORM model for the clothes resource collection."""

from sqlalchemy import Column, Integer, String

from gatekeeper.models.base import Base


class Clothes(Base):
    __tablename__ = "clothes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    color = Column(String(64), nullable=False)
    size = Column(String(16), nullable=False)
