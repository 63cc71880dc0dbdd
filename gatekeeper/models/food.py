"""ORM model for the food resource collection."""

from sqlalchemy import Column, Integer, String

from gatekeeper.models.base import Base


class Food(Base):
    __tablename__ = "food"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    calories = Column(Integer, nullable=False)
    type = Column(String(32), nullable=False)
