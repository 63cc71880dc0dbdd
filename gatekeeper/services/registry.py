"""Typed registry of resource collections served by the generic CRUD routes.

Each Collection binds a name to an ORM model and its pydantic schemas; routes
resolve ``:model`` through the registry instead of looking models up by string
at request time.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import pydantic
from sqlalchemy.orm import Session

from gatekeeper.core.errors import NotFound, ValidationError
from gatekeeper.models import Base, Clothes, Food
from gatekeeper.schemas.resources import (
    ClothesCreate,
    ClothesOut,
    ClothesUpdate,
    FoodCreate,
    FoodOut,
    FoodUpdate,
)

logger = logging.getLogger(__name__)


def _validate(schema: type[pydantic.BaseModel], payload: Any) -> pydantic.BaseModel:
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(
            "Invalid payload",
            errors=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


@dataclass(frozen=True)
class Collection:
    """CRUD handle for one resource model."""

    name: str
    model: type[Base]
    create_schema: type[pydantic.BaseModel]
    update_schema: type[pydantic.BaseModel]
    read_schema: type[pydantic.BaseModel]

    def _dump(self, row: Base) -> dict[str, Any]:
        return self.read_schema.model_validate(row).model_dump()

    def _get_row(self, db: Session, record_id: int) -> Base:
        row = db.get(self.model, record_id)
        if row is None:
            raise NotFound(f"{self.name} {record_id} not found")
        return row

    def list(self, db: Session) -> list[dict[str, Any]]:
        rows = db.query(self.model).order_by(self.model.id).all()
        return [self._dump(r) for r in rows]

    def get(self, db: Session, record_id: int) -> dict[str, Any]:
        return self._dump(self._get_row(db, record_id))

    def create(self, db: Session, payload: Any) -> dict[str, Any]:
        data = _validate(self.create_schema, payload)
        row = self.model(**data.model_dump())
        db.add(row)
        db.commit()
        db.refresh(row)
        return self._dump(row)

    def update(self, db: Session, record_id: int, payload: Any | None) -> dict[str, Any]:
        """
        Apply the fields present in payload; an empty or missing payload changes nothing.
        Every column is NOT NULL, so an explicit null is rejected rather than skipped.
        """
        row = self._get_row(db, record_id)
        data = _validate(self.update_schema, {} if payload is None else payload)
        changes = data.model_dump(exclude_unset=True)
        nulls = sorted(field for field, value in changes.items() if value is None)
        if nulls:
            raise ValidationError(
                "Fields cannot be null",
                errors=[{"loc": [field], "msg": "null not allowed", "type": "null_not_allowed"} for field in nulls],
            )
        for field, value in changes.items():
            setattr(row, field, value)
        db.commit()
        db.refresh(row)
        return self._dump(row)

    def delete(self, db: Session, record_id: int) -> None:
        row = self._get_row(db, record_id)
        db.delete(row)
        db.commit()
        logger.info("Deleted %s %s", self.name, record_id)


class ModelRegistry:
    """Name -> Collection mapping, fixed at construction."""

    def __init__(self, collections: Iterable[Collection]) -> None:
        self._collections: dict[str, Collection] = {}
        for c in collections:
            if c.name in self._collections:
                raise ValueError(f"duplicate collection name: {c.name}")
            self._collections[c.name] = c

    def resolve(self, name: str) -> Collection:
        try:
            return self._collections[name]
        except KeyError:
            raise NotFound(f"Unknown model '{name}'") from None

    def names(self) -> list[str]:
        return sorted(self._collections)

    def __contains__(self, name: object) -> bool:
        return name in self._collections


def build_registry() -> ModelRegistry:
    """Registry of every collection exposed under /api/v1 and /api/v2."""
    return ModelRegistry(
        [
            Collection("food", Food, FoodCreate, FoodUpdate, FoodOut),
            Collection("clothes", Clothes, ClothesCreate, ClothesUpdate, ClothesOut),
        ]
    )
