"""Tests for gatekeeper.services.registry: name resolution and generic CRUD."""

import unittest

from gatekeeper.core.database import SessionLocal, drop_db, init_db
from gatekeeper.core.errors import NotFound, ValidationError
from gatekeeper.models import Food
from gatekeeper.schemas.resources import FoodCreate, FoodOut, FoodUpdate
from gatekeeper.services.registry import Collection, ModelRegistry, build_registry

APPLE = {"name": "apple", "calories": "150", "type": "fruit"}


class TestModelRegistry(unittest.TestCase):
    def test_default_registry_names(self) -> None:
        registry = build_registry()
        self.assertEqual(registry.names(), ["clothes", "food"])
        self.assertIn("food", registry)

    def test_unknown_model_raises_not_found(self) -> None:
        with self.assertRaises(NotFound):
            build_registry().resolve("foo")

    def test_duplicate_names_refused(self) -> None:
        food = Collection("food", Food, FoodCreate, FoodUpdate, FoodOut)
        with self.assertRaises(ValueError):
            ModelRegistry([food, food])


class TestCollectionCrud(unittest.TestCase):
    def setUp(self) -> None:
        init_db()
        self.db = SessionLocal()
        self.food = build_registry().resolve("food")

    def tearDown(self) -> None:
        self.db.close()
        drop_db()

    def test_create_coerces_and_assigns_id(self) -> None:
        record = self.food.create(self.db, APPLE)
        self.assertEqual(record, {"id": 1, "name": "apple", "calories": 150, "type": "fruit"})

    def test_list_and_get(self) -> None:
        self.food.create(self.db, APPLE)
        self.food.create(self.db, {"name": "kale", "calories": 30, "type": "vegetable"})
        self.assertEqual([r["name"] for r in self.food.list(self.db)], ["apple", "kale"])
        self.assertEqual(self.food.get(self.db, 2)["name"], "kale")

    def test_update_is_partial(self) -> None:
        self.food.create(self.db, APPLE)
        record = self.food.update(self.db, 1, {"name": "apple2"})
        self.assertEqual(record["name"], "apple2")
        self.assertEqual(record["calories"], 150)

    def test_update_rejects_explicit_null(self) -> None:
        self.food.create(self.db, APPLE)
        with self.assertRaises(ValidationError) as ctx:
            self.food.update(self.db, 1, {"name": None, "calories": 10})
        self.assertEqual([err["loc"] for err in ctx.exception.errors], [["name"]])
        self.assertEqual(self.food.get(self.db, 1)["calories"], 150)

    def test_update_without_payload_is_noop(self) -> None:
        self.food.create(self.db, APPLE)
        self.assertEqual(self.food.update(self.db, 1, None)["name"], "apple")

    def test_delete_twice_raises_not_found(self) -> None:
        self.food.create(self.db, APPLE)
        self.food.delete(self.db, 1)
        with self.assertRaises(NotFound):
            self.food.delete(self.db, 1)
        with self.assertRaises(NotFound):
            self.food.get(self.db, 1)

    def test_invalid_payload(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            self.food.create(self.db, {"name": "apple", "type": "candy"})
        fields = {err["loc"][0] for err in ctx.exception.errors}
        self.assertEqual(fields, {"calories", "type"})
        self.assertEqual(self.food.list(self.db), [])


if __name__ == "__main__":
    unittest.main()
