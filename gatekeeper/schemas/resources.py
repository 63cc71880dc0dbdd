"""Pydantic schemas for the generic resource collections (food, clothes)."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FoodType = Literal["fruit", "vegetable", "protein"]


class FoodCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, max_length=255)
    calories: int = Field(..., ge=0)
    type: FoodType


class FoodUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    calories: int | None = Field(default=None, ge=0)
    type: FoodType | None = None


class FoodOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    calories: int
    type: str


class ClothesCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., min_length=1, max_length=64)
    size: str = Field(..., min_length=1, max_length=16)


class ClothesUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    color: str | None = Field(default=None, min_length=1, max_length=64)
    size: str | None = Field(default=None, min_length=1, max_length=16)


class ClothesOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
    size: str
