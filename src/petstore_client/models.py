"""Petstore request/response models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import OrderStatusEnum, PetStatusEnum


class PetstoreModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Category(PetstoreModel):
    id: int | None = None
    name: str | None = None


class Tag(PetstoreModel):
    id: int | None = None
    name: str | None = None


class Pet(PetstoreModel):
    id: int | None = None
    name: str
    category: Category | None = None
    photo_urls: list[str] = Field(alias="photoUrls")
    tags: list[Tag] | None = None
    status: PetStatusEnum | None = None


class Order(PetstoreModel):
    id: int | None = None
    pet_id: int | None = Field(default=None, alias="petId")
    quantity: int | None = None
    ship_date: datetime | None = Field(default=None, alias="shipDate")
    status: OrderStatusEnum | None = None
    complete: bool | None = None


class User(PetstoreModel):
    id: int | None = None
    username: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    user_status: int | None = Field(default=None, alias="userStatus")


class ApiResponse(PetstoreModel):
    """Result body of the image upload operation."""

    code: int | None = None
    type: str | None = None
    message: str | None = None
