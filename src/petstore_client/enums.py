"""Closed value sets for petstore parameters and model fields."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from .errors import InvalidEnumValueError

E = TypeVar("E", bound="WireEnum")


class WireEnum(str, Enum):
    """String enum whose member values are the exact wire literals."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        try:
            cls.parse(value)
        except InvalidEnumValueError:
            return False
        return True

    @classmethod
    def parse(
        cls: type[E],
        value: Any,
        *,
        operation: str | None = None,
        parameter: str | None = None,
    ) -> E:
        if isinstance(value, cls):
            return value
        # Members of a different enum are rejected even when the literal matches.
        if isinstance(value, str) and not isinstance(value, Enum):
            member = cls._value2member_map_.get(value)
            if member is not None:
                return member  # type: ignore[return-value]
        raise InvalidEnumValueError(
            enum_name=cls.__name__,
            value=value,
            allowed=cls.values(),
            operation=operation,
            parameter=parameter,
        )


class FindPetsByStatusStatusEnum(WireEnum):
    AVAILABLE = "available"
    PENDING = "pending"
    SOLD = "sold"


class PetStatusEnum(WireEnum):
    """Pet status in the store."""

    AVAILABLE = "available"
    PENDING = "pending"
    SOLD = "sold"


class OrderStatusEnum(WireEnum):
    """Order Status."""

    PLACED = "placed"
    APPROVED = "approved"
    DELIVERED = "delivered"
