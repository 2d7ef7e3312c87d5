from __future__ import annotations

import pytest

from petstore_client import (
    FindPetsByStatusStatusEnum,
    InvalidEnumValueError,
    OrderStatusEnum,
    PetStatusEnum,
)


def test_wire_values_match_service_literals() -> None:
    assert FindPetsByStatusStatusEnum.values() == ("available", "pending", "sold")
    assert PetStatusEnum.values() == ("available", "pending", "sold")
    assert OrderStatusEnum.values() == ("placed", "approved", "delivered")
    assert str(FindPetsByStatusStatusEnum.AVAILABLE) == "available"


def test_parse_accepts_members_and_wire_strings() -> None:
    assert FindPetsByStatusStatusEnum.parse("sold") is FindPetsByStatusStatusEnum.SOLD
    assert FindPetsByStatusStatusEnum.parse(FindPetsByStatusStatusEnum.PENDING) is FindPetsByStatusStatusEnum.PENDING


@pytest.mark.parametrize("value", ["Available", "adopted", "", None, 1, PetStatusEnum.AVAILABLE, OrderStatusEnum.PLACED])
def test_parse_rejects_values_outside_the_set(value: object) -> None:
    with pytest.raises(InvalidEnumValueError) as error_info:
        FindPetsByStatusStatusEnum.parse(value, operation="findPetsByStatus", parameter="status")

    assert error_info.value.allowed == ("available", "pending", "sold")
    assert error_info.value.parameter == "status"
    assert error_info.value.operation == "findPetsByStatus"


def test_is_valid_membership() -> None:
    assert OrderStatusEnum.is_valid("delivered")
    assert OrderStatusEnum.is_valid(OrderStatusEnum.APPROVED)
    assert not OrderStatusEnum.is_valid("available")
    assert not OrderStatusEnum.is_valid(["placed"])
