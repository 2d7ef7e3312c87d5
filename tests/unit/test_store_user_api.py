from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pytest

from petstore_client import (
    Configuration,
    Credentials,
    DecodeError,
    Order,
    OrderStatusEnum,
    RequiredError,
    StoreApi,
    User,
    UserApi,
)
from petstore_client.transport import HttpRequest, HttpResponse

BASE_PATH = "http://127.0.0.1:8080/api/v3"


def _json_response(payload: Any, status_code: int = 200) -> HttpResponse:
    return HttpResponse(
        status_code=status_code,
        headers={"Content-Type": "application/json"},
        body=json.dumps(payload).encode("utf-8"),
    )


@dataclass
class _Transport:
    response: HttpResponse = field(default_factory=lambda: HttpResponse(200))
    calls: list[HttpRequest] = field(default_factory=list)

    async def send(self, request: HttpRequest) -> HttpResponse:
        self.calls.append(request)
        return self.response


def _config(transport: _Transport, **options: Any) -> Configuration:
    return Configuration(base_path=BASE_PATH, transport=transport, **options)


@pytest.mark.asyncio
async def test_get_inventory_uses_api_key() -> None:
    transport = _Transport(response=_json_response({"available": 3, "sold": 1}))
    store = StoreApi(_config(transport, credentials=Credentials(api_key=lambda name: f"key-for-{name}")))

    inventory = await store.get_inventory()

    assert inventory == {"available": 3, "sold": 1}
    assert transport.calls[0].url == f"{BASE_PATH}/store/inventory"
    assert transport.calls[0].headers["api_key"] == "key-for-api_key"


@pytest.mark.asyncio
async def test_place_order_round_trips_order_fields() -> None:
    transport = _Transport(
        response=_json_response(
            {
                "id": 7,
                "petId": 10,
                "quantity": 2,
                "shipDate": "2026-01-01T00:00:00Z",
                "status": "approved",
                "complete": True,
            }
        )
    )
    store = StoreApi(_config(transport))

    order = await store.place_order(
        Order(
            pet_id=10,
            quantity=2,
            ship_date=datetime(2026, 1, 1, tzinfo=timezone.utc),
            status=OrderStatusEnum.PLACED,
        )
    )

    body = json.loads(transport.calls[0].body or b"")
    assert body["petId"] == 10
    assert body["status"] == "placed"
    assert body["shipDate"].startswith("2026-01-01T00:00:00")
    assert order.status is OrderStatusEnum.APPROVED
    assert order.ship_date == datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_place_order_without_body_sends_nothing() -> None:
    transport = _Transport(response=_json_response({"id": 1}))
    await StoreApi(_config(transport)).place_order()

    assert transport.calls[0].body is None
    assert "Content-Type" not in transport.calls[0].headers


@pytest.mark.asyncio
async def test_order_id_path_and_required_check() -> None:
    transport = _Transport(response=_json_response({"id": 5, "status": "delivered"}))
    store = StoreApi(_config(transport))

    order = await store.get_order_by_id(5)
    await store.delete_order(5)

    assert [(call.method, call.url) for call in transport.calls] == [
        ("GET", f"{BASE_PATH}/store/order/5"),
        ("DELETE", f"{BASE_PATH}/store/order/5"),
    ]
    assert order.status is OrderStatusEnum.DELIVERED

    with pytest.raises(RequiredError):
        await store.delete_order(None)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_login_user_returns_text_body() -> None:
    transport = _Transport(
        response=HttpResponse(200, headers={"Content-Type": "text/plain"}, body=b"logged in user session:123"),
    )
    users = UserApi(_config(transport))

    session = await users.login_user(username="user1", password="p&ss")

    assert session == "logged in user session:123"
    assert transport.calls[0].url == f"{BASE_PATH}/user/login?username=user1&password=p%26ss"


@pytest.mark.asyncio
async def test_login_user_decodes_json_string() -> None:
    transport = _Transport(response=_json_response("logged in user session:456"))
    assert await UserApi(_config(transport)).login_user() == "logged in user session:456"
    assert transport.calls[0].url == f"{BASE_PATH}/user/login"


@pytest.mark.asyncio
async def test_login_user_rejects_non_string_json() -> None:
    transport = _Transport(response=_json_response({"session": 1}))
    with pytest.raises(DecodeError):
        await UserApi(_config(transport)).login_user()


@pytest.mark.asyncio
async def test_user_crud_requests() -> None:
    transport = _Transport(response=_json_response({"id": 1, "username": "theUser", "firstName": "John"}))
    users = UserApi(_config(transport))

    created = await users.create_user(User(username="theUser", first_name="John"))
    fetched = await users.get_user_by_name("theUser")
    await users.update_user("theUser", {"username": "theUser", "userStatus": 1})
    await users.delete_user("theUser")
    await users.logout_user()

    assert [(call.method, call.url) for call in transport.calls] == [
        ("POST", f"{BASE_PATH}/user"),
        ("GET", f"{BASE_PATH}/user/theUser"),
        ("PUT", f"{BASE_PATH}/user/theUser"),
        ("DELETE", f"{BASE_PATH}/user/theUser"),
        ("GET", f"{BASE_PATH}/user/logout"),
    ]
    assert json.loads(transport.calls[0].body or b"") == {"username": "theUser", "firstName": "John"}
    assert json.loads(transport.calls[2].body or b"") == {"username": "theUser", "userStatus": 1}
    assert created.first_name == "John"
    assert fetched.username == "theUser"


@pytest.mark.asyncio
async def test_create_users_with_list_input_serializes_each_user() -> None:
    transport = _Transport(response=_json_response({"id": 1, "username": "a"}))
    await UserApi(_config(transport)).create_users_with_list_input([User(username="a"), {"username": "b", "lastName": "B"}])

    assert transport.calls[0].url == f"{BASE_PATH}/user/createWithList"
    assert json.loads(transport.calls[0].body or b"") == [{"username": "a"}, {"username": "b", "lastName": "B"}]
