"""Resource-scoped APIs for the Swagger Petstore v3 service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .client import ApiKeyAuth, ApiResult, BaseApi, OAuth2Auth, require
from .decoding import serialize_model, serialize_model_list
from .enums import FindPetsByStatusStatusEnum
from .errors import RequestValidationError
from .models import ApiResponse, Order, Pet, User

API_KEY = ApiKeyAuth(name="api_key", header="api_key")
PETSTORE_AUTH = OAuth2Auth(name="petstore_auth", scopes=("write:pets", "read:pets"))

PetPayload = Pet | Mapping[str, Any]
OrderPayload = Order | Mapping[str, Any]
UserPayload = User | Mapping[str, Any]


class PetApi(BaseApi):
    """Everything about your Pets."""

    async def add_pet_raw(self, pet: PetPayload) -> ApiResult[Pet]:
        require("addPet", "pet", pet)
        return await self._request(
            "addPet",
            "POST",
            "/pet",
            json_body=serialize_model("addPet", "pet", Pet, pet),
            security=(PETSTORE_AUTH,),
            shape=Pet,
        )

    async def add_pet(self, pet: PetPayload) -> Pet:
        """Add a new pet to the store."""
        return (await self.add_pet_raw(pet)).value

    async def update_pet_raw(self, pet: PetPayload) -> ApiResult[Pet]:
        require("updatePet", "pet", pet)
        return await self._request(
            "updatePet",
            "PUT",
            "/pet",
            json_body=serialize_model("updatePet", "pet", Pet, pet),
            security=(PETSTORE_AUTH,),
            shape=Pet,
        )

    async def update_pet(self, pet: PetPayload) -> Pet:
        """Update an existing pet by id."""
        return (await self.update_pet_raw(pet)).value

    async def find_pets_by_status_raw(
        self, status: FindPetsByStatusStatusEnum | None = None
    ) -> ApiResult[list[Pet]]:
        if status is not None:
            status = FindPetsByStatusStatusEnum.parse(status, operation="findPetsByStatus", parameter="status")
        return await self._request(
            "findPetsByStatus",
            "GET",
            "/pet/findByStatus",
            query={"status": status},
            security=(PETSTORE_AUTH,),
            shape=list[Pet],
        )

    async def find_pets_by_status(self, status: FindPetsByStatusStatusEnum | None = None) -> list[Pet]:
        """Finds Pets by status.

        Without ``status`` no filter is sent and the service applies its own
        default.
        """
        return (await self.find_pets_by_status_raw(status)).value

    async def find_pets_by_tags_raw(self, tags: Sequence[str] | None = None) -> ApiResult[list[Pet]]:
        if tags is not None and (isinstance(tags, (str, bytes)) or not isinstance(tags, Sequence)):
            raise RequestValidationError(
                "findPetsByTags parameter 'tags' must be a sequence of strings",
                operation="findPetsByTags",
                parameter="tags",
            )
        return await self._request(
            "findPetsByTags",
            "GET",
            "/pet/findByTags",
            query={"tags": list(tags) if tags is not None else None},
            security=(PETSTORE_AUTH,),
            shape=list[Pet],
        )

    async def find_pets_by_tags(self, tags: Sequence[str] | None = None) -> list[Pet]:
        """Finds Pets by tags. Each tag is sent as its own ``tags`` query value."""
        return (await self.find_pets_by_tags_raw(tags)).value

    async def get_pet_by_id_raw(self, pet_id: int) -> ApiResult[Pet]:
        require("getPetById", "pet_id", pet_id)
        return await self._request(
            "getPetById",
            "GET",
            "/pet/{petId}",
            path_params={"petId": pet_id},
            security=(API_KEY, PETSTORE_AUTH),
            shape=Pet,
        )

    async def get_pet_by_id(self, pet_id: int) -> Pet:
        """Find pet by ID."""
        return (await self.get_pet_by_id_raw(pet_id)).value

    async def update_pet_with_form_raw(
        self,
        pet_id: int,
        name: str | None = None,
        status: str | None = None,
    ) -> ApiResult[Pet]:
        require("updatePetWithForm", "pet_id", pet_id)
        return await self._request(
            "updatePetWithForm",
            "POST",
            "/pet/{petId}",
            path_params={"petId": pet_id},
            query={"name": name, "status": status},
            security=(PETSTORE_AUTH,),
            shape=Pet,
        )

    async def update_pet_with_form(
        self,
        pet_id: int,
        name: str | None = None,
        status: str | None = None,
    ) -> Pet:
        return (await self.update_pet_with_form_raw(pet_id, name=name, status=status)).value

    async def delete_pet_raw(self, pet_id: int, api_key: str | None = None) -> ApiResult[None]:
        require("deletePet", "pet_id", pet_id)
        return await self._request(
            "deletePet",
            "DELETE",
            "/pet/{petId}",
            path_params={"petId": pet_id},
            headers={"api_key": api_key},
            security=(PETSTORE_AUTH,),
        )

    async def delete_pet(self, pet_id: int, api_key: str | None = None) -> None:
        await self.delete_pet_raw(pet_id, api_key=api_key)

    async def upload_file_raw(
        self,
        pet_id: int,
        additional_metadata: str | None = None,
        body: bytes | None = None,
    ) -> ApiResult[ApiResponse]:
        require("uploadFile", "pet_id", pet_id)
        if body is not None and not isinstance(body, (bytes, bytearray, memoryview)):
            raise RequestValidationError(
                "uploadFile parameter 'body' must be bytes",
                operation="uploadFile",
                parameter="body",
            )
        return await self._request(
            "uploadFile",
            "POST",
            "/pet/{petId}/uploadImage",
            path_params={"petId": pet_id},
            query={"additionalMetadata": additional_metadata},
            content=bytes(body) if body is not None else None,
            security=(PETSTORE_AUTH,),
            shape=ApiResponse,
        )

    async def upload_file(
        self,
        pet_id: int,
        additional_metadata: str | None = None,
        body: bytes | None = None,
    ) -> ApiResponse:
        """Uploads an image."""
        return (await self.upload_file_raw(pet_id, additional_metadata=additional_metadata, body=body)).value


class StoreApi(BaseApi):
    """Access to Petstore orders."""

    async def get_inventory_raw(self) -> ApiResult[dict[str, int]]:
        return await self._request(
            "getInventory",
            "GET",
            "/store/inventory",
            security=(API_KEY,),
            shape=dict[str, int],
        )

    async def get_inventory(self) -> dict[str, int]:
        """Returns a map of status codes to quantities."""
        return (await self.get_inventory_raw()).value

    async def place_order_raw(self, order: OrderPayload | None = None) -> ApiResult[Order]:
        return await self._request(
            "placeOrder",
            "POST",
            "/store/order",
            json_body=serialize_model("placeOrder", "order", Order, order) if order is not None else None,
            shape=Order,
        )

    async def place_order(self, order: OrderPayload | None = None) -> Order:
        """Place an order for a pet."""
        return (await self.place_order_raw(order)).value

    async def get_order_by_id_raw(self, order_id: int) -> ApiResult[Order]:
        require("getOrderById", "order_id", order_id)
        return await self._request(
            "getOrderById",
            "GET",
            "/store/order/{orderId}",
            path_params={"orderId": order_id},
            shape=Order,
        )

    async def get_order_by_id(self, order_id: int) -> Order:
        """Find purchase order by ID."""
        return (await self.get_order_by_id_raw(order_id)).value

    async def delete_order_raw(self, order_id: int) -> ApiResult[None]:
        require("deleteOrder", "order_id", order_id)
        return await self._request(
            "deleteOrder",
            "DELETE",
            "/store/order/{orderId}",
            path_params={"orderId": order_id},
        )

    async def delete_order(self, order_id: int) -> None:
        await self.delete_order_raw(order_id)


class UserApi(BaseApi):
    """Operations about user."""

    async def create_user_raw(self, user: UserPayload | None = None) -> ApiResult[User]:
        return await self._request(
            "createUser",
            "POST",
            "/user",
            json_body=serialize_model("createUser", "user", User, user) if user is not None else None,
            shape=User,
        )

    async def create_user(self, user: UserPayload | None = None) -> User:
        return (await self.create_user_raw(user)).value

    async def create_users_with_list_input_raw(
        self, users: Sequence[UserPayload] | None = None
    ) -> ApiResult[User]:
        return await self._request(
            "createUsersWithListInput",
            "POST",
            "/user/createWithList",
            json_body=serialize_model_list("createUsersWithListInput", "users", User, users)
            if users is not None
            else None,
            shape=User,
        )

    async def create_users_with_list_input(self, users: Sequence[UserPayload] | None = None) -> User:
        """Creates list of users with given input array."""
        return (await self.create_users_with_list_input_raw(users)).value

    async def login_user_raw(
        self,
        username: str | None = None,
        password: str | None = None,
    ) -> ApiResult[str]:
        return await self._request(
            "loginUser",
            "GET",
            "/user/login",
            query={"username": username, "password": password},
            shape=str,
        )

    async def login_user(self, username: str | None = None, password: str | None = None) -> str:
        """Logs user into the system and returns the session message."""
        return (await self.login_user_raw(username=username, password=password)).value

    async def logout_user_raw(self) -> ApiResult[None]:
        return await self._request("logoutUser", "GET", "/user/logout")

    async def logout_user(self) -> None:
        await self.logout_user_raw()

    async def get_user_by_name_raw(self, username: str) -> ApiResult[User]:
        require("getUserByName", "username", username)
        return await self._request(
            "getUserByName",
            "GET",
            "/user/{username}",
            path_params={"username": username},
            shape=User,
        )

    async def get_user_by_name(self, username: str) -> User:
        return (await self.get_user_by_name_raw(username)).value

    async def update_user_raw(self, username: str, user: UserPayload | None = None) -> ApiResult[None]:
        require("updateUser", "username", username)
        return await self._request(
            "updateUser",
            "PUT",
            "/user/{username}",
            path_params={"username": username},
            json_body=serialize_model("updateUser", "user", User, user) if user is not None else None,
        )

    async def update_user(self, username: str, user: UserPayload | None = None) -> None:
        """Update user. This can only be done by the logged in user."""
        await self.update_user_raw(username, user)

    async def delete_user_raw(self, username: str) -> ApiResult[None]:
        require("deleteUser", "username", username)
        return await self._request(
            "deleteUser",
            "DELETE",
            "/user/{username}",
            path_params={"username": username},
        )

    async def delete_user(self, username: str) -> None:
        await self.delete_user_raw(username)
