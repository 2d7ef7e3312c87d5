"""Python client SDK for the Swagger Petstore v3 service.

This module uses lazy exports so lightweight pieces (for example enums and
errors) can be imported without immediately importing transport dependencies.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "AccessTokenProvider",
    "ApiKeyProvider",
    "ApiResponse",
    "ApiResult",
    "AuthError",
    "BadRequestError",
    "BaseApi",
    "Category",
    "ClientTimeoutError",
    "Configuration",
    "ConfigurationError",
    "ConflictError",
    "Credentials",
    "DecodeError",
    "FindPetsByStatusStatusEnum",
    "HttpRequest",
    "HttpResponse",
    "HttpStatusError",
    "HttpxTransport",
    "InvalidEnumValueError",
    "Middleware",
    "NotFoundError",
    "Order",
    "OrderStatusEnum",
    "Pet",
    "PetApi",
    "PetStatusEnum",
    "PetstoreError",
    "RequestContext",
    "RequestValidationError",
    "RequiredError",
    "ServerError",
    "StoreApi",
    "Tag",
    "Transport",
    "TransportError",
    "User",
    "UserApi",
    "WireEnum",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "PetApi": (".api", "PetApi"),
    "StoreApi": (".api", "StoreApi"),
    "UserApi": (".api", "UserApi"),
    "ApiResult": (".client", "ApiResult"),
    "BaseApi": (".client", "BaseApi"),
    "Configuration": (".config", "Configuration"),
    "Credentials": (".config", "Credentials"),
    "FindPetsByStatusStatusEnum": (".enums", "FindPetsByStatusStatusEnum"),
    "OrderStatusEnum": (".enums", "OrderStatusEnum"),
    "PetStatusEnum": (".enums", "PetStatusEnum"),
    "WireEnum": (".enums", "WireEnum"),
    "AuthError": (".errors", "AuthError"),
    "BadRequestError": (".errors", "BadRequestError"),
    "ClientTimeoutError": (".errors", "ClientTimeoutError"),
    "ConfigurationError": (".errors", "ConfigurationError"),
    "ConflictError": (".errors", "ConflictError"),
    "DecodeError": (".errors", "DecodeError"),
    "HttpStatusError": (".errors", "HttpStatusError"),
    "InvalidEnumValueError": (".errors", "InvalidEnumValueError"),
    "NotFoundError": (".errors", "NotFoundError"),
    "PetstoreError": (".errors", "PetstoreError"),
    "RequestValidationError": (".errors", "RequestValidationError"),
    "RequiredError": (".errors", "RequiredError"),
    "ServerError": (".errors", "ServerError"),
    "TransportError": (".errors", "TransportError"),
    "RequestContext": (".hooks", "RequestContext"),
    "ApiResponse": (".models", "ApiResponse"),
    "Category": (".models", "Category"),
    "Order": (".models", "Order"),
    "Pet": (".models", "Pet"),
    "Tag": (".models", "Tag"),
    "User": (".models", "User"),
    "AccessTokenProvider": (".protocols", "AccessTokenProvider"),
    "ApiKeyProvider": (".protocols", "ApiKeyProvider"),
    "Middleware": (".protocols", "Middleware"),
    "Transport": (".protocols", "Transport"),
    "HttpRequest": (".transport", "HttpRequest"),
    "HttpResponse": (".transport", "HttpResponse"),
    "HttpxTransport": (".transport", "HttpxTransport"),
}

if TYPE_CHECKING:
    from .api import PetApi, StoreApi, UserApi
    from .client import ApiResult, BaseApi
    from .config import Configuration, Credentials
    from .enums import FindPetsByStatusStatusEnum, OrderStatusEnum, PetStatusEnum, WireEnum
    from .errors import (
        AuthError,
        BadRequestError,
        ClientTimeoutError,
        ConfigurationError,
        ConflictError,
        DecodeError,
        HttpStatusError,
        InvalidEnumValueError,
        NotFoundError,
        PetstoreError,
        RequestValidationError,
        RequiredError,
        ServerError,
        TransportError,
    )
    from .hooks import RequestContext
    from .models import ApiResponse, Category, Order, Pet, Tag, User
    from .protocols import AccessTokenProvider, ApiKeyProvider, Middleware, Transport
    from .transport import HttpRequest, HttpResponse, HttpxTransport


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
