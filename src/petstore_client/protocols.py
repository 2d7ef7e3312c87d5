"""Protocol contracts for petstore client extension points."""

from __future__ import annotations

from collections.abc import Awaitable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .hooks import RequestContext
    from .transport import HttpRequest, HttpResponse


@runtime_checkable
class Transport(Protocol):
    async def send(self, request: HttpRequest) -> HttpResponse: ...


@runtime_checkable
class ApiKeyProvider(Protocol):
    def __call__(self, name: str) -> str | Awaitable[str]: ...


@runtime_checkable
class AccessTokenProvider(Protocol):
    def __call__(self, name: str, scopes: Sequence[str]) -> str | Awaitable[str]: ...


@runtime_checkable
class Middleware(Protocol):
    """Any subset of these hooks may be implemented, sync or async."""

    def before(self, context: RequestContext) -> HttpRequest | None | Awaitable[HttpRequest | None]: ...

    def after(
        self, context: RequestContext, response: HttpResponse
    ) -> HttpResponse | None | Awaitable[HttpResponse | None]: ...

    def on_error(self, context: RequestContext, error: Exception) -> None | Awaitable[None]: ...
