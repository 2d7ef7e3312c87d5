"""Middleware pipeline run around each petstore request."""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .protocols import Middleware
from .transport import HttpRequest, HttpResponse


@dataclass(slots=True)
class RequestContext:
    operation: str
    request: HttpRequest


class HookRegistry:
    """Ordered, immutable view over configured middleware."""

    def __init__(self, middleware: Iterable[Middleware] = ()) -> None:
        self._middleware: tuple[Middleware, ...] = tuple(middleware)
        for item in self._middleware:
            if not any(callable(getattr(item, name, None)) for name in ("before", "after", "on_error")):
                raise TypeError("middleware must provide at least one of before(), after(), on_error()")

    def __len__(self) -> int:
        return len(self._middleware)

    async def run_before(self, context: RequestContext) -> HttpRequest:
        for item in self._middleware:
            hook = getattr(item, "before", None)
            if hook is None:
                continue
            replacement = await _resolve(hook(context))
            if replacement is not None:
                if not isinstance(replacement, HttpRequest):
                    raise TypeError("before() must return an HttpRequest or None")
                context.request = replacement
        return context.request

    async def run_after(self, context: RequestContext, response: HttpResponse) -> HttpResponse:
        for item in self._middleware:
            hook = getattr(item, "after", None)
            if hook is None:
                continue
            replacement = await _resolve(hook(context, response))
            if replacement is not None:
                if not isinstance(replacement, HttpResponse):
                    raise TypeError("after() must return an HttpResponse or None")
                response = replacement
        return response

    async def run_error(self, context: RequestContext, error: Exception) -> None:
        for item in self._middleware:
            hook = getattr(item, "on_error", None)
            if hook is None:
                continue
            await _resolve(hook(context, error))


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result
