"""Configuration helpers for the petstore client."""

from __future__ import annotations

import dataclasses
import inspect
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit

from .errors import ConfigurationError
from .protocols import AccessTokenProvider, ApiKeyProvider, Middleware, Transport
from .transport import DEFAULT_TIMEOUT_SECONDS, HttpxTransport

DEFAULT_BASE_PATH = "https://petstore3.swagger.io/api/v3"


@dataclass(frozen=True, slots=True)
class Credentials:
    api_key: str | ApiKeyProvider | None = field(default=None, repr=False)
    access_token: str | AccessTokenProvider | None = field(default=None, repr=False)

    async def resolve_api_key(self, name: str) -> str | None:
        if self.api_key is None:
            return None
        if isinstance(self.api_key, str):
            return self.api_key
        value = self.api_key(name)
        if inspect.isawaitable(value):
            value = await value
        return value

    async def resolve_access_token(self, name: str, scopes: Sequence[str]) -> str | None:
        if self.access_token is None:
            return None
        if isinstance(self.access_token, str):
            return self.access_token
        value = self.access_token(name, list(scopes))
        if inspect.isawaitable(value):
            value = await value
        return value


@dataclass(frozen=True, slots=True)
class Configuration:
    """Connection settings shared by every API class.

    Instances are immutable; use ``with_options`` to derive a variant.
    When no transport is given a ``HttpxTransport`` is created here, so
    construction never depends on process-wide state.
    """

    base_path: str = ""  # required; validated in __post_init__
    headers: Mapping[str, str] = field(default_factory=dict)
    credentials: Credentials | None = None
    transport: Transport | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    middleware: tuple[Middleware, ...] = ()
    _owns_transport: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _validate_base_path(self.base_path)

        if isinstance(self.timeout_seconds, bool) or not isinstance(self.timeout_seconds, (int, float)):
            raise ConfigurationError("timeout_seconds must be a number")
        if self.timeout_seconds <= 0:
            raise ConfigurationError("timeout_seconds must be positive")

        headers: dict[str, str] = {}
        for key, value in dict(self.headers or {}).items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigurationError("headers must map str to str")
            headers[key] = value
        object.__setattr__(self, "headers", MappingProxyType(headers))
        object.__setattr__(self, "middleware", tuple(self.middleware))

        if self.credentials is not None and not isinstance(self.credentials, Credentials):
            raise ConfigurationError("credentials must be a Credentials instance")

        if self.transport is None:
            object.__setattr__(self, "transport", HttpxTransport(timeout_seconds=self.timeout_seconds))
            object.__setattr__(self, "_owns_transport", True)
        elif not isinstance(self.transport, Transport):
            raise ConfigurationError("transport must provide an async send(request) method")

    @classmethod
    def from_env(cls, **overrides: Any) -> "Configuration":
        base_path = os.getenv("PETSTORE_BASE_PATH", DEFAULT_BASE_PATH).strip() or DEFAULT_BASE_PATH
        timeout_ms = _parse_positive_int(os.getenv("PETSTORE_TIMEOUT_MS"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS

        credentials: Credentials | None = None
        api_key = _trim_or_none(os.getenv("PETSTORE_API_KEY"))
        access_token = _trim_or_none(os.getenv("PETSTORE_ACCESS_TOKEN"))
        if api_key or access_token:
            credentials = Credentials(api_key=api_key, access_token=access_token)

        options: dict[str, Any] = {
            "base_path": base_path,
            "timeout_seconds": timeout_seconds,
            "credentials": credentials,
        }
        options.update(overrides)
        return cls(**options)

    def with_options(self, **changes: Any) -> "Configuration":
        options = {item.name: getattr(self, item.name) for item in dataclasses.fields(self) if item.init}
        options["headers"] = dict(self.headers)
        if self._owns_transport:
            # A default transport belongs to one Configuration; derive a fresh one.
            options["transport"] = None
        options.update(changes)
        return Configuration(**options)

    async def aclose(self) -> None:
        close = getattr(self.transport, "aclose", None)
        if callable(close):
            await close()

    async def __aenter__(self) -> "Configuration":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def _validate_base_path(value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError("base_path is required")
    if any(char.isspace() for char in value):
        raise ConfigurationError(f"base_path must not contain whitespace: {value!r}")

    try:
        parts = urlsplit(value)
        # Reading the port validates its range.
        parts.port
    except ValueError as error:
        raise ConfigurationError(f"base_path is not a valid URL: {value!r}") from error

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise ConfigurationError(f"base_path must be an absolute http(s) URL: {value!r}")
    if parts.query or parts.fragment:
        raise ConfigurationError(f"base_path must not carry a query or fragment: {value!r}")


def _trim_or_none(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def _parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None
