"""HTTP transport for the petstore client."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode, urlsplit

import httpx

from .errors import ClientTimeoutError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True)
class HttpRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(slots=True)
class HttpResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        # Header lookups are case-insensitive.
        self.headers = {key.lower(): value for key, value in self.headers.items()}

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    @property
    def is_json(self) -> bool:
        media_type = self.content_type.split(";", 1)[0].strip().lower()
        return media_type == "application/json" or media_type.endswith("+json")

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.body)


def _encode_scalar(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> str:
    if not params:
        return ""

    encoded: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            # Form style with explode=true: one key per item.
            encoded.extend((key, _encode_scalar(item)) for item in value if item is not None)
            continue
        encoded.append((key, _encode_scalar(value)))

    if not encoded:
        return ""
    return "?" + urlencode(encoded)


def encode_path(template: str, params: Mapping[str, Any] | None = None) -> str:
    path = template
    for key, value in (params or {}).items():
        path = path.replace("{" + key + "}", quote(_encode_scalar(value), safe=""))
    return path


def loggable_url(url: str) -> str:
    """``url`` without its query string, which may carry credentials."""
    return urlsplit(url)._replace(query="", fragment="").geturl()


def parse_error_body(response: HttpResponse) -> Any:
    if not response.body:
        return None

    if not response.is_json:
        return response.text

    try:
        return response.json()
    except ValueError:
        return response.text


class HttpxTransport:
    """Default transport backed by ``httpx.AsyncClient``.

    A caller supplied client is used as-is and left open by ``aclose``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def send(self, request: HttpRequest) -> HttpResponse:
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.TimeoutException as error:
            logger.debug("request timed out: %s %s", request.method, loggable_url(request.url))
            raise ClientTimeoutError(str(error) or "request timed out") from error
        except httpx.HTTPError as error:
            logger.debug("transport failure for %s %s: %s", request.method, loggable_url(request.url), error)
            raise TransportError(str(error) or type(error).__name__) from error

        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
