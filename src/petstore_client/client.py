"""Shared request pipeline for petstore API classes."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .config import Configuration
from .decoding import decode_response
from .errors import PetstoreError, RequestDetails, RequiredError, TransportError, classify_status_error
from .hooks import HookRegistry, RequestContext
from .protocols import Middleware
from .transport import HttpRequest, HttpResponse, encode_path, encode_query, loggable_url, parse_error_body

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ApiKeyAuth:
    name: str
    header: str


@dataclass(frozen=True, slots=True)
class OAuth2Auth:
    name: str
    scopes: tuple[str, ...] = ()


SecurityScheme = ApiKeyAuth | OAuth2Auth


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Decoded value together with the response it came from."""

    raw: HttpResponse
    value: T

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> dict[str, str]:
        return self.raw.headers


def require(operation: str, parameter: str, value: Any) -> None:
    if value is None:
        raise RequiredError(operation=operation, parameter=parameter)


class BaseApi:
    """Base class for resource-scoped API classes.

    Holds nothing but the shared ``Configuration`` and the middleware
    pipeline derived from it.
    """

    def __init__(self, configuration: Configuration) -> None:
        if not isinstance(configuration, Configuration):
            raise TypeError(f"{type(self).__name__} requires a Configuration, got {type(configuration).__name__}")
        self._configuration = configuration
        self._hooks = HookRegistry(configuration.middleware)

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def with_middleware(self, *middleware: Middleware) -> "BaseApi":
        configuration = self._configuration.with_options(
            middleware=(*self._configuration.middleware, *middleware),
        )
        return type(self)(configuration)

    async def _auth_headers(self, security: Sequence[SecurityScheme]) -> dict[str, str]:
        credentials = self._configuration.credentials
        if credentials is None:
            return {}

        headers: dict[str, str] = {}
        for scheme in security:
            if isinstance(scheme, ApiKeyAuth):
                api_key = await credentials.resolve_api_key(scheme.name)
                if api_key:
                    headers[scheme.header] = api_key
            elif isinstance(scheme, OAuth2Auth):
                token = await credentials.resolve_access_token(scheme.name, scheme.scopes)
                if token:
                    headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _build_request(
        self,
        method: str,
        path: str,
        *,
        path_params: Mapping[str, Any] | None,
        query: Mapping[str, Any] | None,
        headers: Mapping[str, Any] | None,
        json_body: Any | None,
        content: bytes | None,
        security: Sequence[SecurityScheme],
        accept: str | None,
    ) -> HttpRequest:
        url = self._configuration.base_path + encode_path(path, path_params) + encode_query(query)

        request_headers = dict(self._configuration.headers)
        request_headers.update(await self._auth_headers(security))

        body: bytes | None = None
        if json_body is not None:
            body = json.dumps(json_body, separators=(",", ":")).encode("utf-8")
            request_headers["Content-Type"] = "application/json"
        elif content is not None:
            body = content
            request_headers["Content-Type"] = "application/octet-stream"

        if accept is not None:
            request_headers["Accept"] = accept

        for key, value in (headers or {}).items():
            if value is not None:
                request_headers[key] = str(value)

        return HttpRequest(method=method.upper(), url=url, headers=request_headers, body=body)

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
        content: bytes | None = None,
        security: Sequence[SecurityScheme] = (),
        shape: Any = None,
    ) -> ApiResult[Any]:
        request = await self._build_request(
            method,
            path,
            path_params=path_params,
            query=query,
            headers=headers,
            json_body=json_body,
            content=content,
            security=security,
            accept="application/json" if shape is not None else None,
        )
        context = RequestContext(operation=operation, request=request)
        request = await self._hooks.run_before(context)

        logger.debug("%s: %s %s", operation, request.method, loggable_url(request.url))
        try:
            response = await self._configuration.transport.send(request)
        except PetstoreError as error:
            await self._hooks.run_error(context, error)
            raise
        except Exception as error:
            wrapped = TransportError(f"{operation}: {error}")
            await self._hooks.run_error(context, wrapped)
            raise wrapped from error

        if not isinstance(response, HttpResponse):
            error = TransportError(f"{operation}: transport returned {type(response).__name__}, expected HttpResponse")
            await self._hooks.run_error(context, error)
            raise error

        response = await self._hooks.run_after(context, response)
        logger.debug("%s: status %s", operation, response.status_code)

        if not response.ok:
            raise classify_status_error(
                RequestDetails(
                    operation=operation,
                    method=request.method,
                    url=request.url,
                    status_code=response.status_code,
                    response_body=parse_error_body(response),
                    raw_body=response.body,
                )
            )

        return ApiResult(raw=response, value=decode_response(operation, response, shape))
