"""Typed decoding of petstore responses and validation of request bodies."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, get_args, get_origin

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError, RequestValidationError
from .models import PetstoreModel
from .transport import HttpResponse

_adapter_cache: dict[Any, TypeAdapter[Any]] = {}
_MAX_SAMPLE_DEPTH = 2
_MAX_SAMPLE_ITEMS = 5
_MAX_SAMPLE_STRING = 200


def shape_name(shape: Any) -> str:
    origin = get_origin(shape)
    if origin is not None:
        args = ", ".join(shape_name(arg) for arg in get_args(shape))
        return f"{shape_name(origin)}[{args}]"
    return getattr(shape, "__name__", None) or repr(shape)


def _adapter_for(shape: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapter_cache.get(shape)
    except TypeError:
        return TypeAdapter(shape)

    if adapter is None:
        adapter = TypeAdapter(shape)
        _adapter_cache[shape] = adapter
    return adapter


def sample_payload(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_SAMPLE_DEPTH:
        return "<trimmed>"

    if isinstance(value, dict):
        sampled: dict[str, Any] = {}
        for index, (key, nested) in enumerate(value.items()):
            if index >= _MAX_SAMPLE_ITEMS:
                sampled["..."] = "<trimmed>"
                break
            sampled[str(key)] = sample_payload(nested, depth + 1)
        return sampled

    if isinstance(value, list):
        sampled_items = [sample_payload(item, depth + 1) for item in value[:_MAX_SAMPLE_ITEMS]]
        if len(value) > _MAX_SAMPLE_ITEMS:
            sampled_items.append("<trimmed>")
        return sampled_items

    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")

    if isinstance(value, str):
        return value if len(value) <= _MAX_SAMPLE_STRING else f"{value[:_MAX_SAMPLE_STRING]}..."

    if isinstance(value, (int, float, bool)) or value is None:
        return value

    return repr(value)


def decode_response(operation: str, response: HttpResponse, shape: Any) -> Any:
    """Decode ``response`` into ``shape``; ``None`` means the body is ignored."""
    if shape is None:
        return None

    if shape is str and not response.is_json:
        return response.text

    try:
        payload = response.json()
    except ValueError as error:
        raise DecodeError(
            operation=operation,
            expected=shape_name(shape),
            errors=[{"type": "json_invalid", "msg": str(error)}],
            status_code=response.status_code,
            raw_sample=sample_payload(response.body),
        ) from error

    try:
        return _adapter_for(shape).validate_python(payload)
    except ValidationError as error:
        raise DecodeError(
            operation=operation,
            expected=shape_name(shape),
            errors=error.errors(),
            status_code=response.status_code,
            raw_sample=sample_payload(payload),
        ) from error


def serialize_model(
    operation: str,
    parameter: str,
    model_type: type[PetstoreModel],
    value: PetstoreModel | Mapping[str, Any],
) -> dict[str, Any]:
    if isinstance(value, model_type):
        parsed = value
    elif isinstance(value, Mapping):
        try:
            parsed = model_type.model_validate(dict(value))
        except ValidationError as error:
            raise RequestValidationError(
                f"{operation} parameter {parameter!r} is not a valid {model_type.__name__}",
                operation=operation,
                parameter=parameter,
                errors=error.errors(),
            ) from error
    else:
        raise RequestValidationError(
            f"{operation} parameter {parameter!r} must be a {model_type.__name__} or mapping",
            operation=operation,
            parameter=parameter,
        )
    return parsed.to_wire()


def serialize_model_list(
    operation: str,
    parameter: str,
    model_type: type[PetstoreModel],
    values: Sequence[PetstoreModel | Mapping[str, Any]],
) -> list[dict[str, Any]]:
    if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Sequence):
        raise RequestValidationError(
            f"{operation} parameter {parameter!r} must be a sequence of {model_type.__name__}",
            operation=operation,
            parameter=parameter,
        )
    return [serialize_model(operation, f"{parameter}[{index}]", model_type, item) for index, item in enumerate(values)]
