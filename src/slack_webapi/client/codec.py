"""
JSON encoding of request bodies and typed decoding of responses.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, from_json, to_jsonable_python

from slack_webapi.errors import DecodeError, SerializeError

T = TypeVar("T")


def encode_request_body(payload: Any) -> bytes:
    """Serialize a request payload to strict JSON.

    Accepts pydantic models, dataclasses, mappings and plain JSON values.
    Fields set to None on models are omitted.

    Raises:
        SerializeError: If the payload holds non-finite floats or values
            with no JSON representation
    """
    try:
        data = to_jsonable_python(payload, by_alias=True, exclude_none=True)
        text = json.dumps(data, allow_nan=False, ensure_ascii=False, separators=(",", ":"))
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializeError(
            f"Cannot serialize request body: {e}",
            payload_type=type(payload).__name__,
            cause=e,
        ) from e
    return text.encode("utf-8")


@lru_cache(maxsize=256)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def decode_response_body(
    body: bytes,
    response_type: type[T] | Any = Any,
    *,
    url: str | None = None,
    status_code: int | None = None,
) -> T:
    """Parse a buffered response body into `response_type`.

    Args:
        body: Raw response bytes
        response_type: Any type pydantic can validate (models, dataclasses,
            TypedDicts, dict[str, Any], ...); Any returns plain JSON values
        url: Request URL, for diagnostics
        status_code: Response status, for diagnostics

    Raises:
        DecodeError: If the body is not JSON or does not fit the type
    """
    try:
        adapter = _type_adapter(response_type)
    except TypeError:
        # unhashable type expression
        adapter = TypeAdapter(response_type)

    try:
        # strict JSON: NaN and Infinity literals are rejected
        data = from_json(body, allow_inf_nan=False)
    except ValueError as e:
        raise DecodeError(
            f"Response is not valid JSON: {e}",
            url=url,
            status_code=status_code,
            body=body,
            cause=e,
        ) from e

    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        first = e.errors()[0]
        raise DecodeError(
            f"Cannot decode response: {e.error_count()} error(s), first: {first['msg']}",
            url=url,
            status_code=status_code,
            body=body,
            field_path=".".join(str(part) for part in first["loc"]) or None,
            cause=e,
        ) from e
