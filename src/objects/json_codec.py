"""JSON serialization helpers.

to_json mirrors a compact platform serializer: no whitespace, keys in
insertion order. from_json parses text and populates an instance of the
requested class.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel

from src.core.errors import ParseError

T = TypeVar("T")


def to_json(value: Any, *, indent: int | None = None) -> str:
    """Serialize a value (or a pydantic model) to a JSON string.

    Args:
        value: Any JSON-compatible value, or a pydantic model instance.
        indent: Pretty-print with this indent. None gives compact output.

    Returns:
        JSON text. Non-ASCII characters are kept as-is.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    if indent is None:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(value, indent=indent, ensure_ascii=False)


def from_json(schema: type[T], text: str) -> T:
    """Parse JSON text into an instance of ``schema``.

    pydantic models are validated with ``model_validate``. Any other class
    gets a bare instance (``__init__`` is not called) with every parsed field
    copied onto it.

    Raises:
        ParseError: If text is not valid JSON, or is not a JSON object when a
            plain class is requested.
        pydantic.ValidationError: If the data does not fit a pydantic schema.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse JSON: {e.msg}"
        raise ParseError(msg, line=e.lineno, column=e.colno) from e

    if issubclass(schema, BaseModel):
        return schema.model_validate(data)  # type: ignore[return-value]

    if not isinstance(data, dict):
        msg = f"Expected a JSON object for {schema.__name__}, got {type(data).__name__}"
        raise ParseError(msg)

    if issubclass(schema, dict):
        return schema(data)  # type: ignore[return-value]

    instance = schema.__new__(schema)
    for key, field_value in data.items():
        object.__setattr__(instance, key, field_value)
    return instance
