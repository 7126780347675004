"""Fast, type-safe JSON decoding and encoding."""

from typing import Any
import json

import msgspec
import orjson


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def decode_document(data: bytes | str) -> dict[str, Any]:
    """
    Decode a JSON document whose root must be an object.

    Args:
        data: Raw JSON bytes or text

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If the text is not valid JSON or the root is not an object
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    try:
        result = msgspec.json.decode(data)
    except msgspec.DecodeError as e:
        raise JSONParseError(f"Invalid JSON: {e}", e)

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected JSON object, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode a tool result as JSON text.

    orjson handles the compact and two-space forms; anything it refuses
    (other indents, integers past 64 bits) goes through the stdlib encoder.
    """
    indent = kwargs.get("indent", 0)

    # orjson only knows two-space indentation
    if indent in (0, 2):
        option = orjson.OPT_INDENT_2 if indent == 2 else 0
        try:
            return orjson.dumps(obj, option=option).decode("utf-8")
        except (TypeError, ValueError):
            pass

    return json.dumps(obj, indent=indent if indent > 0 else None, ensure_ascii=False)
