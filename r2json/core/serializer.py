"""
Serializer engine for r2json - converts Python values into compact JSON text.

Built-in JSON kinds are rendered directly. Anything else is handed to a
SerializerRegistry when one is supplied; there is no reflective fallback.
"""

import math
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Optional

from ..security.exceptions import SerializationError, UnsupportedTypeError
from .constants import (
    COLON,
    COMMA,
    DOUBLE_QUOTE,
    FALSE_LITERAL,
    JSON_OUTPUT_ESCAPE_MAP,
    LBRACE,
    LBRACKET,
    NULL_LITERAL,
    RBRACE,
    RBRACKET,
    TRUE_LITERAL,
)
from .interfaces import CustomizableSerialize
from .registry import SerializerRegistry
from .value import JSONObject


def quote_string(s: str) -> str:
    """Quote and escape a string as a JSON string literal."""
    parts = [DOUBLE_QUOTE]
    for char in s:
        escaped = JSON_OUTPUT_ESCAPE_MAP.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif char < " ":
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    parts.append(DOUBLE_QUOTE)
    return "".join(parts)


def serialize_number(value: Any) -> str:
    """Render an int, float or Decimal as a JSON number without losing digits."""
    if isinstance(value, int):
        try:
            return str(int(value))
        except ValueError:
            # str(int) stops at sys.get_int_max_str_digits()
            return format(Decimal(int(value)), "f")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedTypeError(float, f"Non-finite float {value!r} is not valid JSON")
        return repr(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise UnsupportedTypeError(Decimal, f"Non-finite Decimal {value!r} is not valid JSON")
        return str(value)
    raise UnsupportedTypeError(type(value))


class JSONSerializer:
    """Serializes one value tree; create a new instance per call."""

    def __init__(self, registry: Optional[SerializerRegistry] = None) -> None:
        self.registry = registry
        self._active: set[int] = set()

    def serialize(self, value: Any) -> str:
        """Serialize any supported value to JSON text."""
        if value is None:
            return NULL_LITERAL
        if value is True:
            return TRUE_LITERAL
        if value is False:
            return FALSE_LITERAL
        if isinstance(value, str):
            return quote_string(value)
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return serialize_number(value)
        if isinstance(value, Mapping):
            return self._serialize_nested_object(value)
        if isinstance(value, (list, tuple)):
            return self.serialize_array(value)
        return self._serialize_custom(value)

    def serialize_object(self, obj: Mapping[str, Any]) -> str:
        """Render an object: braces around `"key":value` pairs joined by commas."""
        with self._entering(obj):
            parts = [LBRACE]
            for key, value in obj.items():
                if not isinstance(key, str):
                    raise UnsupportedTypeError(
                        type(key), f"JSON object keys must be str, got {type(key).__name__}"
                    )
                parts.append(quote_string(key))
                parts.append(COLON)
                parts.append(self.serialize(value))
                parts.append(COMMA)

            # Only strip a comma this loop emitted; an empty object has none.
            if len(parts) > 1 and parts[-1] == COMMA:
                parts.pop()

            parts.append(RBRACE)
            return "".join(parts)

    def serialize_array(self, items: Any) -> str:
        """Render a list or tuple as `[a,b,...]`."""
        with self._entering(items):
            return LBRACKET + COMMA.join(self.serialize(item) for item in items) + RBRACKET

    def _serialize_nested_object(self, obj: Mapping[str, Any]) -> str:
        own = obj.custom_serializer if isinstance(obj, CustomizableSerialize) else None
        if own is None or own is self.registry:
            return self.serialize_object(obj)

        outer = self.registry
        self.registry = own
        try:
            return self.serialize_object(obj)
        finally:
            self.registry = outer

    def _serialize_custom(self, value: Any) -> str:
        cls = type(value)
        if self.registry is None or not self.registry.has_customizer(cls):
            raise UnsupportedTypeError(cls)
        text = self.registry.serialize(value)
        if not isinstance(text, str):
            raise SerializationError(
                f"Serializer for {cls.__name__} returned {type(text).__name__}, expected str"
            )
        return text

    @contextmanager
    def _entering(self, container: Any) -> Iterator[None]:
        marker = id(container)
        if marker in self._active:
            raise SerializationError("Circular reference detected")
        self._active.add(marker)
        try:
            yield
        finally:
            self._active.discard(marker)


def serialize(value: Any, registry: Optional[SerializerRegistry] = None) -> str:
    """
    Serialize a value to compact JSON text.

    Args:
        value: None, bool, str, int, float, Decimal, list/tuple, a JSONObject
            or any Mapping with str keys; other types need a registry entry.
        registry: Optional SerializerRegistry consulted for non-JSON types.
            A top-level JSONObject falls back to its attached registry when
            this is None.

    Returns:
        JSON text with no inserted whitespace.

    Raises:
        UnsupportedTypeError: If a value has no JSON mapping and no usable
            registry entry.
        SerializationError: If a container contains itself.
    """
    if isinstance(value, JSONObject):
        return value.to_json_string(registry)
    return JSONSerializer(registry).serialize(value)


to_json_string = serialize
