"""
r2json - a small JSON engine with pluggable, hierarchy-aware serialization.

r2json parses JSON text into a mutable document model and writes it back as
compact JSON text. Values of types that JSON does not know about are converted
by serializers registered per class, so you can teach it about types you do
not own without touching them.

Key Features:
- Strict RFC 8259 parser with line/column error reporting
- Offset-threaded parsing: every step returns (value, next offset)
- Lossless numbers: integers stay int, decimals keep their digits ("1.10")
- JSONObject, a mutable mapping that renders itself as compact JSON
- SerializerRegistry: per-class serializers, inherited by subclasses by priority
- Configurable limits on input size, nesting depth and collection sizes

Quick Start:
    import r2json

    doc = r2json.parse_object('{"price": 1.10, "tags": ["a", "b"]}')
    doc.put("count", 3)
    text = doc.to_json_string()

    # Serializers for your own types
    from datetime import date

    registry = r2json.SerializerRegistry()
    registry.register(date, lambda d: r2json.quote_string(d.isoformat()), level=0)
    r2json.serialize({"day": date(2024, 1, 31)}, registry)  # '{"day":"2024-01-31"}'

    # Result values instead of exceptions
    result = r2json.try_parse_object("{}garbage")
    if not result.ok:
        print(result.error)
"""

from .core.constants import MAX_LEVEL, SEALED
from .core.parser import Parser, ensure_consumed, parse, parse_object, parse_value
from .core.registry import Bucket, SerializerRegistry
from .core.result import Result, try_parse, try_parse_object, try_serialize
from .core.scanner import Cursor
from .core.serializer import quote_string, serialize, to_json_string
from .core.value import JSONObject
from .security.exceptions import (
    InvalidArgumentError,
    ParseError,
    R2JSONError,
    RegistrationError,
    SecurityError,
    SerializationError,
    UnsupportedTypeError,
)
from .utils.config import ErrorReporting, ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "r2json contributors"

__all__ = [
    # Document model
    "JSONObject",
    # Parsing
    "parse", "parse_object", "parse_value", "ensure_consumed", "Parser", "Cursor",
    # Serialization
    "serialize", "to_json_string", "quote_string",
    "SerializerRegistry", "Bucket", "SEALED", "MAX_LEVEL",
    # Result boundary
    "Result", "try_parse", "try_parse_object", "try_serialize",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ErrorReporting",
    # Exception classes
    "R2JSONError", "ParseError", "SecurityError", "SerializationError",
    "UnsupportedTypeError", "RegistrationError", "InvalidArgumentError",
]
