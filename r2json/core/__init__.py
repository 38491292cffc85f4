"""
r2json Core Engine.

This module provides the document model, the parser, the serializer engine
and the serializer registry.
"""

from .constants import MAX_LEVEL, SEALED
from .parser import Parser, ensure_consumed, parse, parse_object, parse_value
from .registry import Bucket, SerializerRegistry
from .result import Result, try_parse, try_parse_object, try_serialize
from .scanner import Cursor, Scanner
from .serializer import JSONSerializer, quote_string, serialize, to_json_string
from .value import JSONObject, JSONValue

__all__ = [
    'JSONObject', 'JSONValue',
    'Parser', 'Scanner', 'Cursor',
    'parse', 'parse_object', 'parse_value', 'ensure_consumed',
    'JSONSerializer', 'serialize', 'to_json_string', 'quote_string',
    'SerializerRegistry', 'Bucket', 'SEALED', 'MAX_LEVEL',
    'Result', 'try_parse', 'try_parse_object', 'try_serialize',
]
