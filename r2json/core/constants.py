"""
Common constants and mappings used across the r2json library.
"""

LBRACE = "{"
RBRACE = "}"
LBRACKET = "["
RBRACKET = "]"
COLON = ":"
COMMA = ","
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
MINUS = "-"

# Insignificant whitespace per RFC 8259
WHITESPACE = frozenset(" \t\n\r")

DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Keyword literal -> parsed value
LITERALS = {
    "true": True,
    "false": False,
    "null": None,
}

NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

# Escape character after a backslash -> decoded character
JSON_ESCAPE_MAP = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Character -> escape emitted on output; other control characters use \u00XX
JSON_OUTPUT_ESCAPE_MAP = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Serializer priority levels
SEALED = -1
MAX_LEVEL = 2**31 - 1

HIGH_SURROGATES = range(0xD800, 0xDC00)
LOW_SURROGATES = range(0xDC00, 0xE000)
