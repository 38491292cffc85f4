"""
Scanner for r2json - reads single lexemes out of JSON text.

Every method takes the offset to start from and returns a Cursor holding the
decoded value and the offset just past the lexeme. The scanner itself keeps no
position, so one instance can be read from any offset in any order.
"""

from decimal import Decimal
from typing import Any, NamedTuple, NoReturn, Optional

from ..security.exceptions import ErrorReporter, ErrorSuggestionEngine
from ..security.limits import LimitValidator
from .constants import (
    BACKSLASH,
    DIGITS,
    DOUBLE_QUOTE,
    HEX_DIGITS,
    HIGH_SURROGATES,
    JSON_ESCAPE_MAP,
    LITERALS,
    LOW_SURROGATES,
    MINUS,
    WHITESPACE,
)


class Cursor(NamedTuple):
    """A parsed value and the offset just past the text it came from."""

    value: Any
    offset: int


class Scanner:
    """Lexeme reader over an immutable text buffer."""

    def __init__(
        self,
        text: str,
        reporter: Optional[ErrorReporter] = None,
        validator: Optional[LimitValidator] = None,
    ) -> None:
        self.text = text
        self.reporter = reporter or ErrorReporter(text)
        self.validator = validator

    def char_at(self, offset: int) -> str:
        """Character at offset, or "" past the end."""
        if offset >= len(self.text):
            return ""
        return self.text[offset]

    def skip_whitespace(self, offset: int) -> int:
        """Offset of the first non-whitespace character at or after offset."""
        text = self.text
        end = len(text)
        while offset < end and text[offset] in WHITESPACE:
            offset += 1
        return offset

    def scan_string(self, offset: int) -> Cursor:
        """Read a double-quoted string starting at offset."""
        text = self.text
        end = len(text)
        if self.char_at(offset) != DOUBLE_QUOTE:
            self.fail("Expected '\"' to start a string", offset)

        parts: list[str] = []
        chunk_start = i = offset + 1
        while i < end:
            char = text[i]
            if char == DOUBLE_QUOTE:
                parts.append(text[chunk_start:i])
                value = "".join(parts)
                if self.validator:
                    self.validator.validate_string_length(value, f"offset {offset}")
                return Cursor(value, i + 1)
            if char == BACKSLASH:
                parts.append(text[chunk_start:i])
                decoded, i = self._read_escape(i)
                parts.append(decoded)
                chunk_start = i
                continue
            if char < " ":
                self.fail(
                    f"Unescaped control character {char!r} in string",
                    i,
                    ["Control characters must be written as escape sequences"],
                )
            i += 1

        self.fail(
            "Unterminated string",
            offset,
            ErrorSuggestionEngine.suggest_for_unclosed_structure("string"),
        )

    def _read_escape(self, offset: int) -> tuple[str, int]:
        """Decode the escape sequence whose backslash is at offset."""
        escape_char = self.char_at(offset + 1)
        if escape_char in JSON_ESCAPE_MAP:
            return JSON_ESCAPE_MAP[escape_char], offset + 2
        if escape_char == "u":
            return self._read_unicode_escape(offset)
        if escape_char == "":
            self.fail("Unterminated string", offset)
        self.fail(
            f"Invalid escape sequence '\\{escape_char}'",
            offset,
            ["Valid escapes are \\\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX"],
        )

    def _read_unicode_escape(self, offset: int) -> tuple[str, int]:
        """Decode \\uXXXX at offset, combining a surrogate pair when present."""
        code_point = self._read_hex_digits(offset + 2)
        next_offset = offset + 6

        if code_point in LOW_SURROGATES:
            self.fail("Unpaired low surrogate in \\u escape", offset)
        if code_point not in HIGH_SURROGATES:
            return chr(code_point), next_offset

        if self.text.startswith("\\u", next_offset):
            low = self._read_hex_digits(next_offset + 2)
            if low in LOW_SURROGATES:
                combined = 0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00)
                return chr(combined), next_offset + 6
        self.fail("Unpaired high surrogate in \\u escape", offset)

    def _read_hex_digits(self, offset: int) -> int:
        """Read exactly 4 hexadecimal digits."""
        digits = self.text[offset:offset + 4]
        if len(digits) != 4 or any(d not in HEX_DIGITS for d in digits):
            self.fail("Invalid \\u escape: expected 4 hex digits", offset - 2)
        return int(digits, 16)

    def scan_number(self, offset: int) -> Cursor:
        """Read a number: -?(0|[1-9][0-9]*)(.[0-9]+)?([eE][+-]?[0-9]+)?

        Integral lexemes become int; anything with a fraction or exponent
        becomes a Decimal built from the exact lexeme, keeping its scale.
        """
        text = self.text
        i = offset
        if self.char_at(i) == MINUS:
            i += 1

        if self.char_at(i) not in DIGITS:
            self.fail("Malformed number: expected a digit", i)
        if text[i] == "0":
            i += 1
            if self.char_at(i) in DIGITS:
                self.fail("Malformed number: leading zeros are not allowed", offset)
        else:
            i = self._skip_digits(i)

        is_integral = True
        if self.char_at(i) == ".":
            is_integral = False
            i = self._require_digits(i + 1, "Malformed number: expected a digit after '.'")

        if self.char_at(i) in ("e", "E"):
            is_integral = False
            i += 1
            if self.char_at(i) in ("+", "-"):
                i += 1
            i = self._require_digits(i, "Malformed number: expected a digit in the exponent")

        lexeme = text[offset:i]
        if self.validator:
            self.validator.validate_number_length(lexeme, f"offset {offset}")

        if not is_integral:
            return Cursor(Decimal(lexeme), i)
        try:
            return Cursor(int(lexeme), i)
        except ValueError:
            # int(str) stops at sys.get_int_max_str_digits()
            return Cursor(int(Decimal(lexeme)), i)

    def _skip_digits(self, offset: int) -> int:
        text = self.text
        end = len(text)
        while offset < end and text[offset] in DIGITS:
            offset += 1
        return offset

    def _require_digits(self, offset: int, message: str) -> int:
        after = self._skip_digits(offset)
        if after == offset:
            self.fail(message, offset)
        return after

    def scan_literal(self, offset: int) -> Cursor:
        """Read one of the keywords true, false or null."""
        for literal, value in LITERALS.items():
            if self.text.startswith(literal, offset):
                return Cursor(value, offset + len(literal))

        word = self._read_word(offset)
        self.fail(
            f"Unexpected token {word!r}",
            offset,
            ErrorSuggestionEngine.suggest_for_invalid_value(word)
            or ErrorSuggestionEngine.suggest_for_unexpected_token(self.char_at(offset)),
        )

    def _read_word(self, offset: int) -> str:
        end = offset
        while end < len(self.text) and (self.text[end].isalnum() or self.text[end] in "_-"):
            end += 1
        return self.text[offset:end] or self.char_at(offset)

    def fail(
        self, message: str, offset: int, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        """Raise a ParseError located at offset."""
        raise self.reporter.create_parse_error_at(message, offset, suggestions)


def is_number_start(char: str) -> bool:
    """True when char can begin a JSON number."""
    return char != "" and (char == MINUS or char in DIGITS)
