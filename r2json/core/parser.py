"""
Parser for r2json - recursive descent from JSON text to the document model.

Each step receives an offset and returns a Cursor (value, next offset); no
parse position is stored anywhere. A Parser instance is created per parse
call and discarded afterwards, so distinct texts can be parsed from several
threads at once without coordination.
"""

from typing import Any, Callable, NoReturn, Optional, TypeVar, Union

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    InvalidArgumentError,
    ParseError,
    SecurityError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .constants import (
    COLON,
    COMMA,
    DOUBLE_QUOTE,
    LBRACE,
    LBRACKET,
    RBRACE,
    RBRACKET,
)
from .scanner import Cursor, Scanner, is_number_start
from .value import JSONObject

T = TypeVar("T")


class Parser:
    """Recursive-descent JSON parser over one immutable text."""

    def __init__(
        self,
        text: Union[str, bytes, bytearray],
        config: Optional[ParseConfig] = None,
    ) -> None:
        if text is None:
            raise InvalidArgumentError("text must not be None")
        if isinstance(text, (bytes, bytearray)):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseError(
                    f"Input is not valid UTF-8: {exc.reason}",
                    suggestions=["Encode the document as UTF-8"],
                    offset=exc.start,
                ) from exc
        if not isinstance(text, str):
            raise InvalidArgumentError(f"text must be str, got {type(text).__name__}")

        self.text = text
        self.config = config or ParseConfig()
        assert self.config.limits is not None
        self.validator = LimitValidator(self.config.limits)
        self.validator.validate_input_size(text)
        self.reporter = ErrorReporter(
            text,
            max_context=self.config.max_error_context,
            include_context=self.config.include_context,
            include_position=self.config.include_position,
        )
        self.scanner = Scanner(text, self.reporter, self.validator)

    def parse_value(self, offset: int = 0) -> Cursor:
        """Parse any JSON value starting at the first non-whitespace character."""
        self._check_offset(offset)
        offset = self.scanner.skip_whitespace(offset)
        char = self.scanner.char_at(offset)

        if char == LBRACE:
            return self.parse_object(offset)
        if char == LBRACKET:
            return self.parse_array(offset)
        if char == DOUBLE_QUOTE:
            return self.parse_string(offset)
        if is_number_start(char):
            return self.parse_number(offset)
        if char == "":
            self._fail(
                "Unexpected end of input, expected a value",
                offset,
                ErrorSuggestionEngine.suggest_for_unexpected_token(char),
            )
        return self.parse_literal(offset)

    def parse_object(self, offset: int = 0) -> Cursor:
        """Parse a JSON object into a JSONObject."""
        self._check_offset(offset)
        scanner = self.scanner
        offset = scanner.skip_whitespace(offset)
        if scanner.char_at(offset) != LBRACE:
            self._fail("Expected '{'", offset)

        self.validator.enter_structure()
        obj = JSONObject()
        offset = scanner.skip_whitespace(offset + 1)

        if scanner.char_at(offset) == RBRACE:
            self.validator.exit_structure()
            return Cursor(obj, offset + 1)

        while True:
            if scanner.char_at(offset) != DOUBLE_QUOTE:
                self._fail_object_key(offset)
            key, offset = scanner.scan_string(offset)

            offset = scanner.skip_whitespace(offset)
            if scanner.char_at(offset) != COLON:
                self._fail(
                    "Expected ':' after key",
                    offset,
                    ["Object keys must be followed by a colon"],
                )

            value, offset = self.parse_value(offset + 1)
            obj.put(key, value)
            self.validator.validate_object_keys(len(obj))

            offset = scanner.skip_whitespace(offset)
            char = scanner.char_at(offset)
            if char == COMMA:
                offset = scanner.skip_whitespace(offset + 1)
                continue
            if char == RBRACE:
                self.validator.exit_structure()
                return Cursor(obj, offset + 1)
            if char == "":
                self._fail(
                    "Unexpected end of input, expected '}' to close object",
                    offset,
                    ErrorSuggestionEngine.suggest_for_unclosed_structure("object"),
                )
            self._fail(
                "Expected ',' or '}' after object value",
                offset,
                ErrorSuggestionEngine.suggest_for_unclosed_structure("object"),
            )

    def _fail_object_key(self, offset: int) -> NoReturn:
        char = self.scanner.char_at(offset)
        if char == RBRACE:
            self._fail(
                "Trailing comma before '}'",
                offset,
                ["Remove the comma after the last key-value pair"],
            )
        if char == "":
            self._fail(
                "Unexpected end of input, expected '}' to close object",
                offset,
                ErrorSuggestionEngine.suggest_for_unclosed_structure("object"),
            )
        self._fail(
            "Expected object key",
            offset,
            [
                "Object keys must be strings in double quotes",
                "Use quotes around keys with special characters",
            ],
        )

    def parse_array(self, offset: int = 0) -> Cursor:
        """Parse a JSON array into a list."""
        self._check_offset(offset)
        scanner = self.scanner
        offset = scanner.skip_whitespace(offset)
        if scanner.char_at(offset) != LBRACKET:
            self._fail("Expected '['", offset)

        self.validator.enter_structure()
        items: list[Any] = []
        offset = scanner.skip_whitespace(offset + 1)

        if scanner.char_at(offset) == RBRACKET:
            self.validator.exit_structure()
            return Cursor(items, offset + 1)

        while True:
            if scanner.char_at(offset) == RBRACKET:
                self._fail(
                    "Trailing comma before ']'",
                    offset,
                    ["Remove the comma after the last array element"],
                )
            value, offset = self.parse_value(offset)
            items.append(value)
            self.validator.validate_array_items(len(items))

            offset = scanner.skip_whitespace(offset)
            char = scanner.char_at(offset)
            if char == COMMA:
                offset = scanner.skip_whitespace(offset + 1)
                continue
            if char == RBRACKET:
                self.validator.exit_structure()
                return Cursor(items, offset + 1)
            if char == "":
                self._fail(
                    "Unexpected end of input, expected ']' to close array",
                    offset,
                    ErrorSuggestionEngine.suggest_for_unclosed_structure("array"),
                )
            self._fail(
                "Expected ',' or ']' after array element",
                offset,
                ErrorSuggestionEngine.suggest_for_unclosed_structure("array"),
            )

    def parse_string(self, offset: int = 0) -> Cursor:
        """Parse a quoted string, resolving escape sequences."""
        self._check_offset(offset)
        return self.scanner.scan_string(self.scanner.skip_whitespace(offset))

    def parse_number(self, offset: int = 0) -> Cursor:
        """Parse a number into an int or a Decimal."""
        self._check_offset(offset)
        return self.scanner.scan_number(self.scanner.skip_whitespace(offset))

    def parse_literal(self, offset: int = 0) -> Cursor:
        """Parse true, false or null."""
        self._check_offset(offset)
        return self.scanner.scan_literal(self.scanner.skip_whitespace(offset))

    def ensure_consumed(self, offset: int, message: str) -> None:
        """Fail unless only whitespace remains after offset."""
        rest = self.scanner.skip_whitespace(offset)
        if rest < len(self.text):
            self._fail(
                message,
                rest,
                ["Remove the content after the end of the JSON document"],
            )

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset <= len(self.text):
            raise InvalidArgumentError(
                f"offset {offset} is outside the text (length {len(self.text)})"
            )

    def _fail(
        self, message: str, offset: int, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        self.scanner.fail(message, offset, suggestions)


def _guard_recursion(step: Callable[[], T]) -> T:
    try:
        return step()
    except RecursionError as exc:
        raise SecurityError(
            "Nesting depth exceeds the interpreter's recursion limit"
        ) from exc


def parse_value(
    text: Union[str, bytes, bytearray],
    offset: int = 0,
    config: Optional[ParseConfig] = None,
) -> Cursor:
    """
    Parse one JSON value starting at offset.

    Args:
        text: JSON text (bytes are decoded as UTF-8; a ParseError for
            undecodable bytes carries the byte offset)
        offset: Where to start; leading whitespace is skipped
        config: Optional ParseConfig for limits and error reporting

    Returns:
        Cursor of the parsed value and the offset just past it. Content after
        that offset is not examined.

    Raises:
        ParseError: If the text does not match the JSON grammar
        SecurityError: If a configured limit is exceeded
    """
    parser = Parser(text, config)
    return _guard_recursion(lambda: parser.parse_value(offset))


def parse(text: Union[str, bytes, bytearray], config: Optional[ParseConfig] = None) -> Any:
    """Parse a whole JSON document of any kind; trailing content is an error."""
    parser = Parser(text, config)
    value, offset = _guard_recursion(lambda: parser.parse_value(0))
    parser.ensure_consumed(offset, "String cannot be fully parsed as a JSON document")
    return value


def parse_object(
    text: Union[str, bytes, bytearray], config: Optional[ParseConfig] = None
) -> JSONObject:
    """
    Parse a whole document that must be a JSON object.

    Leading and trailing whitespace is ignored; any other content after the
    closing brace fails, so '{}garbage' is rejected.
    """
    parser = Parser(text, config)
    obj, offset = _guard_recursion(lambda: parser.parse_object(0))
    parser.ensure_consumed(offset, "String cannot be fully parsed as a JSON object")
    return obj


def ensure_consumed(text: str, offset: int, message: str) -> None:
    """Raise ParseError unless text holds only whitespace from offset on."""
    scanner = Scanner(text)
    rest = scanner.skip_whitespace(offset)
    if rest < len(text):
        scanner.fail(message, rest, ["Remove the content after the end of the JSON document"])
