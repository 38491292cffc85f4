"""
Exception hierarchy and error reporting for r2json.

Every failure raised by the engine derives from R2JSONError, so callers can
catch the whole family at once or pick a specific kind.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


@dataclass
class ErrorContext:
    """Snippet of the source text around an error."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class R2JSONError(Exception):
    """Base exception for r2json errors."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts.append(f" at line {self.position.line}, column {self.position.column}")

        if self.context:
            parts.append("\n\nContext:")
            parts.append(f"\n  {self.context.line_text}")
            parts.append(f"\n  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)


class ParseError(R2JSONError):
    """Text does not match the JSON grammar at the current cursor."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
        offset: Optional[int] = None,
    ):
        self.offset = offset
        super().__init__(message, position, context, suggestions)


class SecurityError(R2JSONError):
    """A configured parse limit was exceeded."""


class SerializationError(R2JSONError):
    """A value could not be turned into JSON text."""


class UnsupportedTypeError(SerializationError, TypeError):
    """No primitive mapping and no usable serializer exists for a type."""

    def __init__(self, target: Any, message: Optional[str] = None):
        self.target = target
        name = getattr(target, "__qualname__", repr(target))
        super().__init__(message or f"Unsupported type for JSON serialization: {name}")


class RegistrationError(R2JSONError, LookupError):
    """A registry operation referenced a type with no registered serializer."""

    def __init__(self, target: Any, message: Optional[str] = None):
        self.target = target
        name = getattr(target, "__qualname__", repr(target))
        super().__init__(message or f"{name} doesn't have a custom serializer")


class InvalidArgumentError(R2JSONError, ValueError):
    """A required argument was missing or of the wrong kind."""


class ErrorReporter:
    """Builds ParseErrors with line, column and context from source offsets."""

    def __init__(
        self,
        text: str,
        max_context: int = 50,
        include_context: bool = True,
        include_position: bool = True,
    ):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context
        self.include_context = include_context
        self.include_position = include_position

    def position_at(self, offset: int) -> Position:
        """Translate a 0-based offset into a line/column position."""
        offset = max(0, min(offset, len(self.text)))
        line = self.text.count("\n", 0, offset) + 1
        line_start = self.text.rfind("\n", 0, offset) + 1
        return Position(line, offset - line_start + 1)

    def get_context(self, position: Position) -> ErrorContext:
        """Extract the context around a position."""
        line_index = min(max(position.line - 1, 0), max(len(self.lines) - 1, 0))
        line_text = self.lines[line_index] if self.lines else ""
        column = min(max(position.column - 1, 0), len(line_text))

        half = self.max_context // 2
        context_before = line_text[max(0, column - half):column]
        context_after = line_text[column:column + half]
        error_char = line_text[column] if column < len(line_text) else ""

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=context_before,
            context_after=context_after,
            error_char=error_char,
            line_text=line_text,
            column_indicator=" " * column + "^",
        )

    def report_error(self, message: str, offset: int) -> None:
        """Record a parse failure in the debug log."""
        position = self.position_at(offset)
        logger.debug(
            "parse failure: %s (line %d, column %d)",
            message, position.line, position.column,
        )

    def create_parse_error(
        self,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
        offset: Optional[int] = None,
    ) -> ParseError:
        """Create a ParseError with context for a line/column position."""
        context = self.get_context(position) if self.include_context else None
        return ParseError(message, position, context, suggestions, offset=offset)

    def create_parse_error_at(
        self, message: str, offset: int, suggestions: Optional[list[str]] = None
    ) -> ParseError:
        """Create a ParseError for a 0-based offset."""
        self.report_error(message, offset)
        if not self.include_position:
            return ParseError(message, suggestions=suggestions, offset=offset)
        return self.create_parse_error(
            message, self.position_at(offset), suggestions, offset=offset
        )


class ErrorSuggestionEngine:
    """Generates hints for common JSON mistakes."""

    @staticmethod
    def suggest_for_unexpected_token(token_value: str) -> list[str]:
        """Suggest fixes for a character that cannot start a value."""
        if token_value == "'":
            return [
                "JSON strings use double quotes",
                "Replace single quotes with double quotes",
            ]
        if token_value.isspace() or token_value == "":
            return ["Input ended before a value was found"]
        if token_value in "}]":
            return [
                "Remove the trailing comma before the closing bracket",
                "Check for a missing value",
            ]
        if token_value.isalpha() or token_value == "_":
            return [
                "Unquoted text is not valid JSON",
                "Wrap string values and object keys in double quotes",
            ]
        return ["Check the JSON syntax near this character"]

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Suggest fixes for an object or array that was never closed."""
        if structure_type == "object":
            return [
                "Add a closing brace '}'",
                "Check for a missing comma between key-value pairs",
            ]
        if structure_type == "array":
            return [
                "Add a closing bracket ']'",
                "Check for a missing comma between array elements",
            ]
        if structure_type == "string":
            return ['Add the closing double quote \'"\'']
        return []

    @staticmethod
    def suggest_for_invalid_value(value: str) -> list[str]:
        """Suggest fixes for keywords with the wrong spelling or case."""
        lowered = value.lower()
        if lowered in ("true", "false", "null") and value != lowered:
            return [f"JSON keywords are lowercase: use '{lowered}'"]
        if lowered == "none":
            return ["Use 'null' instead of 'None'"]
        if lowered in ("nan", "infinity", "-infinity", "undefined"):
            return [f"'{value}' is not a JSON value", "Use null or a finite number"]
        return []
