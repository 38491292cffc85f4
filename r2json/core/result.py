"""
Result-returning entry points.

These wrap parse and serialize calls for callers that prefer to branch on a
success/failure value instead of catching exceptions. Only r2json errors are
captured; anything else still propagates.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ..security.exceptions import R2JSONError
from ..utils.config import ParseConfig
from .parser import parse, parse_object
from .registry import SerializerRegistry
from .serializer import serialize
from .value import JSONObject

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: a value on success, an error on failure."""

    value: Optional[T] = None
    error: Optional[R2JSONError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        """Class name of the captured error, e.g. 'ParseError'."""
        return type(self.error).__name__ if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]


def _capture(operation: str, call: Callable[[], T]) -> Result[T]:
    try:
        return Result(value=call())
    except R2JSONError as exc:
        logger.debug("%s failed: %s", operation, exc.message)
        return Result(error=exc)


def try_parse(
    text: Union[str, bytes, bytearray], config: Optional[ParseConfig] = None
) -> Result[Any]:
    """parse() that returns a Result instead of raising."""
    return _capture("parse", lambda: parse(text, config))


def try_parse_object(
    text: Union[str, bytes, bytearray], config: Optional[ParseConfig] = None
) -> Result[JSONObject]:
    """parse_object() that returns a Result instead of raising."""
    return _capture("parse_object", lambda: parse_object(text, config))


def try_serialize(value: Any, registry: Optional[SerializerRegistry] = None) -> Result[str]:
    """serialize() that returns a Result instead of raising."""
    return _capture("serialize", lambda: serialize(value, registry))
