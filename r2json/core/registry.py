"""
Serializer registry with class-hierarchy-aware priority resolution.

A registry maps classes to Buckets. Each Bucket pairs a serializer with a
priority level:

- a class that has its own Bucket always uses it;
- a class without one looks through its ancestors and takes the inheritable
  Bucket (level >= 0) with the highest level; on a tie the ancestor found first
  wins, and MAX_LEVEL ends the search at once;
- a Bucket with a negative level is sealed and serves its own class only.

Registering without a level seals the Bucket (SEALED == -1).

Registries are explicit objects owned by the caller and passed to serialize
calls. They are not synchronized; registering while other threads serialize
needs external locking.
"""

import logging
from abc import ABCMeta
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from ..security.exceptions import InvalidArgumentError, RegistrationError, UnsupportedTypeError
from ..utils.reflect import ancestors_of
from .constants import MAX_LEVEL, SEALED
from .interfaces import Serializer, type_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Bucket(Generic[T]):
    """A serializer and its priority level, registered for one class."""

    owner: type[T]
    level: int
    serializer: Callable[[T], str]

    @property
    def sealed(self) -> bool:
        """True when only instances of exactly `owner` may use this bucket."""
        return self.level < 0


def _check_level(level: Any) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidArgumentError(f"level must be an int, got {type(level).__name__}")
    if level > MAX_LEVEL:
        raise InvalidArgumentError(f"level {level} exceeds MAX_LEVEL ({MAX_LEVEL})")
    return level


def _check_class(cls: Any) -> type:
    if not isinstance(cls, type):
        raise InvalidArgumentError(f"expected a class, got {type(cls).__name__}")
    return cls


def _satisfies(cls: type, capability: type) -> bool:
    if not isinstance(capability, ABCMeta):
        return False
    try:
        return issubclass(cls, capability)
    except TypeError:
        # protocols with data members refuse issubclass()
        return False


def _check_serializer(serializer: Any) -> Callable[[Any], str]:
    if not callable(serializer):
        raise InvalidArgumentError("serializer must be callable")
    return serializer


class SerializerRegistry:
    """Maps classes to serializers and resolves the one a value should use."""

    def __init__(self, buckets: Optional[dict[type, Bucket]] = None) -> None:
        self._buckets: dict[type, Bucket] = {}
        self._ancestry: dict[type, tuple[type, ...]] = {}
        if buckets is not None:
            for cls, bucket in buckets.items():
                self._buckets[_check_class(cls)] = Bucket(
                    bucket.owner, bucket.level, bucket.serializer
                )

    # Registration

    def register(
        self, cls: type[T], serializer: Serializer[T], level: int = SEALED
    ) -> None:
        """Insert or replace the bucket for cls."""
        bucket = Bucket(_check_class(cls), _check_level(level), _check_serializer(serializer))
        self._buckets[cls] = bucket
        self._ancestry.clear()
        logger.debug("registered serializer for %s at level %d", type_name(cls), level)

    def update(
        self,
        cls: type,
        *,
        level: Optional[int] = None,
        serializer: Optional[Serializer[Any]] = None,
    ) -> None:
        """Change the level and/or serializer of an existing bucket."""
        if level is None and serializer is None:
            raise InvalidArgumentError("update() needs a level or a serializer")
        bucket = self._require(cls)
        if level is not None:
            bucket.level = _check_level(level)
        if serializer is not None:
            bucket.serializer = _check_serializer(serializer)
        logger.debug("updated serializer for %s (level %d)", type_name(cls), bucket.level)

    def delete(self, cls: type) -> None:
        """Remove the bucket for cls; nothing happens when there is none."""
        if self._buckets.pop(cls, None) is not None:
            self._ancestry.clear()
            logger.debug("deleted serializer for %s", type_name(cls))

    def put_all(self, other: "SerializerRegistry") -> None:
        """Copy every bucket of other into this registry, replacing clashes."""
        for cls, bucket in other._buckets.items():
            self._buckets[cls] = Bucket(bucket.owner, bucket.level, bucket.serializer)
        self._ancestry.clear()

    # Queries

    def query_level(self, cls: type) -> int:
        return self._require(cls).level

    def query_serializer(self, cls: type[T]) -> Callable[[T], str]:
        return self._require(cls).serializer

    def has_class_serializer(self, cls: type) -> bool:
        """True only when cls itself has a bucket."""
        return cls in self._buckets

    def has_customizer(self, cls: type) -> bool:
        """True when cls has a bucket or inherits an unsealed one."""
        if cls in self._buckets:
            return True
        for ancestor in self.ancestors(cls):
            bucket = self._buckets.get(ancestor)
            if bucket is not None and not bucket.sealed:
                return True
        return False

    def class_serializer(self, cls: type[T]) -> Callable[[T], str]:
        """Serializer registered for exactly cls."""
        bucket = self._buckets.get(cls)
        if bucket is None:
            raise UnsupportedTypeError(cls, f"{type_name(cls)} doesn't have its own serializer")
        return bucket.serializer

    def priority_serializer(self, cls: type[T]) -> Callable[[T], str]:
        """Serializer with the highest usable priority among cls's ancestors."""
        max_level = SEALED
        found: Optional[Callable[[Any], str]] = None

        for ancestor in self.ancestors(cls):
            bucket = self._buckets.get(ancestor)
            if bucket is None:
                continue
            if bucket.owner is cls:
                return bucket.serializer
            if bucket.level > max_level:
                max_level = bucket.level
                found = bucket.serializer
                if max_level == MAX_LEVEL:
                    break

        if found is None:
            raise UnsupportedTypeError(cls)
        return found

    def serialize(self, value: Any) -> str:
        """Convert value to JSON text with the serializer resolved for its type."""
        cls = type(value)
        if self.has_class_serializer(cls):
            return self.class_serializer(cls)(value)
        return self.priority_serializer(cls)(value)

    def ancestors(self, cls: type) -> tuple[type, ...]:
        """Search order for cls: its MRO, then registered ABCs it satisfies.

        ABCs that recognise cls only through register() or __subclasshook__
        are absent from the MRO; they follow it in registration order.

        The result is cached until the next register/delete/put_all. Calling
        SomeABC.register(cls) after cls was first looked up is not seen
        until then.
        """
        cached = self._ancestry.get(cls)
        if cached is not None:
            return cached

        mro = ancestors_of(cls)
        capabilities = tuple(
            key for key in self._buckets
            if key not in mro and _satisfies(cls, key)
        )
        ancestry = mro + capabilities
        self._ancestry[cls] = ancestry
        return ancestry

    def _require(self, cls: type) -> Bucket:
        bucket = self._buckets.get(cls)
        if bucket is None:
            raise RegistrationError(cls, f"{type_name(cls)} doesn't have a custom serializer")
        return bucket

    # Container protocol

    def copy(self) -> "SerializerRegistry":
        return SerializerRegistry(self._buckets)

    __copy__ = copy

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, cls: object) -> bool:
        return cls in self._buckets

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SerializerRegistry):
            return NotImplemented
        return self._buckets == other._buckets

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{type_name(cls)}: {bucket.level}" for cls, bucket in self._buckets.items()
        )
        return f"SerializerRegistry({{{entries}}})"
