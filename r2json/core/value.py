"""
In-memory JSON document model.

JSON values map onto plain Python objects: None, bool, int, Decimal, str,
list, and JSONObject for objects. JSONObject is a mutable string-keyed mapping
that knows how to render itself as compact JSON text.

Contracts:

- clone() is shallow. The clone owns a new top-level mapping, but nested lists
  and objects are the same instances as in the original, so mutating a nested
  container through the clone is visible through the original.
- Iteration order is the natural order of the backing mapping; callers must
  not depend on it.
- There is no internal locking. Concurrent mutation of one instance must be
  synchronized by the caller.
"""

from collections.abc import (
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional, Union

from ..security.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from .registry import SerializerRegistry

JSONValue = Union[None, bool, int, Decimal, str, list, "JSONObject"]


class JSONObject(MutableMapping[str, Any]):
    """Mutable JSON object container."""

    __slots__ = ("_container", "_custom_serializer")

    def __init__(
        self,
        source: Union[Mapping[str, Any], Iterable[tuple[str, Any]]] = (),
        **entries: Any,
    ) -> None:
        if source is None:
            raise InvalidArgumentError("source mapping must not be None")
        self._container: dict[str, Any] = {}
        self._custom_serializer: Optional["SerializerRegistry"] = None
        self.put_all(source)
        self.put_all(entries)

    @staticmethod
    def _check_key(key: Any) -> str:
        if not isinstance(key, str):
            raise InvalidArgumentError(
                f"JSON object keys must be str, got {type(key).__name__}"
            )
        return key

    # Mapping protocol

    def __getitem__(self, key: str) -> Any:
        return self._container[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._container[self._check_key(key)] = value

    def __delitem__(self, key: str) -> None:
        del self._container[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._container)

    def __len__(self) -> int:
        return len(self._container)

    def __contains__(self, key: object) -> bool:
        return key in self._container

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JSONObject):
            return self._container == other._container
        if isinstance(other, Mapping):
            return self._container == dict(other.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JSONObject({self._container!r})"

    def __str__(self) -> str:
        return self.to_json_string()

    def __copy__(self) -> "JSONObject":
        return self.clone()

    # Associative operations

    def get(self, key: str, default: Any = None) -> Any:
        return self._container.get(key, default)

    def put(self, key: str, value: Any) -> Any:
        """Store value under key and return the previous value, or None."""
        previous = self._container.get(self._check_key(key))
        self._container[key] = value
        return previous

    def remove(self, key: str) -> Any:
        """Remove key and return its value, or None when it was absent."""
        return self._container.pop(key, None)

    def contains_key(self, key: str) -> bool:
        return key in self._container

    def contains_value(self, value: Any) -> bool:
        return any(v == value for v in self._container.values())

    def size(self) -> int:
        return len(self._container)

    def is_empty(self) -> bool:
        return not self._container

    def put_all(self, source: Union[Mapping[str, Any], Iterable[tuple[str, Any]]]) -> None:
        """Copy every entry of source into this object; last write wins."""
        if source is None:
            raise InvalidArgumentError("source mapping must not be None")
        items = source.items() if isinstance(source, Mapping) else source
        for key, value in items:
            self[key] = value

    def clear(self) -> None:
        self._container.clear()

    # Live views

    def keys(self) -> KeysView[str]:
        return self._container.keys()

    def values(self) -> ValuesView[Any]:
        return self._container.values()

    def items(self) -> ItemsView[str, Any]:
        return self._container.items()

    key_set = keys
    entry_set = items

    def clone(self) -> "JSONObject":
        """Shallow copy: new top-level mapping, nested containers shared."""
        copied = JSONObject(self._container)
        copied._custom_serializer = self._custom_serializer
        return copied

    copy = clone

    # Custom serialization

    @property
    def custom_serializer(self) -> Optional["SerializerRegistry"]:
        return self._custom_serializer

    @custom_serializer.setter
    def custom_serializer(self, registry: Optional["SerializerRegistry"]) -> None:
        self._custom_serializer = registry

    def add_custom_serializer(self, registry: "SerializerRegistry") -> None:
        """Attach registry, or merge its buckets into the attached one."""
        if self._custom_serializer is None:
            self._custom_serializer = registry
        else:
            self._custom_serializer.put_all(registry)

    def to_json_string(self, registry: Optional["SerializerRegistry"] = None) -> str:
        """Serialize to compact JSON text.

        Passing a registry overrides the attached one for this call. Nested
        objects that carry a registry of their own keep using it.
        """
        from .serializer import JSONSerializer  # pylint: disable=import-outside-toplevel

        if registry is None:
            registry = self._custom_serializer
        return JSONSerializer(registry).serialize_object(self)
