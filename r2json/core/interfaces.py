"""
Core interfaces and protocols for the serialization system.

These protocols describe the callables and containers that plug into the
serializer registry without having to inherit from anything in r2json.
"""

from typing import TYPE_CHECKING, Any, Optional, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .registry import SerializerRegistry

T_contra = TypeVar("T_contra", contravariant=True)


class Serializer(Protocol[T_contra]):
    """Callable that converts one value into JSON text."""

    def __call__(self, value: T_contra) -> str:
        ...


@runtime_checkable
class CustomizableSerialize(Protocol):
    """Protocol for containers that carry their own serializer registry."""

    @property
    def custom_serializer(self) -> Optional["SerializerRegistry"]:
        """The attached registry, or None."""
        ...

    def add_custom_serializer(self, registry: "SerializerRegistry") -> None:
        """Attach a registry, merging into one already attached."""
        ...


def type_name(target: Any) -> str:
    """Readable name of a class, for messages and reprs."""
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", None) or repr(target)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"
