"""
Type introspection helpers.

ancestors_of() feeds the serializer registry's priority scan; the field
helpers are for debugging and utility code around the engine.
"""

import inspect
from functools import lru_cache
from typing import Any


@lru_cache(maxsize=1024)
def ancestors_of(cls: type) -> tuple[type, ...]:
    """Return the class itself followed by every ancestor, each exactly once.

    The order is the method resolution order, which always starts with the
    class and lists a base before any class it inherits from.
    """
    if not isinstance(cls, type):
        raise TypeError(f"ancestors_of() expects a class, got {type(cls).__name__}")
    return tuple(cls.__mro__)


def get_property(obj: Any, name: str) -> Any:
    """Read an attribute, looking in instance state before inherited slots.

    Raises AttributeError when no class in the hierarchy provides the name.
    """
    instance_dict = getattr(obj, "__dict__", None)
    if instance_dict is not None and name in instance_dict:
        return instance_dict[name]

    for klass in ancestors_of(type(obj)):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if name in slots:
            return getattr(obj, name)

    raise AttributeError(name)


def query_fields(cls: type, parent: bool = True, include_private: bool = False) -> list[str]:
    """List the annotated fields declared by a class.

    With parent=True the fields of every ancestor are included, nearest class
    first; a name declared in several classes is listed once.
    """
    classes = ancestors_of(cls) if parent else (cls,)
    fields: list[str] = []
    for klass in classes:
        for name in inspect.get_annotations(klass):
            if name in fields:
                continue
            if not include_private and name.startswith("_"):
                continue
            fields.append(name)
    return fields
