"""Property classification for configuration objects.

Decides which members of a value are configuration data worth binding:
instance attributes, class attributes and properties found anywhere along
the class hierarchy, but not methods, dunder machinery or members that
cannot be read from the instance.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .paths import is_leaf

# The shape walk stops before these; their members are framework machinery
BASE_TYPES = (object, BaseModel)

# pydantic reserves this namespace for its own API
_PYDANTIC_RESERVED_PREFIX = "model_"

# Set on classes by abc.ABCMeta, which pydantic models also use
_ABC_MEMBERS = frozenset({"_abc_impl"})

_MISSING = object()


def get_child_properties(value: Any) -> list[Any]:
    """Get all valid child properties of ``value`` in a flat list.

    Levels are visited from most-derived (the instance itself) to
    least-derived. A name defined on several levels is reported once, at
    the most-derived level where it qualifies.

    Args:
        value: Any value; leaves yield no properties.

    Returns:
        Property names (mapping keys for mappings) in discovery order.
    """
    if is_leaf(value):
        return []

    if isinstance(value, Mapping):
        return [key for key, item in value.items() if _is_valid_value(item)]

    names: list[Any] = []
    seen: set[str] = set()
    for level in get_shape_levels(value):
        for name in get_level_members(value, level):
            if name not in seen:
                seen.add(name)
                names.append(name)
    return names


def get_shape_levels(value: Any) -> list[Any]:
    """Return the instance followed by its classes, excluding base types.

    The instance contributes its own ``__dict__``; each class contributes
    its namespace.
    """
    levels: list[Any] = [value]
    for cls in type(value).__mro__:
        if cls in BASE_TYPES:
            break
        levels.append(cls)
    return levels


def get_level_members(value: Any, level: Any) -> list[str]:
    """Return the names defined by ``level`` that are readable data on ``value``."""
    namespace = _namespace(level)
    is_model = isinstance(value, BaseModel)
    return [
        name for name in list(namespace)
        if isinstance(name, str)
        and _is_public_property(name, is_model)
        and _is_valid_value(getattr(value, name, _MISSING))
    ]


def _namespace(level: Any) -> Any:
    try:
        return vars(level)
    except TypeError:
        # __slots__ only; slot descriptors show up on the class level
        return {}


def _is_public_property(name: str, is_model: bool) -> bool:
    if name.startswith("__") and name.endswith("__"):
        return False
    if name in _ABC_MEMBERS:
        return False
    if is_model and name.startswith(_PYDANTIC_RESERVED_PREFIX):
        return False
    return True


def _is_valid_value(item: Any) -> bool:
    # Missing attributes and callables (methods, functions, classes) are not data
    return item is not _MISSING and not callable(item)
