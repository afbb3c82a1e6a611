"""Leaf detection, exclusion and property path helpers."""

from collections.abc import Mapping, Sequence as SequenceABC, Set
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Iterable, Pattern, Sequence

from ..errors import PathResolutionError

# Values of these types are bound whole and never descended into
SEQUENCE_TYPES = (SequenceABC, Set, bytearray, memoryview)
SCALAR_TYPES = (
    str, bytes, int, float, complex, bool, Decimal, Enum,
    datetime, date, time, timedelta, PurePath,
)


def is_leaf(value: Any) -> bool:
    """Return True if ``value`` has no interesting sub-properties.

    ``None``, sequences, sets and scalars are leaves. Mappings and objects
    are not, even when they expose no properties at all.
    """
    if value is None or isinstance(value, SCALAR_TYPES):
        return True
    return isinstance(value, SEQUENCE_TYPES) and not isinstance(value, Mapping)


def is_excluded(name: Any, patterns: Iterable[Pattern[str]]) -> bool:
    """Return True if the property name matches any exclusion pattern."""
    return any(pattern.search(str(name)) for pattern in patterns)


def get_field(root: Any, path: Sequence[Any]) -> Any:
    """Return the value found by following ``path`` from ``root``.

    The leading root segment is skipped; every other segment, an empty
    string included, is a real key or attribute name. Mappings are followed
    by key, everything else by attribute.

    Raises:
        PathResolutionError: If a segment is missing along the way.
    """
    value = root
    for part in path[1:]:
        try:
            if isinstance(value, Mapping):
                value = value[part]
            else:
                value = getattr(value, part)
        except (KeyError, AttributeError, TypeError) as exc:
            raise PathResolutionError(path, part) from exc
    return value


def object_path(path: Sequence[Any]) -> str:
    """Dot-join a path; the root path ``[""]`` joins to ``""``."""
    return ".".join(str(part) for part in path)


def bind_path(prefix: str, path: Sequence[Any]) -> str:
    """Build the registration key for a path.

    The root path maps to exactly ``prefix``. Child keys keep every
    segment, so an empty-string key yields ``"CFG."`` rather than
    colliding with the root.
    """
    if len(path) <= 1:
        return prefix
    return prefix + object_path(path)
