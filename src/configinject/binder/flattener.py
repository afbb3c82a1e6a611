"""Flattening of configuration objects into prefixed, dot-delimited keys.

The traversal is an iterative depth-first search over the properties
reported by :mod:`.classifier`. Every visited node, the root included, is
handed to a ``register`` callback exactly once:

    root               -> "CFG"
    root.db            -> "CFG.db"
    root.db.host       -> "CFG.db.host"

Sequences and scalars are leaves, so ``root.db.replicas`` is bound as a
whole list rather than element by element.
"""

import logging
from typing import Any, Callable, Mapping, Union

from ..config.settings import ObjectBinderSettings
from ..interfaces import RegisterFunction
from .classifier import get_child_properties
from .paths import bind_path, get_field, is_excluded, is_leaf, object_path

logger = logging.getLogger(__name__)

SettingsLike = Union[ObjectBinderSettings, Mapping[str, Any], None]


def flatten_and_register(
    config_object: Any,
    settings: SettingsLike,
    register: RegisterFunction,
) -> None:
    """Register ``config_object`` and all of its valid sub-properties.

    Args:
        config_object: Root configuration object (mapping, dataclass,
            pydantic model or any class instance)
        settings: Binder settings; ``None`` or missing options use defaults
        register: Called as ``register(key, value)`` once per visited node

    Raises:
        PathResolutionError: If a discovered property can no longer be read.
    """
    settings = ObjectBinderSettings.coerce(settings)
    log = _get_logger(settings)
    prefix = settings.effective_prefix
    exclude_patterns = settings.exclude_patterns

    # Stack of property paths still to visit,
    # eg: config.person.name => ["", "person", "name"]
    stack: list[list[Any]] = [[""]]
    while stack:
        item = stack.pop()

        key = bind_path(prefix, item)
        data = get_field(config_object, item)

        log(f'Binding "{object_path(item)}" to "{key}"')
        register(key, data)

        if not is_leaf(data):
            for member in get_child_properties(data):
                if not is_excluded(member, exclude_patterns):
                    stack.append(item + [member])


# Name used by the container module builders
bind_all = flatten_and_register


def flatten(config_object: Any, settings: SettingsLike = None) -> dict[str, Any]:
    """Flatten ``config_object`` into a ``{key: value}`` mapping.

    Keys that are produced more than once keep the last value.
    """
    result: dict[str, Any] = {}
    flatten_and_register(config_object, settings, result.__setitem__)
    return result


def _get_logger(settings: ObjectBinderSettings) -> Callable[[str], None]:
    """Return a logging function, or a no-op when debug is off."""
    if settings.debug:
        return logger.info
    return lambda message: None
