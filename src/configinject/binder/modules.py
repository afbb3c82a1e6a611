"""Container modules that bind configuration objects."""

import logging
from typing import Any, Iterable, Optional

from ..config.settings import ObjectBinderSettings
from ..container import ContainerModule
from ..interfaces import BindFunction, ConfigObjectMetadata, ResolverFunction
from .flattener import SettingsLike, bind_all

logger = logging.getLogger(__name__)


def build_injection_module(
    config_object: Any,
    settings: SettingsLike = None,
) -> ContainerModule:
    """Build a container module that binds ``config_object`` and all of its
    valid sub-properties as constants.

    Args:
        config_object: The root config object that should be mapped
        settings: Optional settings for the mapper; absent options use
            the defaults

    Returns:
        A module to pass to :meth:`Container.load`.
    """
    merged_settings = ObjectBinderSettings.coerce(settings)

    def registry(bind: BindFunction) -> None:
        _bind_constants(bind, config_object, merged_settings)

    return ContainerModule(registry)


def build_auto_injection_module(
    resolver: ResolverFunction[Any],
    metadata: Iterable[ConfigObjectMetadata],
) -> ContainerModule:
    """Build a container module for classes recorded by the ``config`` decorator.

    Each class is bound as a singleton under its service identifier, an
    instance is obtained through ``resolver`` and that instance is then
    flattened like :func:`build_injection_module` would.

    Args:
        resolver: Resolves an identifier once it is bound, eg: ``container.get``
        metadata: Recorded ``(implementation_type, settings)`` entries

    Returns:
        A module to pass to :meth:`Container.load`.
    """
    entries = list(metadata)

    def registry(bind: BindFunction) -> None:
        for item in entries:
            identifier = item.service_identifier
            logger.debug(f"Registering {item.implementation_type.__name__} as {identifier!r}")
            bind(identifier).to(item.implementation_type).in_singleton_scope()

            instance = resolver(identifier)
            _bind_constants(bind, instance, item.settings or ObjectBinderSettings())

    return ContainerModule(registry)


def _bind_constants(
    bind: BindFunction,
    config_object: Any,
    settings: Optional[ObjectBinderSettings],
) -> None:
    def register(key: str, value: Any) -> None:
        bind(key).to_constant_value(value)

    bind_all(config_object, settings, register)
