"""Decorator-driven registration of configuration classes.

A :class:`ConfigMetadataRegistry` is owned by the application and built at
startup. Decorating a class records it; nothing is bound until the registry's
module is loaded into a container:

    configs = ConfigMetadataRegistry()

    @configs.config(prefix="DB", service_identifier="db-config")
    class DatabaseConfig:
        host = "localhost"

    container = Container()
    container.load(configs.build_module(container.get))
    container.get("DB.host")  # "localhost"
"""

from typing import Any, Callable, Iterator, Mapping, Optional, TypeVar, Union

from .binder.modules import build_auto_injection_module
from .config.settings import DecoratorObjectBinderSettings
from .container import ContainerModule
from .interfaces import ConfigObjectMetadata, ResolverFunction

C = TypeVar("C", bound=type)


class ConfigMetadataRegistry:
    """Caller-owned list of configuration classes awaiting registration."""

    def __init__(self):
        self._entries: list[ConfigObjectMetadata] = []

    @property
    def entries(self) -> list[ConfigObjectMetadata]:
        """Recorded entries, in decoration order."""
        return list(self._entries)

    def config(
        self,
        settings: Union[DecoratorObjectBinderSettings, Mapping[str, Any], None] = None,
        **options: Any,
    ) -> Callable[[C], C]:
        """Class decorator recording the class for auto-registration.

        Args:
            settings: Settings object or mapping; mutually exclusive with
                keyword options
            **options: ``prefix``, ``debug``, ``exclude_patterns`` and
                ``service_identifier``

        Returns:
            A decorator that returns the class unchanged.
        """
        if settings is not None and options:
            raise TypeError("Pass either a settings object or keyword options, not both")

        resolved = _to_decorator_settings(settings if settings is not None else options)

        def _config(target: C) -> C:
            self._entries.append(ConfigObjectMetadata(target, resolved))
            return target

        return _config

    def build_module(self, resolver: ResolverFunction[Any]) -> ContainerModule:
        """Build the auto-injection module for every recorded class."""
        return build_auto_injection_module(resolver, self._entries)

    def clear(self) -> None:
        """Forget all recorded classes."""
        self._entries.clear()

    def __iter__(self) -> Iterator[ConfigObjectMetadata]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)


def _to_decorator_settings(
    settings: Union[DecoratorObjectBinderSettings, Mapping[str, Any]],
) -> Optional[DecoratorObjectBinderSettings]:
    if isinstance(settings, DecoratorObjectBinderSettings):
        return settings
    if not settings:
        return None
    return DecoratorObjectBinderSettings.from_dict(settings)
