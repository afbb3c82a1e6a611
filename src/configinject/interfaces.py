"""Shared types for configinject.

These describe the seams between the binder, the decorator registry and
whatever container the bindings end up in.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from .config.settings import DecoratorObjectBinderSettings

T = TypeVar("T")

# Receives one (key, value) pair per visited configuration node
RegisterFunction = Callable[[str, Any], None]

# Resolves a service identifier to an instance, eg: Container.get
ResolverFunction = Callable[[Any], T]

# Creates a binding for a service identifier, eg: Container.bind
BindFunction = Callable[[Any], Any]


@dataclass
class ConfigObjectMetadata:
    """A configuration-bearing class recorded for auto-registration.

    Attributes:
        implementation_type: The decorated class
        settings: Settings given to the decorator, or None for defaults
    """
    implementation_type: type
    settings: Optional[DecoratorObjectBinderSettings] = None

    @property
    def service_identifier(self) -> Any:
        """Identifier to bind the class under."""
        if self.settings is not None and self.settings.service_identifier is not None:
            return self.settings.service_identifier
        return self.implementation_type
