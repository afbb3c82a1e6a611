"""Dependency injection container for configuration bindings."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from ..errors import ResolutionError
from ..interfaces import BindFunction

logger = logging.getLogger(__name__)

_UNSET = object()


class BindingScope(Enum):
    """Lifetime of instances created from a type binding."""
    TRANSIENT = "transient"
    SINGLETON = "singleton"


@dataclass
class Binding:
    """A single service binding.

    Created by :meth:`Container.bind` and completed with one of the
    ``to*`` methods. Methods return the binding so calls can be chained:

        container.bind("CFG.db.host").to_constant_value("localhost")
        container.bind(Settings).to_self().in_singleton_scope()
    """
    service_identifier: Any
    implementation_type: Optional[type] = None
    constant_value: Any = field(default=_UNSET, repr=False)
    scope: BindingScope = BindingScope.TRANSIENT
    _cached: Any = field(default=_UNSET, repr=False)

    def to(self, implementation_type: type) -> "Binding":
        """Resolve to new instances of ``implementation_type``."""
        self.implementation_type = implementation_type
        return self

    def to_self(self) -> "Binding":
        """Resolve to instances of the identifier, which must be a class."""
        if not isinstance(self.service_identifier, type):
            raise TypeError(
                f"to_self() requires a class identifier, got {self.service_identifier!r}"
            )
        return self.to(self.service_identifier)

    def to_constant_value(self, value: Any) -> "Binding":
        """Resolve to ``value`` itself, always the same object."""
        self.constant_value = value
        return self

    def in_singleton_scope(self) -> "Binding":
        """Create the implementation once and reuse it."""
        self.scope = BindingScope.SINGLETON
        return self

    def in_transient_scope(self) -> "Binding":
        """Create a new implementation instance per resolution."""
        self.scope = BindingScope.TRANSIENT
        return self

    def resolve(self) -> Any:
        """Produce the bound value."""
        if self.constant_value is not _UNSET:
            return self.constant_value

        if self.implementation_type is None:
            raise ResolutionError(
                f"Binding for {_describe(self.service_identifier)} has no target"
            )

        if self.scope == BindingScope.SINGLETON:
            if self._cached is _UNSET:
                self._cached = self.implementation_type()
            return self._cached

        return self.implementation_type()


class ContainerModule:
    """A group of bindings that can be loaded into a container.

    Args:
        registry: Called with the container's ``bind`` function on load
    """

    def __init__(self, registry: Callable[[BindFunction], None]):
        self.registry = registry


class Container:
    """Dependency injection container.

    Maps service identifiers (strings or classes) to bindings. Several
    bindings may share one identifier; resolving such an identifier is
    ambiguous and fails.

    Usage:
        container = Container()
        container.load(build_injection_module(config))

        host = container.get("CFG.db.host")
    """

    def __init__(self):
        self._bindings: dict[Any, list[Binding]] = {}

    def bind(self, service_identifier: Any) -> Binding:
        """Add a binding for ``service_identifier``."""
        binding = Binding(service_identifier)
        self._bindings.setdefault(service_identifier, []).append(binding)
        logger.debug(f"Bound {_describe(service_identifier)}")
        return binding

    def is_bound(self, service_identifier: Any) -> bool:
        """Check whether ``service_identifier`` has at least one binding."""
        return bool(self._bindings.get(service_identifier))

    def get(self, service_identifier: Any) -> Any:
        """Resolve ``service_identifier``.

        Raises:
            ResolutionError: If there is no binding, or more than one.
        """
        bindings = self._bindings.get(service_identifier)
        if not bindings:
            raise ResolutionError(
                f"No bindings found for service: {_describe(service_identifier)}"
            )
        if len(bindings) > 1:
            raise ResolutionError(
                f"Ambiguous match found for service: {_describe(service_identifier)}"
            )
        return bindings[0].resolve()

    def load(self, *modules: ContainerModule) -> None:
        """Load the bindings of each module, in order."""
        for module in modules:
            module.registry(self.bind)

    def __contains__(self, service_identifier: Any) -> bool:
        return self.is_bound(service_identifier)

    def __len__(self) -> int:
        return sum(len(bindings) for bindings in self._bindings.values())


def _describe(service_identifier: Any) -> str:
    if isinstance(service_identifier, type):
        return service_identifier.__qualname__
    return repr(service_identifier)
