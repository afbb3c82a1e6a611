"""Exceptions raised by configinject.

The binder itself does not validate configuration. These types exist so
callers can tell a failed path lookup or container resolution apart from
arbitrary errors raised by user property getters.
"""

from typing import Any, Sequence


class ConfigInjectError(Exception):
    """Base class for all configinject errors."""


class PathResolutionError(ConfigInjectError, LookupError):
    """A property path could not be followed from the configuration root.

    Attributes:
        path: Full path being resolved (segments, root segment included)
        segment: The segment whose lookup failed
    """

    def __init__(self, path: Sequence[Any], segment: Any):
        self.path = list(path)
        self.segment = segment
        dotted = ".".join(str(part) for part in self.path if part != "")
        super().__init__(f"Cannot resolve segment {segment!r} of path {dotted!r}")


class ResolutionError(ConfigInjectError):
    """A service identifier has no binding, or more than one."""


class ConfigSourceError(ConfigInjectError):
    """Base class for failures while loading a configuration file."""


class ConfigSourceNotFoundError(ConfigSourceError):
    """The configuration file does not exist."""


class UnsupportedConfigFormatError(ConfigSourceError):
    """The configuration file suffix is not YAML or JSON."""


class InvalidConfigRootError(ConfigSourceError):
    """The configuration file does not contain a mapping at its root."""
