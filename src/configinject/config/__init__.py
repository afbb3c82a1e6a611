"""Configuration for configinject.

Provides the binder settings and loaders for configuration roots:
- Settings dataclasses with dict, file and environment constructors
- YAML/JSON configuration file loading
"""

from .settings import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_PREFIX,
    DecoratorObjectBinderSettings,
    ObjectBinderSettings,
)
from .sources import load_config_file

__all__ = [
    "DEFAULT_EXCLUDE_PATTERNS",
    "DEFAULT_PREFIX",
    "DecoratorObjectBinderSettings",
    "ObjectBinderSettings",
    "load_config_file",
]
