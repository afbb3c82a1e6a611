"""configinject - Bind nested configuration objects into a DI container.

Flattens configuration objects (mappings, dataclasses, pydantic models and
class hierarchies) into dot-delimited keys such as ``CFG.db.host`` and
binds every key to the value found there.

Usage:
    from configinject import Container, build_injection_module

    container = Container()
    container.load(build_injection_module({"db": {"host": "localhost"}}))
    container.get("CFG.db.host")  # "localhost"
"""

__version__ = "0.1.0"

from .binder import (
    bind_all,
    build_auto_injection_module,
    build_injection_module,
    flatten,
    flatten_and_register,
    get_child_properties,
    is_leaf,
)
from .config import (
    DecoratorObjectBinderSettings,
    ObjectBinderSettings,
    load_config_file,
)
from .container import Container, ContainerModule
from .decorators import ConfigMetadataRegistry
from .errors import (
    ConfigInjectError,
    ConfigSourceError,
    PathResolutionError,
    ResolutionError,
)
from .interfaces import ConfigObjectMetadata

__all__ = [
    "bind_all",
    "build_auto_injection_module",
    "build_injection_module",
    "flatten",
    "flatten_and_register",
    "get_child_properties",
    "is_leaf",
    "DecoratorObjectBinderSettings",
    "ObjectBinderSettings",
    "load_config_file",
    "Container",
    "ContainerModule",
    "ConfigMetadataRegistry",
    "ConfigInjectError",
    "ConfigSourceError",
    "PathResolutionError",
    "ResolutionError",
    "ConfigObjectMetadata",
]
