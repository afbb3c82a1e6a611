"""Configuration object binder.

Flattens configuration objects into dot-delimited keys and registers
them, either through a plain callback or as container modules.
"""

from .classifier import get_child_properties
from .flattener import bind_all, flatten, flatten_and_register
from .modules import build_auto_injection_module, build_injection_module
from .paths import bind_path, get_field, is_excluded, is_leaf

__all__ = [
    "bind_all",
    "bind_path",
    "build_auto_injection_module",
    "build_injection_module",
    "flatten",
    "flatten_and_register",
    "get_child_properties",
    "get_field",
    "is_excluded",
    "is_leaf",
]
