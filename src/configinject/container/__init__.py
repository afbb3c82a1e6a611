"""Dependency Injection Container.

Holds configuration values and configuration classes under named
service identifiers.
"""

from .container import Binding, BindingScope, Container, ContainerModule

__all__ = ["Binding", "BindingScope", "Container", "ContainerModule"]
