"""
Object construction strategies for destination types.
"""

from typing import Any, Callable, Protocol, runtime_checkable

from .domain.models import TypeDescriptor
from .exceptions import NotSupportedError


@runtime_checkable
class ObjectCreator(Protocol):
    """Produces a new destination instance."""

    def create(self) -> Any:
        ...


class SimpleObjectCreator:
    """Calls the destination class without arguments."""

    def __init__(self, descriptor: TypeDescriptor):
        self.descriptor = descriptor

    def create(self) -> Any:
        if self.descriptor.python_type is None:
            raise NotSupportedError(
                f"Type {self.descriptor} has no Python class to instantiate",
                feature="object construction",
                suggestions=["Supply a factory with construct_using(...)"],
            )
        return self.descriptor.python_type()


class ClosureObjectCreator:
    """Delegates construction to a caller-supplied factory."""

    def __init__(self, factory: Callable[[], Any]):
        self.factory = factory

    def create(self) -> Any:
        return self.factory()
