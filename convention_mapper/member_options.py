"""
Per-member overrides applied to an already-built TypeMap.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from .domain.models import PropertyMap, TypeMap
from .exceptions import ConfigurationError
from .member_access import ClosureGetter, ConstantGetter


class MemberOption(ABC):
    """Base class for options accepted by ``for_member``."""

    @abstractmethod
    def apply(self, type_map: TypeMap, property_map: PropertyMap) -> None:
        pass


class Ignore(MemberOption):
    """Leave the destination member untouched."""

    def apply(self, type_map: TypeMap, property_map: PropertyMap) -> None:
        property_map.ignore()


class MapFrom(MemberOption):
    """Compute the destination value from the whole source object."""

    def __init__(self, func: Callable[[Any], Any]):
        if not callable(func):
            raise ConfigurationError(
                "MapFrom expects a callable taking the source object",
                context={'received': type(func).__name__},
            )
        self.func = func

    def apply(self, type_map: TypeMap, property_map: PropertyMap) -> None:
        property_map.set_value_resolver(ClosureGetter(self.func))


class UseValue(MemberOption):
    """Always supply a fixed value."""

    def __init__(self, value: Any):
        self.value = value

    def apply(self, type_map: TypeMap, property_map: PropertyMap) -> None:
        property_map.set_value_resolver(ConstantGetter(self.value))
