"""
Fluent configuration surface for a built TypeMap.

Example:
    >>> configuration.create_map(Order, OrderDto) \\
    ...     .for_member("total", MapFrom(lambda order: order.compute_total())) \\
    ...     .for_member("internal_notes", Ignore()) \\
    ...     .after_map(audit)
"""

import inspect
from typing import Any, Callable, List, Sequence, Union

from .domain.models import PropertyMap, TypeMap
from .exceptions import ConfigurationError
from .member_options import MemberOption
from .object_creators import ClosureObjectCreator, ObjectCreator


class MappingFluentSyntax:
    """Chainable overrides for one TypeMap."""

    def __init__(self, type_map: TypeMap):
        self.type_map = type_map

    def construct_using(self, object_creator: Union[ObjectCreator, Callable[[], Any]]) -> "MappingFluentSyntax":
        """
        Use a custom object creator, or any zero-argument callable, for destinations.

        Classes count as callables: ``construct_using(OrderDto)`` calls
        ``OrderDto()``. An ObjectCreator class must be passed as an instance.
        """
        if inspect.isclass(object_creator) and hasattr(object_creator, "create"):
            raise ConfigurationError(
                f"Argument object_creator must be an instance, got the class {object_creator.__name__}",
                destination_type=self.type_map.destination_type.name,
            )
        if inspect.isclass(object_creator) or not isinstance(object_creator, ObjectCreator):
            if not callable(object_creator):
                raise ConfigurationError(
                    "Argument object_creator must be callable or implement ObjectCreator",
                    destination_type=self.type_map.destination_type.name,
                )
            object_creator = ClosureObjectCreator(object_creator)
        self.type_map.set_object_creator(object_creator)
        return self

    def for_member(
        self,
        name: str,
        member_options: Union[MemberOption, Sequence[MemberOption]],
    ) -> "MappingFluentSyntax":
        """
        Apply one or more options to a destination member.

        Raises:
            ConfigurationError: If an option is not a MemberOption or the
                destination member does not exist
        """
        if isinstance(member_options, (list, tuple)):
            options: List[Any] = list(member_options)
        else:
            options = [member_options]
        self._assert_member_options(options)

        property_map = self.type_map.get_property_map(name)
        self._assert_property_map_exists(property_map, name)

        for member_option in options:
            member_option.apply(self.type_map, property_map)
        return self

    def before_map(self, func: Callable[..., Any]) -> "MappingFluentSyntax":
        self._assert_callable(func, "before_map")
        self.type_map.set_before_map_func(func)
        return self

    def after_map(self, func: Callable[..., Any]) -> "MappingFluentSyntax":
        self._assert_callable(func, "after_map")
        self.type_map.set_after_map_func(func)
        return self

    def _assert_member_options(self, member_options: Sequence[Any]) -> None:
        for member_option in member_options:
            if not isinstance(member_option, MemberOption):
                raise ConfigurationError(
                    "Member options must be a MemberOption or a list of MemberOption instances",
                    destination_type=self.type_map.destination_type.name,
                    context={'received': type(member_option).__name__},
                )

    def _assert_property_map_exists(self, property_map: PropertyMap, name: str) -> None:
        if property_map is None:
            raise ConfigurationError(
                f"Unable to find destination member {name} on type {self.type_map.destination_type}",
                destination_type=self.type_map.destination_type.name,
                member=name,
            )

    def _assert_callable(self, func: Any, hook: str) -> None:
        if not callable(func):
            raise ConfigurationError(
                f"Argument to {hook} must be callable",
                destination_type=self.type_map.destination_type.name,
                context={'received': type(func).__name__},
            )
