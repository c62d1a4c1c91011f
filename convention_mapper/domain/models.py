"""
Core domain models for Convention Mapper.

These models describe types, their members and the mapping configuration
built between a source and a destination type. They hold metadata only:
no value is ever copied between instances here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, TYPE_CHECKING

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..member_access import MemberGetter, MemberSetter
    from ..object_creators import ObjectCreator


class MemberKind(Enum):
    """How a member is accessed."""

    FIELD = "field"
    METHOD = "method"


@dataclass(frozen=True)
class Member:
    """
    Read-only metadata about one public member of a type.

    ``result_type`` is whatever the catalog can hand back to ``describe``:
    a class, a type hint, a registered type name, or ``None`` when unknown.
    For mutators it is the type of the single parameter.
    """

    name: str
    kind: MemberKind
    declaring_type: str
    result_type: Any = None
    readable: bool = True
    writable: bool = True

    @classmethod
    def field(cls, name: str, declaring_type: str, result_type: Any = None,
              readable: bool = True, writable: bool = True) -> "Member":
        return cls(name, MemberKind.FIELD, declaring_type, result_type, readable, writable)

    @classmethod
    def accessor(cls, name: str, declaring_type: str, result_type: Any = None) -> "Member":
        return cls(name, MemberKind.METHOD, declaring_type, result_type, True, False)

    @classmethod
    def mutator(cls, name: str, declaring_type: str, value_type: Any = None) -> "Member":
        return cls(name, MemberKind.METHOD, declaring_type, value_type, False, True)

    @property
    def is_method(self) -> bool:
        return self.kind is MemberKind.METHOD

    def __str__(self) -> str:
        return f"{self.name}()" if self.is_method else self.name


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Immutable description of a class-like type.

    Fields keep declaration order, as do accessors (zero-argument methods)
    and mutators (one-argument setter-like methods).
    """

    name: str
    python_type: Optional[type] = None
    fields: Tuple[Member, ...] = ()
    accessors: Tuple[Member, ...] = ()
    mutators: Tuple[Member, ...] = ()

    def readable_members(self) -> List[Member]:
        """Source lookup order: accessor methods first, then fields."""
        return list(self.accessors) + [member for member in self.fields if member.readable]

    def writable_members(self) -> List[Member]:
        """Destination enumeration order: fields first, then setter methods."""
        return [member for member in self.fields if member.writable] + list(self.mutators)

    def __str__(self) -> str:
        return self.name


@dataclass
class PropertyMap:
    """
    The mapping for one destination member.

    The setter is always present. ``getter`` and ``source_members`` are empty
    when no source counterpart was found.
    """

    destination_member: Member
    setter: "MemberSetter"
    getter: Optional["MemberGetter"] = None
    source_members: Tuple[Member, ...] = ()
    ignored: bool = False

    @property
    def member_name(self) -> str:
        return self.destination_member.name

    @property
    def has_source(self) -> bool:
        return self.getter is not None

    @property
    def is_mapped(self) -> bool:
        """Ignored members count as mapped: they were dealt with explicitly."""
        return self.ignored or self.getter is not None

    @property
    def source_path(self) -> str:
        return ".".join(str(member) for member in self.source_members)

    def ignore(self) -> None:
        self.ignored = True
        self.getter = None
        self.source_members = ()

    def set_value_resolver(self, getter: "MemberGetter") -> None:
        """Replace the convention-resolved source with an explicit one."""
        self.ignored = False
        self.getter = getter
        self.source_members = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'member': self.member_name,
            'kind': self.destination_member.kind.value,
            'source': [member.name for member in self.source_members],
            'custom': self.getter is not None and not self.source_members,
            'ignored': self.ignored,
            'mapped': self.is_mapped,
        }


class TypeMap:
    """
    Ordered PropertyMaps for a (source, destination) pair.

    Also carries the before/after hooks and the strategy used to construct
    destination objects.
    """

    def __init__(
        self,
        source_type: TypeDescriptor,
        destination_type: TypeDescriptor,
        object_creator: "ObjectCreator",
    ):
        self.source_type = source_type
        self.destination_type = destination_type
        self.object_creator = object_creator
        self.before_map_func: Optional[Callable[..., Any]] = None
        self.after_map_func: Optional[Callable[..., Any]] = None
        self._property_maps: Dict[str, PropertyMap] = {}

    @property
    def property_maps(self) -> List[PropertyMap]:
        return list(self._property_maps.values())

    def add_property_map(self, property_map: PropertyMap) -> None:
        self._property_maps[property_map.member_name] = property_map

    def get_property_map(self, member_name: str) -> Optional[PropertyMap]:
        return self._property_maps.get(member_name)

    def unmapped_property_maps(self) -> List[PropertyMap]:
        return [pm for pm in self._property_maps.values() if not pm.is_mapped]

    def set_object_creator(self, object_creator: "ObjectCreator") -> None:
        self.object_creator = object_creator

    def set_before_map_func(self, func: Callable[..., Any]) -> None:
        self.before_map_func = func

    def set_after_map_func(self, func: Callable[..., Any]) -> None:
        self.after_map_func = func

    def create_destination_object(self) -> Any:
        return self.object_creator.create()

    def validate(self) -> None:
        """
        Ensure every destination member has a source or is ignored.

        Raises:
            ConfigurationError: Listing the unmapped destination members
        """
        unmapped = [pm.member_name for pm in self.unmapped_property_maps()]
        if unmapped:
            raise ConfigurationError(
                f"Unmapped members were found on type {self.destination_type} "
                f"when mapping from {self.source_type}: {', '.join(unmapped)}",
                destination_type=self.destination_type.name,
                suggestions=[
                    "Add a matching member to the source type",
                    "Use for_member(name, MapFrom(...)) to supply a value",
                    "Use for_member(name, Ignore()) to skip the member",
                ],
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'source_type': self.source_type.name,
            'destination_type': self.destination_type.name,
            'property_maps': [pm.to_dict() for pm in self._property_maps.values()],
        }

    def __repr__(self) -> str:
        return f"TypeMap({self.source_type} -> {self.destination_type}, {len(self._property_maps)} members)"
