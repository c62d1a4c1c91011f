"""
Member access strategies for Convention Mapper.

Type maps only record *which* members supply a destination value. Getters
and setters built here know *how* to read or write those members on an
instance, whether the member is an attribute or a method.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Protocol, Sequence

from .domain.models import Member, MemberKind


class MemberGetter(Protocol):
    """Reads a value from a source object."""

    def get_value(self, obj: Any) -> Any:
        ...


class MemberSetter(Protocol):
    """Writes a value to a destination object."""

    def set_value(self, obj: Any, value: Any) -> None:
        ...


class BaseMemberAccess(ABC):
    """Base class for accessors bound to one named member."""

    def __init__(self, member: Member):
        self.member = member

    @property
    def name(self) -> str:
        return self.member.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.member})"


class FieldGetter(BaseMemberAccess):
    def get_value(self, obj: Any) -> Any:
        return getattr(obj, self.name)


class MethodGetter(BaseMemberAccess):
    def get_value(self, obj: Any) -> Any:
        return getattr(obj, self.name)()


class FieldSetter(BaseMemberAccess):
    def set_value(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)


class MethodSetter(BaseMemberAccess):
    def set_value(self, obj: Any, value: Any) -> None:
        getattr(obj, self.name)(value)


class ChainGetter:
    """
    Reads through a resolved access chain.

    A ``None`` at any intermediate step ends the walk and yields ``None``.
    """

    def __init__(self, getters: Sequence[MemberGetter]):
        self.getters = tuple(getters)

    def get_value(self, obj: Any) -> Any:
        value = obj
        for getter in self.getters:
            if value is None:
                return None
            value = getter.get_value(value)
        return value

    def __repr__(self) -> str:
        return f"ChainGetter({' -> '.join(repr(getter) for getter in self.getters)})"


class ClosureGetter:
    """Supplies a value computed by a caller-provided function of the source."""

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func

    def get_value(self, obj: Any) -> Any:
        return self.func(obj)


class ConstantGetter:
    """Supplies the same value for every source."""

    def __init__(self, value: Any):
        self.value = value

    def get_value(self, obj: Any) -> Any:
        return self.value


class MemberAccessFactory:
    """Creates getters and setters for members found by introspection."""

    def create_member_getter(self, members: Sequence[Member]) -> MemberGetter:
        if not members:
            raise ValueError("At least one member is required to build a getter")
        getters = [self._single_getter(member) for member in members]
        return getters[0] if len(getters) == 1 else ChainGetter(getters)

    def create_member_setter(self, member: Member) -> MemberSetter:
        if member.kind is MemberKind.METHOD:
            return MethodSetter(member)
        return FieldSetter(member)

    @staticmethod
    def _single_getter(member: Member) -> MemberGetter:
        if member.kind is MemberKind.METHOD:
            return MethodGetter(member)
        return FieldGetter(member)
