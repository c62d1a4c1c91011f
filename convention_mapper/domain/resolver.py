"""
Destination-to-source member resolution for Convention Mapper.

Given a destination member name and a source type, the resolver finds the
chain of source members whose composition supplies the destination value.
A direct name match wins; otherwise the destination name is split into
tokens and every split point is tried, resolving the leading part against
the source type and the trailing part, recursively, against the declared
result type of the member found for the leading part.

Example:
    With a source exposing ``address: Address`` and ``Address`` exposing
    ``city``, the destination member ``address_city`` resolves to the chain
    ``(address, city)``.
"""

import logging
from typing import Optional, Protocol, Sequence, Tuple, TYPE_CHECKING

from ..exceptions import NotSupportedError, TypeNotFoundError
from .matching import NameMatcher
from .models import Member, TypeDescriptor

if TYPE_CHECKING:
    from ..config import MappingOptions


logger = logging.getLogger(__name__)

AccessChain = Tuple[Member, ...]


class TypeCatalogProvider(Protocol):
    """Anything able to describe a type identifier."""

    def describe(self, type_id) -> TypeDescriptor:
        """Return the descriptor for ``type_id`` or raise TypeNotFoundError."""
        ...


class MemberResolver:
    """Resolves destination member names to source access chains."""

    def __init__(self, catalog: TypeCatalogProvider, matcher: Optional[NameMatcher] = None):
        self.catalog = catalog
        self.matcher = matcher or NameMatcher()

    def resolve(
        self,
        destination_name: str,
        source_type: TypeDescriptor,
        options: "MappingOptions",
    ) -> Optional[AccessChain]:
        """
        Resolve a destination member name against a source type.

        Args:
            destination_name: Name of the destination member (or a fragment of it)
            source_type: Descriptor of the type to search
            options: Naming conventions and prefixes for this build

        Returns:
            The access chain, or None when no source counterpart exists
        """
        source_members = source_type.readable_members()

        member = self.find_member(source_members, destination_name, options)
        if member is not None:
            return (member,)

        tokens = options.destination_member_naming_convention.split(destination_name)
        separator = options.source_member_naming_convention.separator_character

        for i in range(1, len(tokens)):
            first = separator.join(tokens[:i])
            second = separator.join(tokens[i:])

            member = self.find_member(source_members, first, options)
            if member is None:
                continue

            nested_type = self._describe_result_type(member)
            if nested_type is None:
                continue

            nested_chain = self.resolve(second, nested_type, options)
            if nested_chain:
                return (member,) + nested_chain

        return None

    def find_member(
        self,
        members: Sequence[Member],
        name_to_search: str,
        options: "MappingOptions",
    ) -> Optional[Member]:
        """Return the first member whose name matches ``name_to_search``."""
        for member in members:
            if self.matcher.matches(
                member.name,
                name_to_search,
                options.source_prefixes,
                options.destination_prefixes,
            ):
                return member
        return None

    def _describe_result_type(self, member: Member) -> Optional[TypeDescriptor]:
        """Describe the type a member yields, or None if it cannot be walked into."""
        if member.result_type is None:
            return None
        try:
            return self.catalog.describe(member.result_type)
        except (TypeNotFoundError, NotSupportedError) as e:
            logger.debug(
                f"Cannot resolve through {member.declaring_type}.{member.name}: {e.message}"
            )
            return None
