"""
Type map construction for Convention Mapper.

This module builds the mapping configuration between a source and a
destination type. Every writable destination member is resolved against the
source type by naming convention, and one PropertyMap is recorded per
destination member whether or not a source counterpart was found.

Key Components:
- Destination member enumeration (fields, then setter methods)
- Convention-driven resolution through MemberResolver
- Getter/setter creation through MemberAccessFactory

Example:
    >>> from convention_mapper.builder import TypeMapBuilder
    >>> builder = TypeMapBuilder()
    >>> type_map = builder.build(CustomerModel, CustomerDto)
    >>> [pm.source_path for pm in type_map.property_maps]
"""

import logging
from typing import Any, Optional

from .config import MappingOptions
from .domain.models import PropertyMap, TypeMap
from .domain.resolver import MemberResolver, TypeCatalogProvider
from .introspection import TypeIntrospector
from .member_access import MemberAccessFactory
from .object_creators import SimpleObjectCreator


logger = logging.getLogger(__name__)


class TypeMapBuilder:
    """
    Builds TypeMaps for (source, destination) type pairs.

    The catalog, and therefore its descriptor cache, belongs to the builder
    instance.
    """

    def __init__(
        self,
        catalog: Optional[TypeCatalogProvider] = None,
        member_access_factory: Optional[MemberAccessFactory] = None,
    ):
        self.catalog = catalog if catalog is not None else TypeIntrospector()
        self.member_access_factory = member_access_factory or MemberAccessFactory()
        self.resolver = MemberResolver(self.catalog)

    def build(
        self,
        source_type: Any,
        destination_type: Any,
        options: Optional[MappingOptions] = None,
    ) -> TypeMap:
        """
        Build the type map for one type pair.

        Args:
            source_type: Class, dotted path or catalog name of the source type
            destination_type: Class, dotted path or catalog name of the destination type
            options: Naming conventions and prefixes (defaults when omitted)

        Returns:
            TypeMap with one PropertyMap per writable destination member

        Raises:
            TypeNotFoundError: If either type cannot be introspected
        """
        options = options if options is not None else MappingOptions()

        source = self.catalog.describe(source_type)
        destination = self.catalog.describe(destination_type)
        logger.debug(f"Building type map {source} -> {destination}")

        type_map = TypeMap(source, destination, SimpleObjectCreator(destination))

        for destination_member in destination.writable_members():
            chain = self.resolver.resolve(destination_member.name, source, options)

            setter = self.member_access_factory.create_member_setter(destination_member)
            getter = self.member_access_factory.create_member_getter(chain) if chain else None

            type_map.add_property_map(
                PropertyMap(
                    destination_member=destination_member,
                    setter=setter,
                    getter=getter,
                    source_members=chain or (),
                )
            )

        logger.debug(
            f"Type map {source} -> {destination} built: "
            f"{len(type_map.property_maps)} members, {len(type_map.unmapped_property_maps())} unmapped"
        )
        return type_map
