"""
Domain module for Convention Mapper.

This module contains the mapping domain: type and member metadata, naming
conventions, name matching and the member resolution algorithm. It does no
introspection of its own; types are described through a catalog provider.
"""

from .models import (
    Member,
    MemberKind,
    TypeDescriptor,
    PropertyMap,
    TypeMap
)

from .naming import (
    NamingConvention,
    LowerUnderscoreNamingConvention,
    PascalCaseNamingConvention,
    CamelCaseNamingConvention,
    naming_convention_for
)

from .matching import (
    NameMatcher,
    name_matches,
    possible_names
)

from .resolver import (
    AccessChain,
    MemberResolver,
    TypeCatalogProvider
)

__all__ = [
    # Core models
    'Member',
    'MemberKind',
    'TypeDescriptor',
    'PropertyMap',
    'TypeMap',

    # Naming
    'NamingConvention',
    'LowerUnderscoreNamingConvention',
    'PascalCaseNamingConvention',
    'CamelCaseNamingConvention',
    'naming_convention_for',

    # Matching
    'NameMatcher',
    'name_matches',
    'possible_names',

    # Resolution
    'AccessChain',
    'MemberResolver',
    'TypeCatalogProvider'
]
