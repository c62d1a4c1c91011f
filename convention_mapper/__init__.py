"""
Convention Mapper

Builds mapping configurations between a source and a destination type by
matching member names through naming conventions, flattening nested source
members (``address.city`` -> ``address_city``) without per-field wiring.
"""

from .builder import TypeMapBuilder
from .config import MappingOptions, load_options
from .configuration import MappingConfiguration
from .domain import (
    CamelCaseNamingConvention,
    LowerUnderscoreNamingConvention,
    Member,
    MemberKind,
    MemberResolver,
    NameMatcher,
    PascalCaseNamingConvention,
    PropertyMap,
    TypeDescriptor,
    TypeMap,
)
from .exceptions import (
    ConfigurationError,
    ConventionMapperError,
    NotSupportedError,
    TypeNotFoundError,
)
from .fluent import MappingFluentSyntax
from .introspection import StaticTypeCatalog, TypeIntrospector
from .member_options import Ignore, MapFrom, MemberOption, UseValue
from .object_creators import ClosureObjectCreator, ObjectCreator, SimpleObjectCreator


__all__ = [
    'TypeMapBuilder',
    'MappingOptions',
    'load_options',
    'MappingConfiguration',
    'MappingFluentSyntax',

    'CamelCaseNamingConvention',
    'LowerUnderscoreNamingConvention',
    'PascalCaseNamingConvention',
    'Member',
    'MemberKind',
    'MemberResolver',
    'NameMatcher',
    'PropertyMap',
    'TypeDescriptor',
    'TypeMap',

    'ConfigurationError',
    'ConventionMapperError',
    'NotSupportedError',
    'TypeNotFoundError',

    'StaticTypeCatalog',
    'TypeIntrospector',

    'Ignore',
    'MapFrom',
    'MemberOption',
    'UseValue',

    'ClosureObjectCreator',
    'ObjectCreator',
    'SimpleObjectCreator'
]
