"""
Centralized constants for Convention Mapper.

This module contains the default options, naming convention identifiers and
introspection rules used across the package.
"""

from typing import Tuple


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultOptions:
    """Default mapping option values."""

    SOURCE_NAMING_CONVENTION = "lower_underscore"
    DESTINATION_NAMING_CONVENTION = "lower_underscore"

    # Prefixes stripped to produce alternate comparable names
    SOURCE_PREFIXES: Tuple[str, ...] = ("get_",)
    DESTINATION_PREFIXES: Tuple[str, ...] = ("set_",)


class NamingConventionNames:
    """Identifiers accepted in configuration files."""

    LOWER_UNDERSCORE = "lower_underscore"
    PASCAL_CASE = "pascal_case"
    CAMEL_CASE = "camel_case"

    ALL = [LOWER_UNDERSCORE, PASCAL_CASE, CAMEL_CASE]


# =============================================================================
# INTROSPECTION
# =============================================================================

class IntrospectionRules:
    """Rules for deciding which members of a class are public."""

    PRIVATE_PREFIX = "_"

    # Parameter counts (excluding self) for method members
    ACCESSOR_ARITY = 0
    MUTATOR_ARITY = 1
