"""
Naming convention strategies for Convention Mapper.

A naming convention describes how a compound member name is segmented into
tokens and how tokens are rejoined. The destination convention splits
destination member names; the source convention's separator rejoins the
tokens into candidate source member names.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Pattern, Sequence, Type

from ..constants import NamingConventionNames
from ..exceptions import ConfigurationError


class NamingConvention(ABC):
    """Base class for naming conventions."""

    name: str = ""

    @property
    @abstractmethod
    def splitting_expression(self) -> Pattern[str]:
        """Regular expression whose matches are the tokens of a member name."""
        pass

    @property
    @abstractmethod
    def separator_character(self) -> str:
        """Separator placed between tokens when they are rejoined."""
        pass

    def split(self, member_name: str) -> List[str]:
        """
        Split a member name into its tokens.

        Example:
            >>> PascalCaseNamingConvention().split("AddressCity")
            ['Address', 'City']
            >>> LowerUnderscoreNamingConvention().split("address_city")
            ['address', 'city']
        """
        if not member_name:
            return []
        return self.splitting_expression.findall(member_name)

    def join(self, tokens: Sequence[str]) -> str:
        """Rejoin tokens with this convention's separator."""
        return self.separator_character.join(tokens)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LowerUnderscoreNamingConvention(NamingConvention):
    """snake_case names, e.g. ``address_city``."""

    name = NamingConventionNames.LOWER_UNDERSCORE
    _expression = re.compile(r"[A-Za-z0-9]+")

    @property
    def splitting_expression(self) -> Pattern[str]:
        return self._expression

    @property
    def separator_character(self) -> str:
        return "_"


class PascalCaseNamingConvention(NamingConvention):
    """
    PascalCase names, e.g. ``AddressCity``.

    Acronym runs stay together: ``XMLHttpRequest`` splits into
    ``XML``, ``Http`` and ``Request``.
    """

    name = NamingConventionNames.PASCAL_CASE
    _expression = re.compile(r"[A-Z]+(?=$|[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+")

    @property
    def splitting_expression(self) -> Pattern[str]:
        return self._expression

    @property
    def separator_character(self) -> str:
        return ""


class CamelCaseNamingConvention(PascalCaseNamingConvention):
    """camelCase names, e.g. ``addressCity``."""

    name = NamingConventionNames.CAMEL_CASE


_CONVENTIONS: Dict[str, Type[NamingConvention]] = {
    LowerUnderscoreNamingConvention.name: LowerUnderscoreNamingConvention,
    PascalCaseNamingConvention.name: PascalCaseNamingConvention,
    CamelCaseNamingConvention.name: CamelCaseNamingConvention,
}


def naming_convention_for(name: str) -> NamingConvention:
    """
    Look up a naming convention by its configuration identifier.

    Raises:
        ConfigurationError: If no convention is registered under ``name``
    """
    key = name.strip().lower() if isinstance(name, str) else name
    try:
        return _CONVENTIONS[key]()
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unknown naming convention '{name}'",
            suggestions=[f"Use one of: {', '.join(NamingConventionNames.ALL)}"],
        )
