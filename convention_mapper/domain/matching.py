"""
Member name matching for Convention Mapper.

Two member names denote the same concept when their candidate name sets
intersect case-insensitively. A candidate set holds the name itself plus the
name with each configured prefix stripped.
"""

from typing import List, Sequence


def possible_names(member_name: str, prefixes: Sequence[str]) -> List[str]:
    """
    Build the candidate names for one side of a comparison.

    An empty name yields no candidates, so it never matches anything.

    Example:
        >>> possible_names("GetName", ["Get"])
        ['GetName', 'Name']
    """
    if not member_name:
        return []

    names = [member_name]
    lowered = member_name.lower()
    for prefix in prefixes:
        if prefix and lowered.startswith(prefix.lower()):
            stripped = member_name[len(prefix):]
            if stripped:
                names.append(stripped)
    return names


def name_matches(
    source_name: str,
    destination_name: str,
    source_prefixes: Sequence[str] = (),
    destination_prefixes: Sequence[str] = (),
) -> bool:
    """Check whether a source and a destination member name match."""
    source_names = {name.casefold() for name in possible_names(source_name, source_prefixes)}
    if not source_names:
        return False
    return any(
        name.casefold() in source_names
        for name in possible_names(destination_name, destination_prefixes)
    )


class NameMatcher:
    """Matches member names using the prefixes of a set of mapping options."""

    def matches(
        self,
        source_name: str,
        destination_name: str,
        source_prefixes: Sequence[str],
        destination_prefixes: Sequence[str],
    ) -> bool:
        return name_matches(source_name, destination_name, source_prefixes, destination_prefixes)
