"""
Exceptions raised by Convention Mapper.

Every error carries a machine-readable ``error_code``, a ``context`` mapping
describing what was being processed, and ``suggestions`` a caller can show
to the user. ``str(error)`` renders all three.
"""

from typing import Any, Dict, List, Optional


class ConventionMapperError(Exception):
    """Base class of all Convention Mapper errors."""

    code: Optional[str] = None
    default_suggestions: List[str] = []

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None,
        **details: Any
    ):
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})
        # Keyword details (type_name, member, ...) are folded into the context
        self.context.update({key: value for key, value in details.items() if value})
        self.suggestions = list(suggestions or self.default_suggestions)
        self.error_code = error_code or self.code

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.append(f"Error Code: {self.error_code}")
        if self.context:
            parts.append("Context:")
            parts.extend(f"  {key}: {value}" for key, value in self.context.items())
        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  • {suggestion}" for suggestion in self.suggestions)
        return "\n".join(parts)


class ConfigurationError(ConventionMapperError):
    """
    Invalid mapping configuration.

    Raised for bad option values and config files, for fluent overrides that
    name an unknown member or pass the wrong kind of argument, and when a
    validated TypeMap still has unmapped members.
    """

    code = "CONFIG_ERROR"
    default_suggestions = [
        "Check the member name against the destination type",
        "Pass MemberOption instances (Ignore, MapFrom, UseValue) to for_member",
        "Check the options file against the MappingOptions fields",
    ]

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        destination_type: Optional[str] = None,
        member: Optional[str] = None,
        **kwargs: Any
    ):
        super().__init__(
            message,
            config_file=config_file,
            destination_type=destination_type,
            member=member,
            **kwargs
        )


class TypeNotFoundError(ConventionMapperError):
    """A source or destination type cannot be introspected."""

    code = "TYPE_NOT_FOUND"
    default_suggestions = [
        "Use a class object or a fully qualified 'package.module.ClassName' path",
        "Verify the module is importable from the current environment",
        "Register synthetic types on the StaticTypeCatalog before building",
    ]

    def __init__(self, message: str, type_name: Optional[str] = None, **kwargs: Any):
        super().__init__(message, type_name=type_name, **kwargs)


class NotSupportedError(ConventionMapperError):
    """Resolution needs type information the catalog cannot supply."""

    code = "NOT_SUPPORTED"
    default_suggestions = [
        "Annotate the member with a concrete class return type",
        "Configure the member explicitly with for_member(..., MapFrom(...))",
    ]

    def __init__(
        self,
        message: str,
        feature: Optional[str] = None,
        member: Optional[str] = None,
        **kwargs: Any
    ):
        super().__init__(message, feature=feature, member=member, **kwargs)


def raise_type_not_found(type_name: str, reason: str = "must be a class", **kwargs: Any):
    raise TypeNotFoundError(f"Type <{type_name}> {reason}", type_name=type_name, **kwargs)
