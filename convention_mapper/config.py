import yaml
import logging
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .constants import DefaultOptions
from .domain.naming import NamingConvention, naming_convention_for
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)


# --- Pydantic Model for Mapping Options ---


class MappingOptions(BaseModel):
    """
    Naming conventions and prefixes used while building one type map.

    Instances are frozen: the same options object is passed to every
    resolver call of a build.
    """

    source_member_naming_convention: NamingConvention = Field(
        default_factory=lambda: naming_convention_for(DefaultOptions.SOURCE_NAMING_CONVENTION),
        description="Convention whose separator rejoins split tokens into source member names.",
    )
    destination_member_naming_convention: NamingConvention = Field(
        default_factory=lambda: naming_convention_for(DefaultOptions.DESTINATION_NAMING_CONVENTION),
        description="Convention used to split destination member names into tokens.",
    )
    source_prefixes: Tuple[str, ...] = Field(
        default=DefaultOptions.SOURCE_PREFIXES,
        description="Ordered prefixes stripped from source member names (e.g. 'get_').",
    )
    destination_prefixes: Tuple[str, ...] = Field(
        default=DefaultOptions.DESTINATION_PREFIXES,
        description="Ordered prefixes stripped from destination member names (e.g. 'set_').",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    # --- Custom Field Validators ---

    @field_validator(
        "source_member_naming_convention",
        "destination_member_naming_convention",
        mode="before",
    )
    @classmethod
    def coerce_naming_convention(cls, v: Any) -> Any:
        """Accept a convention identifier such as 'pascal_case'."""
        if isinstance(v, str):
            try:
                return naming_convention_for(v)
            except ConfigurationError as e:
                raise ValueError(e.message)
        return v

    @field_validator("source_prefixes", "destination_prefixes", mode="before")
    @classmethod
    def check_prefixes(cls, v: Any) -> Tuple[str, ...]:
        """Ensure prefixes form a list of non-empty strings."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError("Prefixes must be a list of strings.")
        processed = []
        for index, item in enumerate(v):
            if not isinstance(item, str):
                raise ValueError(
                    f"Prefix at index {index} must be a string, found: {type(item).__name__}"
                )
            if not item.strip():
                raise ValueError(f"Prefix at index {index} cannot be empty or just whitespace.")
            processed.append(item.strip())
        return tuple(processed)


# --- Validation Function ---
def validate_and_parse_options(
    options_dict: Dict[str, Any], config_file: Optional[str] = None
) -> MappingOptions:
    """
    Validates a raw options dictionary against MappingOptions.

    Raises:
        ConfigurationError: With one context entry per invalid location
    """
    try:
        options = MappingOptions.model_validate(options_dict)
        logger.debug("Mapping options parsed and validated successfully.")
        return options
    except ValidationError as e:
        context: Dict[str, Any] = {}
        if config_file:
            context['config_file'] = config_file
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            context[loc_str] = error.get("msg", "Unknown validation error")
        raise ConfigurationError(
            "Mapping options validation failed.",
            context=context,
        )


def load_options(
    config_path: Optional[str] = None, cli_args: Optional[Namespace] = None
) -> MappingOptions:
    """
    Loads mapping options from a YAML file, merges CLI arguments and validates
    the result.

    Raises:
        ConfigurationError: If the file cannot be parsed or the options are invalid
    """
    raw_options: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if config_file.is_file():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Error parsing YAML file {config_path}: {e}",
                    config_file=config_path,
                )
            if yaml_config and isinstance(yaml_config, dict):
                raw_options.update(yaml_config)
                logger.debug(f"Loaded mapping options from {config_path}")
            elif yaml_config:
                logger.warning(
                    f"Content in config file {config_path} is not a dictionary. Ignoring file content."
                )
        else:
            logger.warning(
                f"Config file not found at {config_path}. Using defaults and CLI arguments."
            )

    # 2. Override with CLI arguments (only those explicitly provided)
    if cli_args is not None:
        overridden_keys = set()
        for key, value in vars(cli_args).items():
            if value is not None and key in MappingOptions.model_fields:
                raw_options[key] = value
                overridden_keys.add(key)
        if overridden_keys:
            logger.debug(f"Overridden option keys from CLI arguments: {overridden_keys}")

    return validate_and_parse_options(raw_options, config_file=config_path)
