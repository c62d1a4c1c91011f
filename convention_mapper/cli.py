import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from convention_mapper.builder import TypeMapBuilder
from convention_mapper.config import load_options
from convention_mapper.constants import NamingConventionNames
from convention_mapper.domain.models import TypeMap
from convention_mapper.exceptions import ConventionMapperError

from convention_mapper.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_highlight,
    log_section
)

logger = get_colored_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convention-mapper",
        description="Show how the members of a destination type resolve against a source type by naming convention.",
    )
    parser.add_argument(
        "source",
        help="Dotted path of the source class (package.module.ClassName). "
             "Modules are imported from the installed packages and the current directory.",
    )
    parser.add_argument("destination", help="Dotted path of the destination class.")
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a YAML file with mapping options.",
    )
    parser.add_argument(
        "--source-convention",
        dest="source_member_naming_convention",
        choices=NamingConventionNames.ALL,
        help="Naming convention of source members. Overrides config file setting.",
    )
    parser.add_argument(
        "--destination-convention",
        dest="destination_member_naming_convention",
        choices=NamingConventionNames.ALL,
        help="Naming convention of destination members. Overrides config file setting.",
    )
    parser.add_argument(
        "--source-prefix",
        dest="source_prefixes",
        action="append",
        help="Prefix stripped from source member names (repeatable).",
    )
    parser.add_argument(
        "--destination-prefix",
        dest="destination_prefixes",
        action="append",
        help="Prefix stripped from destination member names (repeatable).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the type map as JSON on stdout.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error when a destination member is left unmapped.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    return parser


def add_working_directory_to_path() -> None:
    """Make modules in the current directory importable, as `python -m` does."""
    cwd = os.getcwd()
    if "" not in sys.path and cwd not in sys.path:
        sys.path.insert(0, cwd)


def report_type_map(type_map: TypeMap) -> None:
    """Log one line per destination member."""
    log_section(logger, f"{type_map.source_type.name} -> {type_map.destination_type.name}")
    for property_map in type_map.property_maps:
        if property_map.source_members:
            log_highlight(logger, f"{property_map.member_name} <- {property_map.source_path}")
        else:
            logger.warning(f"{property_map.member_name}: unmapped")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_colored_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        use_colors=not args.no_color,
    )
    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    add_working_directory_to_path()

    try:
        log_progress(logger, "Loading mapping options...")
        options = load_options(args.config, args)

        log_progress(logger, f"Building type map {args.source} -> {args.destination}...")
        type_map = TypeMapBuilder().build(args.source, args.destination, options)
    except ConventionMapperError as e:
        logger.error(f"{e}", exc_info=args.verbose)
        return 1

    if args.json:
        print(json.dumps(type_map.to_dict(), indent=2))
    else:
        report_type_map(type_map)

    unmapped = type_map.unmapped_property_maps()
    if unmapped and args.strict:
        logger.error(f"{len(unmapped)} destination member(s) unmapped in strict mode.")
        return 1

    log_success(logger, f"Type map built: {len(type_map.property_maps)} members, {len(unmapped)} unmapped.")
    return 0
