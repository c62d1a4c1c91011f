"""
Registry of type maps built for an application.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

from .builder import TypeMapBuilder
from .config import MappingOptions
from .domain.models import TypeMap
from .exceptions import ConfigurationError
from .fluent import MappingFluentSyntax


logger = logging.getLogger(__name__)


class MappingConfiguration:
    """
    Creates and keeps the type maps of an application.

    Type maps are keyed by the (source, destination) descriptor names, so a
    class and its dotted path refer to the same map.
    """

    def __init__(
        self,
        options: Optional[MappingOptions] = None,
        builder: Optional[TypeMapBuilder] = None,
    ):
        self.options = options if options is not None else MappingOptions()
        self.builder = builder or TypeMapBuilder()
        self._type_maps: Dict[Tuple[str, str], TypeMap] = {}
        self._lock = threading.Lock()

    def create_map(
        self,
        source_type: Any,
        destination_type: Any,
        options: Optional[MappingOptions] = None,
    ) -> MappingFluentSyntax:
        """Build and register a type map, replacing any previous one for the pair."""
        type_map = self.builder.build(source_type, destination_type, options or self.options)
        key = (type_map.source_type.name, type_map.destination_type.name)
        with self._lock:
            if key in self._type_maps:
                logger.debug(f"Replacing type map {key[0]} -> {key[1]}")
            self._type_maps[key] = type_map
        return MappingFluentSyntax(type_map)

    def find_type_map(self, source_type: Any, destination_type: Any) -> Optional[TypeMap]:
        key = (
            self.builder.catalog.describe(source_type).name,
            self.builder.catalog.describe(destination_type).name,
        )
        with self._lock:
            return self._type_maps.get(key)

    def get_type_map(self, source_type: Any, destination_type: Any) -> TypeMap:
        """
        Return the registered type map for a pair.

        Raises:
            ConfigurationError: If no map was created for the pair
        """
        type_map = self.find_type_map(source_type, destination_type)
        if type_map is None:
            raise ConfigurationError(
                f"Missing type map configuration for {source_type!r} -> {destination_type!r}",
                suggestions=["Call create_map(source, destination) first"],
            )
        return type_map

    @property
    def type_maps(self) -> List[TypeMap]:
        with self._lock:
            return list(self._type_maps.values())

    def assert_configuration_is_valid(self) -> None:
        """Validate every registered type map."""
        for type_map in self.type_maps:
            type_map.validate()
