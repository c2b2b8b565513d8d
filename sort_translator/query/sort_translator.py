"""
Sort path translation.

Translates sort orders from serialized (external) field names to persistent
property paths.
"""

import logging
import re
from typing import List, Optional

from sort_translator.core.interfaces import IMetadataProvider, ISerializationMappingProvider
from sort_translator.core.models import Order, PersistentEntity, PersistentProperty, Sort
from sort_translator.schema.mappings import MappedProperties, WrappedProperties

logger = logging.getLogger(__name__)

DELIMITERS = r"_\."
ALL_UPPERCASE = re.compile(r"[A-Z0-9._$]+")
SPLITTER = re.compile(r"(?:[%s]?([%s]*?[^%s]+))".replace("%s", DELIMITERS))


def split_property_path(property_path: str) -> List[str]:
    """
    Split an external property path into segments.

    Segments are separated by '_' or '.'. Repeated delimiters stay attached
    to the following segment and trailing delimiters are discarded.

    Example:
        split_property_path("fooBar.baz_qux") returns ["fooBar", "baz", "qux"]
    """
    return SPLITTER.findall("_" + property_path)


def decapitalize(name: str) -> str:
    """
    Lower-case the first character, unless the first two are both upper case.

    Example:
        decapitalize("FooBar") returns "fooBar", decapitalize("URL") returns "URL"
    """
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


def normalize_segment(segment: str) -> str:
    """Keep constant-style segments, decapitalize everything else."""
    if ALL_UPPERCASE.fullmatch(segment):
        return segment
    return decapitalize(segment)


class SortTranslator:
    """
    Translates sort orders from serialized field names to persistent property paths.

    Orders that cannot be resolved, or that would traverse an association,
    are dropped.
    """

    def __init__(
        self,
        metadata_provider: IMetadataProvider,
        mapping_provider: ISerializationMappingProvider,
    ):
        """
        Initialize sort translator.

        Args:
            metadata_provider: Provides metadata for nested property types
            mapping_provider: Provides serialized-name mappings per entity
        """
        self.metadata_provider = metadata_provider
        self.mapping_provider = mapping_provider

    def translate_sort(self, input: Sort, root_entity: PersistentEntity) -> Optional[Sort]:
        """
        Translate all orders of a sort against a root entity.

        Args:
            input: Sort using serialized field names, must not be None
            root_entity: Entity the sort applies to, must not be None

        Returns:
            Sort with persistent property paths, or None if every order was dropped

        Raises:
            ValueError: If an argument is None
        """
        if input is None:
            raise ValueError("Sort must not be None")
        if root_entity is None:
            raise ValueError("PersistentEntity must not be None")

        mapped_properties = self.mapping_provider.get_mapped_properties(root_entity)
        wrapped_properties = self.mapping_provider.get_wrapped_properties(root_entity)

        filtered_orders: List[Order] = []

        for order in input:
            segments = split_property_path(order.property)
            path = self._map_property_path(mapped_properties, wrapped_properties, root_entity, segments)

            if not path:
                logger.debug("Dropping sort property '%s' for %s", order.property, root_entity.name)
                continue

            filtered_orders.append(order.with_property(".".join(path)))

        if not filtered_orders:
            return None

        return Sort.by(*filtered_orders)

    def _map_property_path(
        self,
        mapped_properties: MappedProperties,
        wrapped_properties: WrappedProperties,
        root_entity: PersistentEntity,
        segments: List[str],
    ) -> List[str]:
        """
        Walk segments through nested entities.

        Returns:
            Persistent property names in traversal order, or an empty list if
            any segment is unknown or denotes an association
        """
        path: List[str] = []
        current_type: Optional[PersistentEntity] = root_entity
        current_properties: Optional[MappedProperties] = mapped_properties
        current_wrapped: Optional[WrappedProperties] = wrapped_properties

        for segment in segments:
            field_name = normalize_segment(segment)

            if current_type is None:
                return []

            if current_properties is None:
                current_properties = self.mapping_provider.get_mapped_properties(current_type)
            if current_wrapped is None:
                current_wrapped = self.mapping_provider.get_wrapped_properties(current_type)

            persistent_properties = self._get_persistent_properties(
                current_properties, current_wrapped, field_name
            )
            if not persistent_properties:
                return []

            for persistent_property in persistent_properties:
                if persistent_property.is_association:
                    return []
                path.append(persistent_property.name)

            current_type = self.metadata_provider.get_persistent_entity(persistent_properties[-1].type)
            current_properties = None
            current_wrapped = None

        return path

    @staticmethod
    def _get_persistent_properties(
        mapped_properties: MappedProperties,
        wrapped_properties: WrappedProperties,
        field_name: str,
    ) -> List[PersistentProperty]:
        """Unwrapped chains take precedence over flat properties."""
        if wrapped_properties.has_persistent_properties_for_field(field_name):
            return wrapped_properties.get_persistent_properties(field_name)

        persistent_property = mapped_properties.get_persistent_property(field_name)
        if persistent_property is None:
            return []
        return [persistent_property]
