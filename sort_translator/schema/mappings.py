"""
Serialization-name mappings for persistent entities.

Maps the field names a pydantic model exposes in its serialized form
(aliases, alias generators, unwrapped sub-objects) to persistent properties.
"""

from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple

from pydantic.fields import FieldInfo

from sort_translator.core.interfaces import IMetadataProvider
from sort_translator.core.models import PersistentEntity, PersistentProperty
from sort_translator.schema.markers import Unwrapped, find_marker
from sort_translator.schema.type_mappings import TypeMapper

NameTransformer = Callable[[str], str]


def _identity(name: str) -> str:
    return name


def serialized_name(field_name: str, field_info: FieldInfo, by_alias: bool = True) -> str:
    """
    Get the name a field is serialized under.

    Args:
        field_name: Attribute name of the field
        field_info: Pydantic field information
        by_alias: Whether serialization uses aliases

    Returns:
        External field name
    """
    if not by_alias:
        return field_name
    return field_info.serialization_alias or field_info.alias or field_name


def serialized_properties(
    entity: PersistentEntity, by_alias: bool = True
) -> Iterable[Tuple[str, FieldInfo, PersistentProperty]]:
    """
    Yield (external name, field info, property) for every serialized persistent field.

    Fields excluded from serialization and fields without a persistent
    property are skipped.
    """
    if not TypeMapper.is_model_type(entity.type):
        return

    for field_name, field_info in entity.type.model_fields.items():
        if field_info.exclude is True:
            continue

        persistent_property = entity.get_persistent_property(field_name)
        if persistent_property is None:
            continue

        yield serialized_name(field_name, field_info, by_alias), field_info, persistent_property


class MappedProperties:
    """
    Flat mapping from external field names to persistent properties of one entity.
    """

    def __init__(self, field_name_to_property: Dict[str, PersistentProperty]):
        """
        Initialize mapping.

        Args:
            field_name_to_property: External field name to persistent property
        """
        self._field_name_to_property = dict(field_name_to_property)
        self._property_to_field_name = {
            prop.name: field_name for field_name, prop in self._field_name_to_property.items()
        }

    @classmethod
    def from_model(cls, entity: PersistentEntity, by_alias: bool = True) -> "MappedProperties":
        """
        Build the mapping from the entity's pydantic serialization configuration.

        Args:
            entity: Entity backed by a pydantic model
            by_alias: Whether serialization uses aliases

        Returns:
            MappedProperties for the entity
        """
        return cls(
            {
                field_name: persistent_property
                for field_name, _, persistent_property in serialized_properties(entity, by_alias)
            }
        )

    def has_persistent_property_for_field(self, field_name: str) -> bool:
        return field_name in self._field_name_to_property

    def get_persistent_property(self, field_name: str) -> Optional[PersistentProperty]:
        return self._field_name_to_property.get(field_name)

    def get_field_name(self, property_name: str) -> Optional[str]:
        """Reverse lookup: external field name for an internal property name."""
        return self._property_to_field_name.get(property_name)

    def __len__(self) -> int:
        return len(self._field_name_to_property)


class WrappedProperties:
    """
    Mapping from external field names to chains of persistent properties.

    An entry exists for every field inlined into the entity's serialized form
    through an unwrapped sub-object. The chain starts with the unwrapped
    property and ends with the property holding the value.
    """

    def __init__(self, field_name_to_properties: Dict[str, List[PersistentProperty]]):
        """
        Initialize mapping.

        Args:
            field_name_to_properties: External field name to property chain
        """
        self._field_name_to_properties = {
            field_name: list(chain) for field_name, chain in field_name_to_properties.items()
        }

    @classmethod
    def from_model(
        cls,
        metadata_provider: IMetadataProvider,
        entity: PersistentEntity,
        by_alias: bool = True,
    ) -> "WrappedProperties":
        """
        Discover unwrapped fields of an entity, recursing into nested unwraps.

        Args:
            metadata_provider: Provider used to resolve unwrapped types
            entity: Entity backed by a pydantic model
            by_alias: Whether serialization uses aliases

        Returns:
            WrappedProperties for the entity
        """
        paths = _find_unwrapped_property_paths(
            metadata_provider, entity, _identity, False, by_alias, frozenset({entity.type})
        )
        return cls(paths)

    def has_persistent_properties_for_field(self, field_name: str) -> bool:
        return field_name in self._field_name_to_properties

    def get_persistent_properties(self, field_name: str) -> List[PersistentProperty]:
        return list(self._field_name_to_properties.get(field_name, []))

    def __len__(self) -> int:
        return len(self._field_name_to_properties)


def _find_unwrapped_property_paths(
    metadata_provider: IMetadataProvider,
    entity: PersistentEntity,
    name_transformer: NameTransformer,
    consider_regular_properties: bool,
    by_alias: bool,
    enclosing_types: FrozenSet[Any],
) -> Dict[str, List[PersistentProperty]]:
    """
    Collect property chains for unwrapped fields.

    Regular fields only count once inside an unwrapped type; at the top level
    only unwrapped fields produce entries. An unwrapped field whose type
    already encloses it is skipped.
    """
    mapping: Dict[str, List[PersistentProperty]] = {}

    for field_name, field_info, persistent_property in serialized_properties(entity, by_alias):
        unwrapped = find_marker(field_info, Unwrapped)

        if unwrapped is not None and unwrapped.enabled:
            nested_entity = metadata_provider.get_persistent_entity(persistent_property.actual_type)
            if nested_entity is None or nested_entity.type in enclosing_types:
                continue

            def chained(name: str, outer: NameTransformer = name_transformer, inner: Unwrapped = unwrapped) -> str:
                return outer(inner.transform(name))

            nested = _find_unwrapped_property_paths(
                metadata_provider, nested_entity, chained, True, by_alias, enclosing_types | {nested_entity.type}
            )
            for nested_name, chain in nested.items():
                mapping[nested_name] = [persistent_property, *chain]

        elif consider_regular_properties:
            mapping[name_transformer(field_name)] = [persistent_property]

    return mapping


class PydanticMappingProvider:
    """
    Serialization mapping provider reading pydantic model configuration.

    Mappings are rebuilt on every call so they always reflect the current
    model configuration.
    """

    def __init__(self, metadata_provider: IMetadataProvider, by_alias: bool = True):
        """
        Initialize mapping provider.

        Args:
            metadata_provider: Provider used to resolve nested types
            by_alias: Whether serialization uses aliases
        """
        self.metadata_provider = metadata_provider
        self.by_alias = by_alias

    def get_mapped_properties(self, entity: PersistentEntity) -> MappedProperties:
        return MappedProperties.from_model(entity, self.by_alias)

    def get_wrapped_properties(self, entity: PersistentEntity) -> WrappedProperties:
        return WrappedProperties.from_model(self.metadata_provider, entity, self.by_alias)
