"""Model metadata and serialization mappings."""

from sort_translator.schema.type_mappings import TypeMapper
from sort_translator.schema.markers import Association, Transient, Unwrapped
from sort_translator.schema.metadata import PydanticMetadataProvider
from sort_translator.schema.mappings import MappedProperties, WrappedProperties, PydanticMappingProvider
from sort_translator.schema.repositories import Repositories

__all__ = [
    "TypeMapper",
    "Association",
    "Transient",
    "Unwrapped",
    "PydanticMetadataProvider",
    "MappedProperties",
    "WrappedProperties",
    "PydanticMappingProvider",
    "Repositories",
]
