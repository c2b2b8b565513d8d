"""Core interfaces and models for the sort translator."""

from sort_translator.core.interfaces import (
    IDomainClassResolver,
    IMetadataProvider,
    ISerializationMappingProvider,
    ISortRenderer,
)
from sort_translator.core.models import (
    Direction,
    NullHandling,
    Order,
    Sort,
    PersistentProperty,
    PersistentEntity,
    TranslatorConfig,
)
from sort_translator.core.config import load_config

__all__ = [
    "IDomainClassResolver",
    "IMetadataProvider",
    "ISerializationMappingProvider",
    "ISortRenderer",
    "Direction",
    "NullHandling",
    "Order",
    "Sort",
    "PersistentProperty",
    "PersistentEntity",
    "TranslatorConfig",
    "load_config",
]
