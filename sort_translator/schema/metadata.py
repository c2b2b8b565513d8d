"""
Persistence metadata for pydantic models.

Builds PersistentEntity descriptions from pydantic model classes and serves
them by type.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel

from sort_translator.core.models import PersistentEntity, PersistentProperty
from sort_translator.schema.markers import Association, Transient, find_marker
from sort_translator.schema.type_mappings import TypeMapper

logger = logging.getLogger(__name__)


class PydanticMetadataProvider:
    """
    Registry of persistent entities built from pydantic models.

    Registering a model also registers every model reachable through its
    fields (embedded values, collection elements and association targets).
    Registration is expected to happen at start-up; lookups afterwards are
    read-only.
    """

    def __init__(self, models: Optional[Iterable[type[BaseModel]]] = None):
        """
        Initialize metadata provider.

        Args:
            models: Model classes to register right away
        """
        self._entities: Dict[Any, PersistentEntity] = {}
        for model in models or []:
            self.add_entity(model)

    def add_entity(self, model: type[BaseModel]) -> PersistentEntity:
        """
        Register a model class.

        Args:
            model: Pydantic model class

        Returns:
            PersistentEntity for the model

        Raises:
            ValueError: If the type is not a pydantic model
        """
        if not TypeMapper.is_model_type(model):
            raise ValueError(f"Type {model!r} is not a pydantic model")

        existing = self._entities.get(model)
        if existing is not None:
            return existing

        entity = self._build_entity(model)
        self._entities[model] = entity
        logger.debug("Registered entity %s with properties %s", entity.name, list(entity.properties))

        for prop in entity:
            if TypeMapper.is_model_type(prop.actual_type):
                self.add_entity(prop.actual_type)

        return entity

    def get_persistent_entity(self, type_: Any) -> Optional[PersistentEntity]:
        """
        Get metadata for a type.

        Args:
            type_: Type to look up

        Returns:
            Registered PersistentEntity, or None for unknown and simple types
        """
        if type_ is None or TypeMapper.is_simple_type(type_):
            return None
        return self._entities.get(type_)

    def get_managed_types(self) -> List[Any]:
        """Return all registered types in registration order."""
        return list(self._entities)

    def _build_entity(self, model: type[BaseModel]) -> PersistentEntity:
        """Build entity metadata from the model's fields."""
        properties: Dict[str, PersistentProperty] = {}

        for field_name, field_info in model.model_fields.items():
            if find_marker(field_info, Transient) is not None:
                continue

            declared, element = TypeMapper.resolve(field_info.annotation)
            properties[field_name] = PersistentProperty(
                name=field_name,
                type=declared,
                element_type=element,
                is_association=find_marker(field_info, Association) is not None,
            )

        return PersistentEntity(type=model, properties=properties)
