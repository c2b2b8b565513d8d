"""
Abstract interfaces for sort translation collaborators.

These protocols define the contract that metadata sources, serialization
mapping sources, domain class resolvers and sort renderers must implement
to work with the sort translator.
"""

from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

from starlette.requests import Request

from sort_translator.core.models import PersistentEntity, Sort

if TYPE_CHECKING:
    from sort_translator.schema.mappings import MappedProperties, WrappedProperties


class IDomainClassResolver(Protocol):
    """
    Resolve the domain type a request is about.

    Implementations typically look at the request URL or at the endpoint
    handling it.
    """

    def resolve(self, endpoint: Optional[Callable[..., Any]], request: Request) -> Optional[type]:
        """
        Resolve the domain type for a request.

        Args:
            endpoint: Handler function serving the request, if known
            request: Incoming request

        Returns:
            Domain type, or None if the request cannot be tied to one
        """
        ...


class IMetadataProvider(Protocol):
    """
    Provide persistence metadata for modeled types.

    Simple value types (str, int, datetime, ...) have no metadata.
    """

    def get_persistent_entity(self, type_: Any) -> Optional[PersistentEntity]:
        """
        Get metadata for a type.

        Args:
            type_: Type to look up

        Returns:
            PersistentEntity, or None if the type is not modeled
        """
        ...


class ISerializationMappingProvider(Protocol):
    """
    Map external (serialized) field names to persistent properties.

    Mappings are derived from the live serialization configuration of a type
    and are expected to be rebuilt on every call.
    """

    def get_mapped_properties(self, entity: PersistentEntity) -> "MappedProperties":
        """
        Build the flat mapping for an entity.

        Args:
            entity: Entity whose serialized field names are mapped

        Returns:
            MappedProperties from external field name to a single property
        """
        ...

    def get_wrapped_properties(self, entity: PersistentEntity) -> "WrappedProperties":
        """
        Build the unwrap-aware mapping for an entity.

        Args:
            entity: Entity whose unwrapped (flattened) fields are mapped

        Returns:
            WrappedProperties from external field name to a property chain
        """
        ...


class ISortRenderer(Protocol):
    """
    Render a translated sort into a backend-specific sort specification.
    """

    def render(self, sort: Optional[Sort]) -> Any:
        """
        Convert a sort to the backend format.

        Args:
            sort: Translated sort, or None for "no ordering"

        Returns:
            Backend-specific sort specification
        """
        ...
