"""
Registry of repository-managed domain types exposed under URL paths.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from sort_translator.core.models import PersistentEntity
from sort_translator.schema.metadata import PydanticMetadataProvider

logger = logging.getLogger(__name__)


class Repositories:
    """
    Domain types that have an exported repository.

    Each registered domain type is reachable under a path segment, e.g.
    ``Person`` under ``persons``. Only registered domain types resolve to
    metadata; embedded values are known to the metadata provider but have
    no repository of their own.
    """

    def __init__(self, metadata_provider: Optional[PydanticMetadataProvider] = None):
        """
        Initialize repositories.

        Args:
            metadata_provider: Metadata registry the domain types are added to
        """
        self.metadata_provider = metadata_provider or PydanticMetadataProvider()
        self._domain_classes_by_path: Dict[str, type[BaseModel]] = {}
        self._paths_by_domain_class: Dict[type[BaseModel], str] = {}

    def register(self, domain_class: type[BaseModel], path: Optional[str] = None) -> str:
        """
        Register a domain type.

        Args:
            domain_class: Pydantic model managed by a repository
            path: URL path segment, defaults to the lower-cased class name plus "s"

        Returns:
            The path the domain type is exposed under

        Raises:
            ValueError: If the path is already taken by another type
        """
        path = (path or f"{domain_class.__name__.lower()}s").strip("/")

        registered = self._domain_classes_by_path.get(path)
        if registered is not None and registered is not domain_class:
            raise ValueError(f"Path '{path}' is already mapped to {registered.__name__}")

        self.metadata_provider.add_entity(domain_class)
        self._domain_classes_by_path[path] = domain_class
        self._paths_by_domain_class[domain_class] = path
        logger.debug("Exposed repository for %s under '/%s'", domain_class.__name__, path)
        return path

    def get_domain_class(self, path: str) -> Optional[type[BaseModel]]:
        """Get the domain type exposed under a path segment."""
        return self._domain_classes_by_path.get(path.strip("/"))

    def get_path(self, domain_class: Any) -> Optional[str]:
        return self._paths_by_domain_class.get(domain_class)

    def get_persistent_entity(self, type_: Any) -> Optional[PersistentEntity]:
        """
        Get metadata for a repository-managed type.

        Returns:
            PersistentEntity, or None if the type has no repository
        """
        if type_ not in self._paths_by_domain_class:
            return None
        return self.metadata_provider.get_persistent_entity(type_)

    def paths(self) -> List[str]:
        return list(self._domain_classes_by_path)

    def __contains__(self, type_: Any) -> bool:
        return type_ in self._paths_by_domain_class

    def __iter__(self):
        return iter(self._paths_by_domain_class)
