"""
Request-level sort translation.

Resolves the domain type of a request and delegates to the SortTranslator.
"""

import logging
from typing import Optional

from starlette.requests import Request

from sort_translator.core.interfaces import (
    IDomainClassResolver,
    IMetadataProvider,
    ISerializationMappingProvider,
)
from sort_translator.core.models import Sort
from sort_translator.query.sort_translator import SortTranslator

logger = logging.getLogger(__name__)


class MappingAwareSortTranslator:
    """
    Translates sorts that use serialized field names for a request's domain type.

    The domain type is resolved from the request. Translation is skipped and
    the sort returned unchanged if no domain type or no metadata is found.
    """

    def __init__(
        self,
        domain_class_resolver: IDomainClassResolver,
        repositories: IMetadataProvider,
        metadata_provider: IMetadataProvider,
        mapping_provider: ISerializationMappingProvider,
    ):
        """
        Initialize translator.

        Args:
            domain_class_resolver: Resolves the domain type of a request
            repositories: Provides metadata for repository-managed root types
            metadata_provider: Provides metadata for nested property types
            mapping_provider: Provides serialized-name mappings per entity
        """
        self.domain_class_resolver = domain_class_resolver
        self.repositories = repositories
        self.sort_translator = SortTranslator(metadata_provider, mapping_provider)

    def translate_sort(self, input: Sort, request: Request) -> Optional[Sort]:
        """
        Translate serialized field names within a sort to persistent property paths.

        Args:
            input: Sort to translate, must not be None
            request: Current request, must not be None

        Returns:
            Translated sort, None if translation dropped every order, or the
            input itself if the request has no resolvable domain type

        Raises:
            ValueError: If an argument is None
        """
        if input is None:
            raise ValueError("Sort must not be None")
        if request is None:
            raise ValueError("Request must not be None")

        endpoint = request.scope.get("endpoint")
        domain_class = self.domain_class_resolver.resolve(endpoint, request)

        if domain_class is None:
            logger.debug("No domain type for %s, sort left untranslated", request.url.path)
            return input

        persistent_entity = self.repositories.get_persistent_entity(domain_class)
        if persistent_entity is None:
            logger.debug("No metadata for %s, sort left untranslated", domain_class)
            return input

        return self.sort_translator.translate_sort(input, persistent_entity)
