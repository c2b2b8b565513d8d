"""
Sort orchestrator - main entry point.

Coordinates all components to provide a unified sort translation interface.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Union

from pydantic import BaseModel
from starlette.requests import Request

from sort_translator.core.interfaces import ISortRenderer
from sort_translator.core.models import Sort, TranslatorConfig
from sort_translator.schema.metadata import PydanticMetadataProvider
from sort_translator.schema.mappings import PydanticMappingProvider
from sort_translator.schema.repositories import Repositories
from sort_translator.query.resolver import RepositoryDomainClassResolver
from sort_translator.query.sort_parser import SortParameterParser
from sort_translator.query.translator import MappingAwareSortTranslator

logger = logging.getLogger(__name__)

ModelRegistrations = Union[Dict[str, type[BaseModel]], Iterable[type[BaseModel]]]


class SortOrchestrator:
    """
    Main orchestrator for mapping-aware sort translation.

    Coordinates repository registration, metadata and mapping providers,
    domain type resolution, sort parameter parsing, translation and
    rendering for a storage backend.
    """

    def __init__(
        self,
        repositories: Repositories,
        renderer: Optional[ISortRenderer] = None,
        config: Optional[TranslatorConfig] = None,
    ):
        """
        Initialize sort orchestrator.

        Args:
            repositories: Registry of exposed domain types
            renderer: Backend-specific sort renderer
            config: Parsing, alias and URL settings
        """
        self.config = config or TranslatorConfig()
        self.repositories = repositories
        self.renderer = renderer

        metadata_provider = repositories.metadata_provider
        self.mapping_provider = PydanticMappingProvider(metadata_provider, by_alias=self.config.by_alias)
        self.domain_class_resolver = RepositoryDomainClassResolver(repositories, base_path=self.config.base_path)
        self.parser = SortParameterParser(self.config)
        self.translator = MappingAwareSortTranslator(
            domain_class_resolver=self.domain_class_resolver,
            repositories=repositories,
            metadata_provider=metadata_provider,
            mapping_provider=self.mapping_provider,
        )

    @classmethod
    def from_models(
        cls,
        models: ModelRegistrations,
        renderer: Optional[ISortRenderer] = None,
        config: Optional[TranslatorConfig] = None,
    ) -> "SortOrchestrator":
        """
        Create orchestrator for a set of domain models.

        Args:
            models: Either a mapping of URL path to model, or model classes
                exposed under their default paths
            renderer: Backend-specific sort renderer
            config: Parsing, alias and URL settings

        Returns:
            Configured SortOrchestrator
        """
        repositories = Repositories(PydanticMetadataProvider())

        if isinstance(models, dict):
            for path, model in models.items():
                repositories.register(model, path=path)
        else:
            for model in models:
                repositories.register(model)

        logger.info("Exposing sortable repositories: %s", ", ".join(repositories.paths()))
        return cls(repositories, renderer=renderer, config=config)

    @classmethod
    def from_mongodb(
        cls, models: ModelRegistrations, config: Optional[TranslatorConfig] = None
    ) -> "SortOrchestrator":
        """
        Create orchestrator rendering pymongo sort specifications.

        Args:
            models: Domain models, see from_models
            config: Parsing, alias and URL settings

        Returns:
            Configured SortOrchestrator for MongoDB
        """
        from sort_translator.adapters.mongodb import MongoSortRenderer

        return cls.from_models(models, renderer=MongoSortRenderer(), config=config)

    @classmethod
    def from_elasticsearch(
        cls, models: ModelRegistrations, config: Optional[TranslatorConfig] = None
    ) -> "SortOrchestrator":
        """
        Create orchestrator rendering Elasticsearch sort clauses.

        Args:
            models: Domain models, see from_models
            config: Parsing, alias and URL settings

        Returns:
            Configured SortOrchestrator for Elasticsearch
        """
        from sort_translator.adapters.elasticsearch import ESSortRenderer

        return cls.from_models(models, renderer=ESSortRenderer(), config=config)

    def translate(self, sort: Sort, request: Request) -> Optional[Sort]:
        """
        Translate a sort for the domain type of a request.

        Args:
            sort: Sort using serialized field names
            request: Current request

        Returns:
            Translated sort, None if every order was dropped
        """
        return self.translator.translate_sort(sort, request)

    def translate_request(self, request: Request) -> Optional[Sort]:
        """
        Parse the request's sort parameter and translate it.

        Returns:
            Translated sort, or None if the request asks for no ordering or
            every order was dropped
        """
        sort = self.parser.from_request(request)
        if sort is None:
            return None
        return self.translate(sort, request)

    def render(self, sort: Optional[Sort]) -> Any:
        """
        Render a sort for the configured backend.

        Raises:
            ValueError: If no renderer is configured
        """
        if self.renderer is None:
            raise ValueError("No sort renderer configured. Use from_mongodb() or from_elasticsearch().")
        return self.renderer.render(sort)
