"""Shared fixtures for sort translator tests."""

from typing import Any, Callable, Dict, List, Optional

import pytest
from starlette.requests import Request

from sort_translator.core.models import PersistentEntity, PersistentProperty
from sort_translator.schema import (
    MappedProperties,
    PydanticMappingProvider,
    PydanticMetadataProvider,
    Repositories,
    WrappedProperties,
)

from example_models import Account, Person


def make_request(path: str, query: str = "", endpoint: Optional[Callable[..., Any]] = None) -> Request:
    """Build a bare Starlette request for a path and query string."""
    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "root_path": "",
        "query_string": query.encode(),
        "headers": [],
    }
    if endpoint is not None:
        scope["endpoint"] = endpoint
    return Request(scope)


class FakeMetadataProvider:
    """Metadata provider backed by a plain dict."""

    def __init__(self, entities: Dict[Any, PersistentEntity]):
        self.entities = entities

    def get_persistent_entity(self, type_: Any) -> Optional[PersistentEntity]:
        return self.entities.get(type_)


class FakeMappingProvider:
    """Mapping provider backed by dicts, counting how often mappings are built."""

    def __init__(
        self,
        flat: Dict[Any, Dict[str, PersistentProperty]],
        wrapped: Optional[Dict[Any, Dict[str, List[PersistentProperty]]]] = None,
    ):
        self.flat = flat
        self.wrapped = wrapped or {}
        self.mapped_calls: List[Any] = []
        self.wrapped_calls: List[Any] = []

    def get_mapped_properties(self, entity: PersistentEntity) -> MappedProperties:
        self.mapped_calls.append(entity.type)
        return MappedProperties(self.flat.get(entity.type, {}))

    def get_wrapped_properties(self, entity: PersistentEntity) -> WrappedProperties:
        self.wrapped_calls.append(entity.type)
        return WrappedProperties(self.wrapped.get(entity.type, {}))


@pytest.fixture
def metadata_provider():
    return PydanticMetadataProvider([Person])


@pytest.fixture
def mapping_provider(metadata_provider):
    return PydanticMappingProvider(metadata_provider)


@pytest.fixture
def person_entity(metadata_provider):
    return metadata_provider.get_persistent_entity(Person)


@pytest.fixture
def repositories():
    repositories = Repositories(PydanticMetadataProvider())
    repositories.register(Person, path="people")
    repositories.register(Account)
    return repositories
