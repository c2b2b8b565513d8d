"""
Tests for repository lifecycle events.
"""

import pytest
from pydantic import ValidationError

from sort_translator.core.events import (
    AfterCreateEvent,
    AfterLinkSaveEvent,
    BeforeDeleteEvent,
    BeforeLinkDeleteEvent,
    LinkedEntityEvent,
    RepositoryEvent,
)

from example_models import Account, Name, Person


@pytest.fixture
def person():
    return Person(id="1", name=Name(first="Ada", last="Lovelace"))


def test_event_carries_source(person):
    event = AfterCreateEvent(source=person)

    assert event.source is person
    assert isinstance(event, RepositoryEvent)


def test_linked_event_carries_linked_object_and_relation(person):
    account = Account(id="a1", username="ada")

    event = AfterLinkSaveEvent(source=person, linked=account, relation="owner")

    assert event.linked is account
    assert event.relation == "owner"
    assert isinstance(event, LinkedEntityEvent)
    assert BeforeLinkDeleteEvent(source=person, linked=account).relation is None


def test_events_are_immutable(person):
    event = BeforeDeleteEvent(source=person)

    with pytest.raises(ValidationError):
        event.source = None
