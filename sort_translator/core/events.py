"""
Repository lifecycle events.

Plain immutable notifications fired around create, save, delete and link
operations on repository-managed entities.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class RepositoryEvent(BaseModel):
    """Base event carrying the entity the operation was applied to."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: Any


class BeforeCreateEvent(RepositoryEvent):
    """Emitted before a new entity is saved."""


class AfterCreateEvent(RepositoryEvent):
    """Emitted after a new entity is saved."""


class BeforeSaveEvent(RepositoryEvent):
    """Emitted before an existing entity is saved."""


class AfterSaveEvent(RepositoryEvent):
    """Emitted after an existing entity is saved."""


class BeforeDeleteEvent(RepositoryEvent):
    """Emitted before an entity is deleted."""


class AfterDeleteEvent(RepositoryEvent):
    """Emitted after an entity is deleted."""


class LinkedEntityEvent(RepositoryEvent):
    """Base event for operations on an entity linked to its parent."""

    linked: Any
    relation: Optional[str] = None


class BeforeLinkSaveEvent(LinkedEntityEvent):
    """Emitted before saving a linked object to its parent."""


class AfterLinkSaveEvent(LinkedEntityEvent):
    """Emitted after saving a linked object to its parent."""


class BeforeLinkDeleteEvent(LinkedEntityEvent):
    """Emitted before removing a linked object from its parent."""


class AfterLinkDeleteEvent(LinkedEntityEvent):
    """Emitted after removing a linked object from its parent."""
