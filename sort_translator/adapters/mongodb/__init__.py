"""MongoDB adapter for the sort translator."""

from sort_translator.adapters.mongodb.sort_renderer import MongoSortRenderer

__all__ = ["MongoSortRenderer"]
