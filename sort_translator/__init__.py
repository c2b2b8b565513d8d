"""
Sort Translator - mapping-aware sort translation.

Translates sorts expressed in serialized (API) field names into persistent
property paths, never traversing associations.
"""

from sort_translator.core.models import Direction, NullHandling, Order, Sort
from sort_translator.query.sort_translator import SortTranslator
from sort_translator.query.translator import MappingAwareSortTranslator
from sort_translator.orchestrator import SortOrchestrator

__all__ = [
    "Direction",
    "NullHandling",
    "Order",
    "Sort",
    "SortTranslator",
    "MappingAwareSortTranslator",
    "SortOrchestrator",
]
