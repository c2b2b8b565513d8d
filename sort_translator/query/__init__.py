"""Sort parsing, domain type resolution and translation components."""

from sort_translator.query.sort_translator import SortTranslator, split_property_path
from sort_translator.query.translator import MappingAwareSortTranslator
from sort_translator.query.resolver import RepositoryDomainClassResolver, domain_class
from sort_translator.query.sort_parser import SortParameterParser, sort_dependency

__all__ = [
    "SortTranslator",
    "split_property_path",
    "MappingAwareSortTranslator",
    "RepositoryDomainClassResolver",
    "domain_class",
    "SortParameterParser",
    "sort_dependency",
]
