"""Elasticsearch adapter for the sort translator."""

from sort_translator.adapters.elasticsearch.sort_renderer import ESSortRenderer

__all__ = ["ESSortRenderer"]
