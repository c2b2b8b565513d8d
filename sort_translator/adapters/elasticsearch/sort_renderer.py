"""
Elasticsearch sort renderer.

Converts translated sorts to Elasticsearch DSL sort clauses.
"""

from typing import Any, Dict, List, Optional

from sort_translator.core.models import NullHandling, Sort

MISSING_VALUES = {
    NullHandling.NULLS_FIRST: "_first",
    NullHandling.NULLS_LAST: "_last",
}


class ESSortRenderer:
    """
    Renders sorts as Elasticsearch sort clauses.

    Implements the ISortRenderer interface for Elasticsearch. Null handling
    maps to the ``missing`` option. Sort clauses have no case-insensitive
    mode, so ignore_case requires a normalized keyword field in the mapping.
    """

    def render(self, sort: Optional[Sort]) -> List[Dict[str, Any]]:
        """
        Convert a sort to the ``sort`` section of a search request.

        Args:
            sort: Translated sort, or None for no ordering

        Returns:
            List of sort clauses
        """
        if not sort:
            return []

        sort_configs = []
        for order in sort:
            config: Dict[str, Any] = {"order": order.direction.value}
            missing = MISSING_VALUES.get(order.null_handling)
            if missing:
                config["missing"] = missing
            sort_configs.append({order.property: config})
        return sort_configs
