"""
MongoDB sort renderer.

Converts translated sorts to pymongo sort specifications.
"""

from typing import Any, Dict, List, Optional, Tuple

import pymongo

from sort_translator.core.models import Sort


class MongoSortRenderer:
    """
    Renders sorts for pymongo cursors and aggregation pipelines.

    Implements the ISortRenderer interface for MongoDB. MongoDB has no
    per-field null ordering, so null handling is left to the server and
    case-insensitive ordering requires a collation on the query.
    """

    def render(self, sort: Optional[Sort]) -> List[Tuple[str, int]]:
        """
        Convert a sort to a pymongo key list.

        Args:
            sort: Translated sort, or None for no ordering

        Returns:
            List of (path, direction) pairs for ``Cursor.sort``
        """
        if not sort:
            return []

        return [
            (order.property, pymongo.ASCENDING if order.is_ascending else pymongo.DESCENDING)
            for order in sort
        ]

    def to_stage(self, sort: Optional[Sort]) -> Optional[Dict[str, Any]]:
        """
        Convert a sort to a ``$sort`` aggregation stage.

        Returns:
            The stage, or None when there is nothing to sort by
        """
        keys = self.render(sort)
        if not keys:
            return None
        return {"$sort": dict(keys)}
