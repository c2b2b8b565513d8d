"""
Parsing of sort query parameters.

Supports the ``?sort=property,property(,asc|desc)(,ignorecase)`` syntax;
the parameter may be repeated to sort by properties in different directions.
"""

from typing import Callable, Iterable, List, Optional

from starlette.requests import Request

from sort_translator.core.models import Direction, Order, Sort, TranslatorConfig

IGNORE_CASE = "ignorecase"


class SortParameterParser:
    """
    Builds a Sort from raw sort parameter values.
    """

    def __init__(self, config: Optional[TranslatorConfig] = None):
        """
        Initialize parser.

        Args:
            config: Parameter name and delimiter settings
        """
        self.config = config or TranslatorConfig()

    def parse(self, values: Iterable[str]) -> Optional[Sort]:
        """
        Parse sort parameter values.

        Args:
            values: Raw values, one per occurrence of the sort parameter

        Returns:
            Sort with all parsed orders, or None if nothing could be parsed
        """
        orders: List[Order] = []

        for value in values:
            if value is None:
                continue
            orders.extend(self._parse_value(value))

        if not orders:
            return None
        return Sort.by(*orders)

    def from_request(self, request: Request) -> Optional[Sort]:
        """Parse the configured sort parameter of a request."""
        return self.parse(request.query_params.getlist(self.config.sort_parameter))

    def _parse_value(self, value: str) -> List[Order]:
        elements = [element.strip() for element in value.split(self.config.property_delimiter)]

        ignore_case = False
        if len(elements) > 1 and elements[-1].lower() == IGNORE_CASE:
            ignore_case = True
            elements = elements[:-1]

        direction = None
        if len(elements) > 1:
            direction = Direction.from_optional_string(elements[-1])
            if direction is not None:
                elements = elements[:-1]

        orders = []
        for element in elements:
            if not element:
                continue
            order = Order(property=element, direction=direction or Direction.ASC)
            orders.append(order.ignoring_case() if ignore_case else order)
        return orders


def sort_dependency(config: Optional[TranslatorConfig] = None) -> Callable[[Request], Optional[Sort]]:
    """
    Build a FastAPI dependency returning the request's parsed sort.

    Example:
        @app.get("/persons")
        def list_persons(sort: Optional[Sort] = Depends(sort_dependency())): ...
    """
    parser = SortParameterParser(config)

    def dependency(request: Request) -> Optional[Sort]:
        return parser.from_request(request)

    return dependency
