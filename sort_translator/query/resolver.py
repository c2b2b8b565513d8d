"""
Domain type resolution for incoming requests.
"""

from typing import Any, Callable, Optional

from starlette.requests import Request

from sort_translator.schema.repositories import Repositories


class RepositoryDomainClassResolver:
    """
    Resolves the domain type of a request from its URL.

    The first path segment after the base path names the repository, e.g.
    ``/api/persons/1`` resolves to the type exposed under ``persons`` when the
    base path is ``/api``. An endpoint carrying a ``__domain_class__``
    attribute is bound to that type regardless of the URL.
    """

    def __init__(self, repositories: Repositories, base_path: str = ""):
        """
        Initialize resolver.

        Args:
            repositories: Registry of exposed domain types
            base_path: URL prefix in front of repository paths
        """
        self.repositories = repositories
        self.base_path = "/" + base_path.strip("/") if base_path.strip("/") else ""

    def resolve(self, endpoint: Optional[Callable[..., Any]], request: Request) -> Optional[type]:
        """
        Resolve the domain type for a request.

        Args:
            endpoint: Handler function serving the request, if known
            request: Incoming request

        Returns:
            Domain type, or None if no repository matches
        """
        bound = getattr(endpoint, "__domain_class__", None)
        if bound is not None:
            return bound

        repository_path = self._get_repository_path(request.url.path)
        if not repository_path:
            return None

        return self.repositories.get_domain_class(repository_path)

    def _get_repository_path(self, path: str) -> Optional[str]:
        """Extract the repository segment from a request path."""
        if self.base_path:
            if path != self.base_path and not path.startswith(self.base_path + "/"):
                return None
            path = path[len(self.base_path):]

        segments = [segment for segment in path.split("/") if segment]
        return segments[0] if segments else None


def domain_class(type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Bind an endpoint to a domain type.

    Example:
        @app.get("/search/by-name")
        @domain_class(Person)
        def search(...): ...
    """

    def decorator(endpoint: Callable[..., Any]) -> Callable[..., Any]:
        endpoint.__domain_class__ = type_  # type: ignore[attr-defined]
        return endpoint

    return decorator
