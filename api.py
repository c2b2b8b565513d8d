"""
FastAPI REST API for mapping-aware sorting.

Translates sort parameters using serialized field names into persistent
property paths and MongoDB sort specifications.
"""

import logging
import os
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from example_models import Account, Person
from sort_translator import Sort, SortOrchestrator
from sort_translator.core import load_config
from sort_translator.query import sort_dependency

config = load_config()
logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Sort Translator API",
    description="Translate API field names in sort parameters to persistent property paths",
    version="1.0.0",
)

orchestrator = SortOrchestrator.from_mongodb({"people": Person, "accounts": Account}, config=config)
base_path = config.base_path.strip("/")
router = APIRouter(prefix=f"/{base_path}" if base_path else "")


class SortResponse(BaseModel):
    """Response model for sort translation."""

    repository: str = Field(..., description="Repository path the sort applies to")
    requested_sort: Optional[Sort] = Field(None, description="Sort as parsed from the query string")
    translated_sort: Optional[Sort] = Field(None, description="Sort over persistent property paths")
    mongo_sort: List[List[Any]] = Field(default_factory=list, description="Keys for pymongo Cursor.sort")


@router.get("/{repository}", response_model=SortResponse)
def sorted_collection(
    repository: str,
    request: Request,
    sort: Optional[Sort] = Depends(sort_dependency(config)),
):
    """
    Translate the requested sort for a repository.

    Returns the translation without querying any database.
    """
    if orchestrator.repositories.get_domain_class(repository) is None:
        raise HTTPException(status_code=404, detail=f"Unknown repository '{repository}'")

    try:
        translated = orchestrator.translate(sort, request) if sort is not None else None
        mongo_sort = orchestrator.render(translated)
    except Exception as e:
        logger.exception("Sort translation failed for %s", repository)
        raise HTTPException(status_code=500, detail=f"Sort translation failed: {str(e)}")

    return SortResponse(
        repository=repository,
        requested_sort=sort,
        translated_sort=translated,
        mongo_sort=[list(key) for key in mongo_sort],
    )


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("API_PORT", "8000"))
    host = os.getenv("API_HOST", "0.0.0.0")

    uvicorn.run(app, host=host, port=port)
