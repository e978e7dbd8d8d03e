import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from src.dependencies import get_search_service
from src.errors import DocumentStoreError, RateLimitError
from src.schemas import SearchRequest, SearchResponse
from src.services import SearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes-search", tags=["notes-search"])


async def _run_search(service: SearchService, query: str) -> SearchResponse:
    try:
        results = await service.search(query)
    except RateLimitError as e:
        raise HTTPException(status_code=503, detail=f"Search failed: {str(e)}")
    except DocumentStoreError as e:
        raise HTTPException(status_code=502, detail=f"Search failed: {str(e)}")
    except Exception as e:
        logger.exception("Unexpected search failure")
        raise HTTPException(status_code=500, detail=f"Search failed: {str(e)}")

    return SearchResponse(query=query, count=len(results), results=results)


@router.get("/search", response_model=SearchResponse)
async def search_get(
    q: str = Query(default="", description="Keyword to match against names and tags"),
    service: SearchService = Depends(get_search_service),
):
    """Search documents by filename substring or exact tag."""
    return await _run_search(service, q)


@router.post("/search", response_model=SearchResponse)
async def search_post(
    request: SearchRequest, service: SearchService = Depends(get_search_service)
):
    """Search documents by filename substring or exact tag."""
    return await _run_search(service, request.query)


@router.get("/health")
async def search_health_check():
    """Simple health check for search endpoints."""
    return {"status": "search endpoints available"}
