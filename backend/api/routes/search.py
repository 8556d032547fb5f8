"""
Location search API routes.

Searches here are not debounced; HTTP clients debounce on their side.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from domain.errors import DetailResolutionError, ProviderUnavailable
from domain.models import SearchResult
from services.location_search import LocationSearch

router = APIRouter()

_location_search: Optional[LocationSearch] = None


def get_location_search() -> LocationSearch:
    global _location_search
    if _location_search is None:
        _location_search = LocationSearch.from_settings()
    return _location_search


class SearchResultModel(BaseModel):
    id: int
    name: str
    category: str
    lat: float
    lng: float
    external_ref: str | None = None

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultModel":
        return cls(**result.to_dict())

    def to_result(self) -> SearchResult:
        return SearchResult(
            id=self.id,
            name=self.name,
            category=self.category,
            lat=self.lat,
            lng=self.lng,
            external_ref=self.external_ref,
        )


class SearchResponse(BaseModel):
    query: str
    results: List[SearchResultModel]
    degraded: bool = False
    error: str | None = None


@router.get("/places", response_model=SearchResponse)
async def search_places(q: str = ""):
    """Autocomplete a query, falling back to sample data when needed."""
    outcome = await get_location_search().lookup(q)
    error = str(outcome.reason) if outcome.degraded else None
    return SearchResponse(
        query=q,
        results=[SearchResultModel.from_result(r) for r in outcome.results],
        degraded=outcome.degraded,
        error=error,
    )


@router.post("/selection", response_model=SearchResultModel)
async def resolve_selection(candidate: SearchResultModel):
    try:
        resolved = await get_location_search().resolve_selection(candidate.to_result())
    except ProviderUnavailable as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    except DetailResolutionError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return SearchResultModel.from_result(resolved)


@router.post("/session/reset")
async def reset_session():
    get_location_search().reset_session()
    return {"status": "ok"}


@router.get("/points", response_model=List[SearchResultModel])
async def list_points():
    return [SearchResultModel.from_result(p) for p in get_location_search().all_points()]


@router.get("/points/{point_id}", response_model=SearchResultModel)
async def get_point(point_id: int):
    point = get_location_search().get_point(point_id)
    if point is None:
        raise HTTPException(status_code=404, detail="Point not found")
    return SearchResultModel.from_result(point)
