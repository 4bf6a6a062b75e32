"""Listing search routes."""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_listings_client
from src.api.schemas import (
    ListingResponse,
    ListingSearchRequest,
    ListingSearchResponse,
    MultiSelectFilterRequest,
    RangeFilterRequest,
)
from src.data.base import ListingsSource
from src.models.filters import (
    DEFAULT_QUERY,
    ListingFilter,
    ListingSearchQuery,
    ListingType,
    MultiSelectFilter,
    RangeFilter,
    ToggleFilter,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/listings", tags=["listings"])


def _build_filter(req) -> ListingFilter:
    if isinstance(req, RangeFilterRequest):
        return RangeFilter(req.field, req.minimum, req.maximum)
    if isinstance(req, MultiSelectFilterRequest):
        return MultiSelectFilter(req.field, tuple(req.values))
    return ToggleFilter(req.field, req.enabled)


def _build_query(req: ListingSearchRequest) -> ListingSearchQuery:
    filters = DEFAULT_QUERY.filters if req.filters is None else tuple(_build_filter(f) for f in req.filters)
    return ListingSearchQuery(
        listing_type=ListingType(req.listing_type),
        filters=filters,
        keywords=req.keywords or None,
    )


@router.post("/search", response_model=ListingSearchResponse)
async def search_listings(
    req: ListingSearchRequest,
    listings: ListingsSource = Depends(get_listings_client),
):
    """Search listings inside a polygon with typed filters."""
    try:
        query = _build_query(req)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    polygon = tuple((lng, lat) for lng, lat in req.polygon)
    try:
        result = await listings.search_listings(polygon, page_size=req.page_size, query=query)
    except httpx.HTTPError as e:
        logger.error("Listing search failed: %s", e)
        raise HTTPException(status_code=502, detail="Failed to fetch listings")

    return ListingSearchResponse(
        listings=[
            ListingResponse(
                price=l.price,
                sqft=l.sqft,
                days_on_market=l.days_on_market,
                bedrooms=l.bedrooms,
                bathrooms=float(l.bathrooms),
                property_type=l.property_type,
            )
            for l in result.listings
        ],
        total=result.total,
    )
