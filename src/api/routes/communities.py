"""Community routes: market stats, demographics, description."""

import logging
from dataclasses import asdict

import httpx
from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_census_client, get_community_registry, get_listings_client
from src.api.schemas import (
    BoundingBoxResponse,
    CommunityResponse,
    CommunityStatsEnvelope,
    CommunityStatsResponse,
    DemographicsEnvelope,
    DemographicsResponse,
    DescriptionResponse,
)
from src.config import settings
from src.data.base import CommunitySource, DemographicsSource, ListingsSource
from src.engine.community_stats import aggregate_listings
from src.engine.description import describe_community
from src.engine.geo import bounding_box, select_units
from src.models.community import Community
from src.models.demographics import DemographicData
from src.models.listing import CommunityStats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/communities", tags=["communities"])


def _get_community(slug: str, registry: CommunitySource) -> Community:
    community = registry.get_by_slug(slug)
    if community is None or not community.has_valid_polygon:
        raise HTTPException(status_code=404, detail="Community not found")
    return community


async def _community_stats(community: Community, listings: ListingsSource) -> CommunityStats:
    result = await listings.search_listings(community.polygon, page_size=settings.listings_page_size)
    return aggregate_listings(result.listings, result.total)


def _stats_response(stats: CommunityStats) -> CommunityStatsResponse:
    data = asdict(stats)
    data["avg_bedrooms"] = float(stats.avg_bedrooms)
    data["avg_bathrooms"] = float(stats.avg_bathrooms)
    return CommunityStatsResponse(**data)


def _demographics_response(demographics: DemographicData) -> DemographicsResponse:
    data = asdict(demographics)
    data["median_age"] = float(demographics.median_age)
    data["average_household_size"] = float(demographics.average_household_size)
    data["unemployment_rate"] = float(demographics.unemployment_rate)
    return DemographicsResponse(**data)


@router.get("/{slug}", response_model=CommunityResponse)
async def get_community(
    slug: str,
    registry: CommunitySource = Depends(get_community_registry),
):
    """Get a community definition."""
    community = _get_community(slug, registry)
    box = bounding_box(community.polygon)
    return CommunityResponse(
        slug=community.slug,
        name=community.name,
        county=community.county,
        vertex_count=len(community.polygon),
        bounding_box=BoundingBoxResponse(**asdict(box)),
    )


@router.get("/{slug}/stats", response_model=CommunityStatsEnvelope)
async def get_community_stats(
    slug: str,
    registry: CommunitySource = Depends(get_community_registry),
    listings: ListingsSource = Depends(get_listings_client),
):
    """Aggregate market statistics for the listings inside a community."""
    community = _get_community(slug, registry)
    try:
        stats = await _community_stats(community, listings)
    except httpx.HTTPError as e:
        logger.error("Community stats failed for %s: %s", slug, e)
        raise HTTPException(status_code=502, detail="Failed to fetch community stats")

    return CommunityStatsEnvelope(stats=_stats_response(stats))


@router.get("/{slug}/demographics", response_model=DemographicsEnvelope)
async def get_community_demographics(
    slug: str,
    registry: CommunitySource = Depends(get_community_registry),
    census: DemographicsSource = Depends(get_census_client),
):
    """Population-weighted ACS demographics for the community's zip codes.

    demographics is null when no population data is available.
    """
    community = _get_community(slug, registry)
    zips = select_units(community.polygon, registry.candidate_zips())
    demographics = await census.get_demographics_for_zips(zips)
    if demographics is None:
        return DemographicsEnvelope(demographics=None)
    return DemographicsEnvelope(demographics=_demographics_response(demographics))


@router.get("/{slug}/description", response_model=DescriptionResponse)
async def get_community_description(
    slug: str,
    registry: CommunitySource = Depends(get_community_registry),
    listings: ListingsSource = Depends(get_listings_client),
):
    """Generated community description; market sentences need live listings."""
    community = _get_community(slug, registry)
    stats = None
    try:
        stats = await _community_stats(community, listings)
    except httpx.HTTPError as e:
        logger.warning("Listings unavailable for %s description: %s", slug, e)

    return DescriptionResponse(description=describe_community(community.name, community.county, stats))
