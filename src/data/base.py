"""Protocol definitions for data sources.

Each protocol defines the interface that concrete data source implementations must satisfy.
"""

from typing import Protocol, runtime_checkable

from src.models.community import Community, Polygon
from src.models.demographics import DemographicData
from src.models.filters import ListingSearchQuery
from src.models.listing import ListingSearchResult


@runtime_checkable
class ListingsSource(Protocol):
    async def search_listings(
        self,
        polygon: Polygon,
        page_size: int = 200,
        query: ListingSearchQuery | None = None,
    ) -> ListingSearchResult:
        """Fetch listings inside a polygon plus the total match count."""
        ...


@runtime_checkable
class DemographicsSource(Protocol):
    async def get_demographics_for_zips(self, zips: list[str]) -> DemographicData | None:
        """Aggregate survey data for a set of zip codes."""
        ...


@runtime_checkable
class CommunitySource(Protocol):
    def get_by_slug(self, slug: str) -> Community | None:
        """Look up a community definition."""
        ...

    def candidate_zips(self) -> list[str]:
        """Zip codes that may fall inside any known community."""
        ...
