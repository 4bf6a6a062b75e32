"""Listings search API client (Repliers MLS feed)."""

import logging
import re
from decimal import Decimal

import httpx

from src.config import settings
from src.models.community import Polygon
from src.models.filters import (
    DEFAULT_QUERY,
    ListingSearchQuery,
    ListingType,
    MultiSelectField,
    MultiSelectFilter,
    RangeField,
    RangeFilter,
    ToggleField,
    ToggleFilter,
)
from src.models.listing import ListingRecord, ListingSearchResult

logger = logging.getLogger(__name__)

RANGE_PARAMS = {
    RangeField.PRICE: ("minPrice", "maxPrice"),
    RangeField.BEDS: ("minBedrooms", "maxBedrooms"),
    RangeField.BATHS: ("minBaths", "maxBaths"),
    RangeField.SQFT: ("minSqft", "maxSqft"),
    RangeField.LOT_SIZE: ("minLotSizeSqft", "maxLotSizeSqft"),
    RangeField.STORIES: ("minStories", "maxStories"),
    RangeField.YEAR_BUILT: ("minYearBuilt", "maxYearBuilt"),
    RangeField.GARAGE: ("minGarageSpaces", "maxGarageSpaces"),
    RangeField.HOA: ("minMaintenanceFee", "maxMaintenanceFee"),
    RangeField.PROPERTY_TAX: ("minTaxes", "maxTaxes"),
    RangeField.PRICE_PER_SQFT: ("minPricePerSqft", "maxPricePerSqft"),
    RangeField.DAYS_ON_MARKET: ("minDaysOnMarket", "maxDaysOnMarket"),
}

MULTI_SELECT_PARAMS = {
    MultiSelectField.HOME_TYPE: "propertyType",
    MultiSelectField.STATUS: "standardStatus",
    MultiSelectField.FEATURES: "amenities",
    MultiSelectField.POOL_TYPE: "swimmingPool",
    MultiSelectField.FINANCING: "financing",
}

TOGGLE_PARAMS = {
    ToggleField.EXCLUDE_55_PLUS: "exclude55Plus",
    ToggleField.INCLUDE_OUTDOOR_PARKING: "includeOutdoorParking",
    ToggleField.PRICE_REDUCED: "priceReduced",
    ToggleField.BY_AGENT: "byAgent",
    ToggleField.BY_OWNER: "byOwner",
    ToggleField.NEW_CONSTRUCTION: "newConstruction",
    ToggleField.FORECLOSURES: "foreclosures",
    ToggleField.EXCLUDE_SHORT_SALES: "excludeShortSales",
    ToggleField.OPEN_HOUSE_ONLY: "hasOpenHouse",
    ToggleField.VIRTUAL_TOUR_ONLY: "hasVirtualTour",
}

_LISTING_TYPES = {ListingType.SALE: "sale", ListingType.RENT: "lease"}
_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


def _number_param(value: Decimal) -> str:
    return format(value.normalize(), "f")


def build_search_params(query: ListingSearchQuery, page_size: int) -> dict[str, str | list[str]]:
    """Translate a search query into listings API query parameters."""
    params: dict[str, str | list[str]] = {
        "type": _LISTING_TYPES[query.listing_type],
        "resultsPerPage": str(page_size),
        "pageNum": "1",
    }
    for f in query.filters:
        if isinstance(f, RangeFilter):
            min_param, max_param = RANGE_PARAMS[f.field]
            if f.minimum is not None:
                params[min_param] = _number_param(f.minimum)
            if f.maximum is not None:
                params[max_param] = _number_param(f.maximum)
        elif isinstance(f, MultiSelectFilter):
            params[MULTI_SELECT_PARAMS[f.field]] = list(f.values)
        elif isinstance(f, ToggleFilter):
            params[TOGGLE_PARAMS[f.field]] = "true" if f.enabled else "false"
    if query.keywords:
        params["search"] = query.keywords
    return params


def _to_int(value) -> int:
    """Leading number of a numeric or free-text field ("1500-2000" -> 1500)."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return max(int(value), 0)
    match = _NUMBER.search(str(value))
    return max(int(float(match.group())), 0) if match else 0


def _to_decimal(value) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal("0")
    match = _NUMBER.search(str(value))
    return max(Decimal(match.group()), Decimal("0")) if match else Decimal("0")


def parse_listing(raw: dict) -> ListingRecord:
    details = raw.get("details") or {}
    dom = raw.get("daysOnMarket")
    return ListingRecord(
        price=_to_int(raw.get("listPrice")),
        sqft=_to_int(details.get("sqft")),
        days_on_market=_to_int(dom) if dom is not None else None,
        bedrooms=_to_int(details.get("numBedrooms")),
        bathrooms=_to_decimal(details.get("numBathrooms")),
        property_type=details.get("propertyType") or None,
    )


class ListingsClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or settings.listings_api_key
        self.base_url = base_url or settings.listings_base_url
        self.headers = {"REPLIERS-API-KEY": self.api_key, "Accept": "application/json"}
        self.transport = transport

    async def _post(self, endpoint: str, params: dict, body: dict) -> dict:
        async with httpx.AsyncClient(timeout=15.0, transport=self.transport) as client:
            resp = await client.post(
                f"{self.base_url}{endpoint}",
                headers=self.headers,
                params=params,
                json=body,
            )
            resp.raise_for_status()
            return resp.json()

    async def search_listings(
        self,
        polygon: Polygon,
        page_size: int = 200,
        query: ListingSearchQuery | None = None,
    ) -> ListingSearchResult:
        """Search listings inside a polygon.

        HTTP failures propagate: there is no partial result for a failed search.
        """
        params = build_search_params(query or DEFAULT_QUERY, page_size)
        # Single closed ring of [lng, lat] pairs
        body = {"map": [[[lng, lat] for lng, lat in polygon]]}

        data = await self._post("/listings", params, body)

        listings = [parse_listing(raw) for raw in data.get("listings", [])]
        total = _to_int(data.get("count")) or len(listings)
        logger.info("Listings search: %d of %d returned", len(listings), total)
        return ListingSearchResult(listings=listings, total=total)
