"""Listing snapshots and the market statistics derived from them."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ListingRecord:
    price: int
    sqft: int = 0  # 0 when unknown
    days_on_market: int | None = None
    bedrooms: int = 0
    bathrooms: Decimal = Decimal("0")
    property_type: str | None = None  # free text, e.g. "Single Family Residence"


@dataclass(frozen=True)
class ListingSearchResult:
    listings: list[ListingRecord] = field(default_factory=list)
    total: int = 0  # upstream match count, may exceed len(listings)


@dataclass(frozen=True)
class CommunityStats:
    # Market
    active_listings: int = 0
    median_price: int = 0
    avg_price: int = 0
    price_per_sqft: int = 0
    avg_days_on_market: int = 0

    # Price range
    min_price: int = 0
    max_price: int = 0

    # Property mix
    single_family_count: int = 0
    condo_count: int = 0
    townhouse_count: int = 0

    # Size
    avg_bedrooms: Decimal = Decimal("0")
    avg_bathrooms: Decimal = Decimal("0")
    avg_sqft: int = 0

    # Price tiers: [0, 500k) [500k, 750k) [750k, 1m) [1m, inf)
    under_500k: int = 0
    range_500k_to_750k: int = 0
    range_750k_to_1m: int = 0
    over_1m: int = 0

    @property
    def tier_total(self) -> int:
        return self.under_500k + self.range_500k_to_750k + self.range_750k_to_1m + self.over_1m
