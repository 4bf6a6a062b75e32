"""Listing search filters.

Each filter category is its own type so a filter can only carry the shape of
value its field accepts: numeric bounds for ranges, a value set for
multi-selects, a flag for toggles.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class ListingType(Enum):
    SALE = "sale"
    RENT = "rent"


class RangeField(Enum):
    PRICE = "price"
    BEDS = "beds"
    BATHS = "baths"
    SQFT = "sqft"
    LOT_SIZE = "lot_size"
    STORIES = "stories"
    YEAR_BUILT = "year_built"
    GARAGE = "garage"
    HOA = "hoa"
    PROPERTY_TAX = "property_tax"
    PRICE_PER_SQFT = "price_per_sqft"
    DAYS_ON_MARKET = "days_on_market"


class MultiSelectField(Enum):
    HOME_TYPE = "home_type"
    STATUS = "status"
    FEATURES = "features"
    POOL_TYPE = "pool_type"
    FINANCING = "financing"


class ToggleField(Enum):
    EXCLUDE_55_PLUS = "exclude_55_plus"
    INCLUDE_OUTDOOR_PARKING = "include_outdoor_parking"
    PRICE_REDUCED = "price_reduced"
    BY_AGENT = "by_agent"
    BY_OWNER = "by_owner"
    NEW_CONSTRUCTION = "new_construction"
    FORECLOSURES = "foreclosures"
    EXCLUDE_SHORT_SALES = "exclude_short_sales"
    OPEN_HOUSE_ONLY = "open_house_only"
    VIRTUAL_TOUR_ONLY = "virtual_tour_only"


@dataclass(frozen=True)
class RangeFilter:
    field: RangeField
    minimum: Decimal | None = None
    maximum: Decimal | None = None

    def __post_init__(self):
        if self.minimum is None and self.maximum is None:
            raise ValueError(f"Range filter {self.field.value} needs a minimum or a maximum")
        if self.minimum is not None and self.minimum < 0:
            raise ValueError(f"Range filter {self.field.value} minimum must be non-negative")
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ValueError(
                f"Range filter {self.field.value} minimum {self.minimum} exceeds maximum {self.maximum}"
            )


@dataclass(frozen=True)
class MultiSelectFilter:
    field: MultiSelectField
    values: tuple[str, ...] = ()

    def __post_init__(self):
        if not self.values:
            raise ValueError(f"Multi-select filter {self.field.value} needs at least one value")


@dataclass(frozen=True)
class ToggleFilter:
    field: ToggleField
    enabled: bool = True


ListingFilter = RangeFilter | MultiSelectFilter | ToggleFilter


@dataclass(frozen=True)
class ListingSearchQuery:
    listing_type: ListingType = ListingType.SALE
    filters: tuple[ListingFilter, ...] = field(default_factory=tuple)
    keywords: str | None = None

    def __post_init__(self):
        seen = set()
        for f in self.filters:
            if f.field in seen:
                raise ValueError(f"Duplicate filter for {f.field.value}")
            seen.add(f.field)


DEFAULT_QUERY = ListingSearchQuery(
    filters=(
        MultiSelectFilter(MultiSelectField.STATUS, ("Active", "Coming Soon")),
        ToggleFilter(ToggleField.BY_AGENT),
        ToggleFilter(ToggleField.BY_OWNER),
        ToggleFilter(ToggleField.NEW_CONSTRUCTION),
        ToggleFilter(ToggleField.FORECLOSURES),
    ),
)
