"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from src.models.filters import MultiSelectField, RangeField, ToggleField


# ---- Request schemas ----

class RangeFilterRequest(BaseModel):
    kind: Literal["range"] = "range"
    field: RangeField
    minimum: Decimal | None = None
    maximum: Decimal | None = None


class MultiSelectFilterRequest(BaseModel):
    kind: Literal["multi_select"] = "multi_select"
    field: MultiSelectField
    values: list[str] = Field(..., min_length=1)


class ToggleFilterRequest(BaseModel):
    kind: Literal["toggle"] = "toggle"
    field: ToggleField
    enabled: bool = True


FilterRequest = Annotated[
    RangeFilterRequest | MultiSelectFilterRequest | ToggleFilterRequest,
    Field(discriminator="kind"),
]


class ListingSearchRequest(BaseModel):
    polygon: list[tuple[float, float]] = Field(..., min_length=3, description="[lng, lat] vertices")
    page_size: int = Field(200, ge=1, le=500)
    listing_type: Literal["sale", "rent"] = "sale"
    filters: list[FilterRequest] | None = Field(None, description="Omit for the default search filters")
    keywords: str | None = None


# ---- Response schemas ----

class CommunityStatsResponse(BaseModel):
    active_listings: int
    median_price: int
    avg_price: int
    price_per_sqft: int
    avg_days_on_market: int
    min_price: int
    max_price: int
    single_family_count: int
    condo_count: int
    townhouse_count: int
    avg_bedrooms: float
    avg_bathrooms: float
    avg_sqft: int
    under_500k: int
    range_500k_to_750k: int
    range_750k_to_1m: int
    over_1m: int


class CommunityStatsEnvelope(BaseModel):
    stats: CommunityStatsResponse


class DemographicsResponse(BaseModel):
    population: int
    households: int
    median_household_income: int
    median_age: float
    college_educated_pct: int
    homeownership_rate: int
    median_home_value: int
    average_household_size: float
    unemployment_rate: float
    commute_time_minutes: int
    under_18_pct: int
    age_18_to_34_pct: int
    age_35_to_54_pct: int
    age_55_plus_pct: int


class DemographicsEnvelope(BaseModel):
    demographics: DemographicsResponse | None = None


class BoundingBoxResponse(BaseModel):
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float


class CommunityResponse(BaseModel):
    slug: str
    name: str
    county: str
    vertex_count: int
    bounding_box: BoundingBoxResponse


class DescriptionResponse(BaseModel):
    description: str


class ListingResponse(BaseModel):
    price: int
    sqft: int
    days_on_market: int | None = None
    bedrooms: int
    bathrooms: float
    property_type: str | None = None


class ListingSearchResponse(BaseModel):
    listings: list[ListingResponse]
    total: int
