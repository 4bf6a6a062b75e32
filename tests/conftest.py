"""Shared fixtures.

Listing sample: five Austin listings spanning all four price tiers, one with
unknown sqft and one with no property type.
Census sample: two zip codes with different sizes so weighted and unweighted
averages differ.
"""

from decimal import Decimal

import pytest

from src.engine.demographics import ACS_VARIABLES
from src.models.community import Community
from src.models.listing import ListingRecord


@pytest.fixture
def sample_listings() -> list[ListingRecord]:
    return [
        ListingRecord(price=450_000, sqft=1500, days_on_market=10, bedrooms=3,
                      bathrooms=Decimal("2"), property_type="Single Family Residence"),
        ListingRecord(price=1_200_000, sqft=3000, days_on_market=40, bedrooms=4,
                      bathrooms=Decimal("3.5"), property_type="Single Family"),
        ListingRecord(price=520_000, sqft=0, days_on_market=None, bedrooms=2,
                      bathrooms=Decimal("2"), property_type="Condo"),
        ListingRecord(price=800_000, sqft=2000, days_on_market=25, bedrooms=3,
                      bathrooms=Decimal("2.5"), property_type="Townhouse"),
        ListingRecord(price=300_000, sqft=1000, days_on_market=5, bedrooms=1,
                      bathrooms=Decimal("1"), property_type=None),
    ]


@pytest.fixture
def make_acs_row():
    """Build a positional ACS row (as the API returns it) from named values."""
    def _make(zip_code: str = "78701", **values) -> list:
        row = [str(values.get(name, 0)) for name in ACS_VARIABLES.values()]
        return row + [zip_code]
    return _make


@pytest.fixture
def acs_header() -> list[str]:
    return list(ACS_VARIABLES.keys()) + ["zip code tabulation area"]


@pytest.fixture
def two_zip_rows(make_acs_row) -> list[list]:
    return [
        make_acs_row(
            "78701",
            population=1000, households=400, median_household_income=50000,
            median_age="30.0", bachelors=200, masters=50, professional=10, doctorate=5,
            education_population=700, owner_occupied=150, total_occupied=400,
            median_home_value=300000, average_household_size="2.5",
            unemployed=20, labor_force=600, commuters=500,
            male_under_5=30, male_5_to_9=30, male_10_to_14=20, male_15_to_17=20,
            female_under_5=30, female_5_to_9=30, female_10_to_14=20, female_15_to_17=20,
        ),
        make_acs_row(
            "78702",
            population=2000, households=800, median_household_income=80000,
            median_age="40.0", bachelors=600, masters=200, professional=40, doctorate=20,
            education_population=1400, owner_occupied=600, total_occupied=800,
            median_home_value=600000, average_household_size="2.0",
            unemployed=30, labor_force=1400, commuters=1000,
            male_under_5=50, male_5_to_9=50, male_10_to_14=50, male_15_to_17=50,
            female_under_5=50, female_5_to_9=50, female_10_to_14=50, female_15_to_17=50,
        ),
    ]


@pytest.fixture
def hyde_park() -> Community:
    return Community(
        slug="hyde-park",
        name="Hyde Park",
        county="Travis",
        polygon=((-97.733, 30.302), (-97.7205, 30.302), (-97.7205, 30.316), (-97.733, 30.316)),
    )
