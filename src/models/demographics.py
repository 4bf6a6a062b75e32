"""Census survey rows and the community demographic summary."""

from dataclasses import dataclass, fields
from decimal import Decimal

# Not derived from survey data; placeholder shares shown alongside under_18_pct.
AGE_18_TO_34_PCT_ESTIMATE = 25
AGE_35_TO_54_PCT_ESTIMATE = 30
COMMUTE_TIME_MINUTES_ESTIMATE = 28  # Austin metro default


@dataclass(frozen=True)
class CensusUnitRow:
    """Raw ACS counts for one zip code tabulation area."""
    geo_id: str = ""
    population: int = 0
    households: int = 0
    median_household_income: int = 0
    median_age: Decimal = Decimal("0")
    bachelors: int = 0
    masters: int = 0
    professional: int = 0
    doctorate: int = 0
    education_population: int = 0  # 25 and over
    owner_occupied: int = 0
    total_occupied: int = 0
    median_home_value: int = 0
    average_household_size: Decimal = Decimal("0")
    unemployed: int = 0
    labor_force: int = 0
    commuters: int = 0
    commute_30_to_34: int = 0
    commute_35_to_44: int = 0
    # under 5, 5-9, 10-14, 15-17
    under_18_male: tuple[int, int, int, int] = (0, 0, 0, 0)
    under_18_female: tuple[int, int, int, int] = (0, 0, 0, 0)

    @property
    def degree_holders(self) -> int:
        return self.bachelors + self.masters + self.professional + self.doctorate

    @property
    def under_18(self) -> int:
        return sum(self.under_18_male) + sum(self.under_18_female)


@dataclass(frozen=True)
class DemographicTotals:
    """Summed numerators and denominators of the weighted aggregation.

    Totals from separate batches combine with ``+``; ``DemographicTotals()``
    is the identity.
    """
    population: int = 0
    households: int = 0
    weighted_income: int = 0  # income x households
    weighted_age: Decimal = Decimal("0")  # age x population
    degree_holders: int = 0
    education_population: int = 0
    owner_occupied: int = 0
    total_occupied: int = 0
    weighted_home_value: int = 0  # value x occupied units
    weighted_household_size: Decimal = Decimal("0")  # size x households
    unemployed: int = 0
    labor_force: int = 0
    commuters: int = 0
    under_18: int = 0

    def __add__(self, other: "DemographicTotals") -> "DemographicTotals":
        if not isinstance(other, DemographicTotals):
            return NotImplemented
        return DemographicTotals(**{
            f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)
        })


@dataclass(frozen=True)
class DemographicData:
    population: int
    households: int
    median_household_income: int
    median_age: Decimal
    college_educated_pct: int
    homeownership_rate: int
    median_home_value: int
    average_household_size: Decimal
    unemployment_rate: Decimal
    under_18_pct: int

    # Estimates, see module constants
    age_18_to_34_pct: int = AGE_18_TO_34_PCT_ESTIMATE
    age_35_to_54_pct: int = AGE_35_TO_54_PCT_ESTIMATE
    age_55_plus_pct: int = 0
    commute_time_minutes: int = COMMUTE_TIME_MINUTES_ESTIMATE
