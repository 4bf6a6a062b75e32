"""Weighted demographic aggregation across zip code tabulation areas.

Every rate and average is built from numerator and denominator sums across
all rows and divided once at the end, so large areas weigh proportionally
more than small ones:

  income          sum(income * households) / sum(households)
  age             sum(age * population) / sum(population)
  home value      sum(value * occupied units) / sum(occupied units)
  household size  sum(size * households) / sum(households)
  college %       sum(degree holders) / sum(population 25+)
  homeownership % sum(owner occupied) / sum(occupied units)
  unemployment %  sum(unemployed) / sum(labor force)
  under 18 %      sum(under 18) / sum(population)
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Iterable

from src.models.demographics import (
    AGE_18_TO_34_PCT_ESTIMATE,
    AGE_35_TO_54_PCT_ESTIMATE,
    CensusUnitRow,
    DemographicData,
    DemographicTotals,
)

# ACS 5-year variable codes, in request (and therefore response column) order
ACS_VARIABLES = {
    "B01003_001E": "population",
    "B11001_001E": "households",
    "B19013_001E": "median_household_income",
    "B01002_001E": "median_age",
    "B15003_022E": "bachelors",
    "B15003_023E": "masters",
    "B15003_024E": "professional",
    "B15003_025E": "doctorate",
    "B15003_001E": "education_population",
    "B25003_002E": "owner_occupied",
    "B25003_001E": "total_occupied",
    "B25077_001E": "median_home_value",
    "B25010_001E": "average_household_size",
    "B23025_005E": "unemployed",
    "B23025_002E": "labor_force",
    "B08303_001E": "commuters",
    "B08303_012E": "commute_30_to_34",
    "B08303_013E": "commute_35_to_44",
    "B01001_003E": "male_under_5",
    "B01001_004E": "male_5_to_9",
    "B01001_005E": "male_10_to_14",
    "B01001_006E": "male_15_to_17",
    "B01001_027E": "female_under_5",
    "B01001_028E": "female_5_to_9",
    "B01001_029E": "female_10_to_14",
    "B01001_030E": "female_15_to_17",
}

_DECIMAL_FIELDS = {"median_age", "average_household_size"}
_MALE_UNDER_18 = ("male_under_5", "male_5_to_9", "male_10_to_14", "male_15_to_17")
_FEMALE_UNDER_18 = ("female_under_5", "female_5_to_9", "female_10_to_14", "female_15_to_17")

# Census annotation values reported in place of an estimate
_ANNOTATION_VALUES = {
    Decimal(v) for v in (
        -111111111, -222222222, -333333333, -555555555,
        -666666666, -888888888, -999999999,
    )
}

# Largest decimal exponent accepted for a single cell; beyond any real ACS count
_MAX_EXPONENT = 15

# Working precision for weighted sums and final division
_PRECISION = 60


def _to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        d = Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal("0")
    if not d.is_finite() or d in _ANNOTATION_VALUES or d.adjusted() > _MAX_EXPONENT:
        return Decimal("0")
    return d


def _to_int(value: Any) -> int:
    return int(_to_decimal(value))


def parse_census_row(values: list[Any], geo_id: str = "") -> CensusUnitRow:
    """Parse one positional ACS row into a CensusUnitRow.

    Each field defaults to 0 on its own when missing, non-numeric, or an
    annotation value, so one bad column never discards the row.
    """
    parsed: dict[str, Any] = {}
    for i, name in enumerate(ACS_VARIABLES.values()):
        raw = values[i] if i < len(values) else None
        parsed[name] = _to_decimal(raw) if name in _DECIMAL_FIELDS else _to_int(raw)

    return CensusUnitRow(
        geo_id=geo_id,
        population=parsed["population"],
        households=parsed["households"],
        median_household_income=parsed["median_household_income"],
        median_age=parsed["median_age"],
        bachelors=parsed["bachelors"],
        masters=parsed["masters"],
        professional=parsed["professional"],
        doctorate=parsed["doctorate"],
        education_population=parsed["education_population"],
        owner_occupied=parsed["owner_occupied"],
        total_occupied=parsed["total_occupied"],
        median_home_value=parsed["median_home_value"],
        average_household_size=parsed["average_household_size"],
        unemployed=parsed["unemployed"],
        labor_force=parsed["labor_force"],
        commuters=parsed["commuters"],
        commute_30_to_34=parsed["commute_30_to_34"],
        commute_35_to_44=parsed["commute_35_to_44"],
        under_18_male=tuple(parsed[k] for k in _MALE_UNDER_18),
        under_18_female=tuple(parsed[k] for k in _FEMALE_UNDER_18),
    )


def _row_totals(row: CensusUnitRow) -> DemographicTotals:
    return DemographicTotals(
        population=row.population,
        households=row.households,
        weighted_income=row.median_household_income * row.households,
        weighted_age=row.median_age * row.population,
        degree_holders=row.degree_holders,
        education_population=row.education_population,
        owner_occupied=row.owner_occupied,
        total_occupied=row.total_occupied,
        weighted_home_value=row.median_home_value * row.total_occupied,
        weighted_household_size=row.average_household_size * row.households,
        unemployed=row.unemployed,
        labor_force=row.labor_force,
        commuters=row.commuters,
        under_18=row.under_18,
    )


def accumulate(rows: Iterable[CensusUnitRow]) -> DemographicTotals:
    """Sum the weighted contributions of every row."""
    totals = DemographicTotals()
    for row in rows:
        totals = totals + _row_totals(row)
    return totals


def _ratio(numerator, denominator, scale: int = 1, places: int = 0) -> Decimal:
    if not denominator:
        return Decimal("0")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        value = Decimal(numerator) * scale / Decimal(denominator)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def summarize(totals: DemographicTotals) -> DemographicData | None:
    """Turn summed totals into the demographic summary.

    Returns None when there is no population to describe.
    """
    if totals.population == 0:
        return None

    under_18_pct = int(_ratio(totals.under_18, totals.population, scale=100))

    return DemographicData(
        population=totals.population,
        households=totals.households,
        median_household_income=int(_ratio(totals.weighted_income, totals.households)),
        median_age=_ratio(totals.weighted_age, totals.population, places=1),
        college_educated_pct=int(_ratio(totals.degree_holders, totals.education_population, scale=100)),
        homeownership_rate=int(_ratio(totals.owner_occupied, totals.total_occupied, scale=100)),
        median_home_value=int(_ratio(totals.weighted_home_value, totals.total_occupied)),
        average_household_size=_ratio(totals.weighted_household_size, totals.households, places=1),
        unemployment_rate=_ratio(totals.unemployed, totals.labor_force, scale=100, places=1),
        under_18_pct=under_18_pct,
        age_55_plus_pct=100 - under_18_pct - AGE_18_TO_34_PCT_ESTIMATE - AGE_35_TO_54_PCT_ESTIMATE,
    )


def aggregate_demographics(rows: Iterable[CensusUnitRow]) -> DemographicData | None:
    """Combine census rows into one population-weighted summary."""
    return summarize(accumulate(rows))
