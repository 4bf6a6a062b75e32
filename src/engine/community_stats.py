"""Community market statistics from a sample of active listings.

Price tiers (half-open):
  Under $500K:   [0, 500K)
  $500K-$750K:   [500K, 750K)
  $750K-$1M:     [750K, 1M)
  $1M+:          [1M, inf)
"""

from decimal import Decimal, ROUND_HALF_UP

from src.models.listing import CommunityStats, ListingRecord

TIER_500K = 500_000
TIER_750K = 750_000
TIER_1M = 1_000_000

# Lowercase substrings matched against the listing's property type
SINGLE_FAMILY_KEYWORD = "single"
CONDO_KEYWORD = "condo"
TOWNHOUSE_KEYWORD = "town"


def _round(value: Decimal, places: int = 0) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _mean(values: list[Decimal]) -> Decimal:
    return sum(values, Decimal("0")) / len(values)


def _count_type(listings: list[ListingRecord], keyword: str) -> int:
    return sum(1 for l in listings if l.property_type and keyword in l.property_type.lower())


def _tier_counts(prices: list[int]) -> tuple[int, int, int, int]:
    under_500k = range_500k_to_750k = range_750k_to_1m = over_1m = 0
    for price in prices:
        if price < TIER_500K:
            under_500k += 1
        elif price < TIER_750K:
            range_500k_to_750k += 1
        elif price < TIER_1M:
            range_750k_to_1m += 1
        else:
            over_1m += 1
    return under_500k, range_500k_to_750k, range_750k_to_1m, over_1m


def aggregate_listings(listings: list[ListingRecord], total_count: int) -> CommunityStats:
    """Reduce a listing sample to community market statistics.

    total_count is the upstream match count and becomes active_listings even
    when the sample is capped. An empty sample yields all-zero stats.
    """
    if not listings:
        return CommunityStats()

    prices = sorted(l.price for l in listings)
    n = len(prices)

    # Upper-middle element for even n, not the average of the two middles
    median_price = prices[n // 2]
    avg_price = _round(Decimal(sum(prices)) / n)

    sized = [l for l in listings if l.sqft > 0]
    if sized:
        avg_sqft = _round(_mean([Decimal(l.sqft) for l in sized]))
        # Mean of per-listing ratios, not total price over total sqft
        price_per_sqft = _round(_mean([Decimal(l.price) / Decimal(l.sqft) for l in sized]))
    else:
        avg_sqft = price_per_sqft = Decimal("0")

    avg_dom = _round(_mean([Decimal(l.days_on_market or 0) for l in listings]))
    avg_beds = _round(_mean([Decimal(str(l.bedrooms)) for l in listings]), 1)
    avg_baths = _round(_mean([Decimal(str(l.bathrooms)) for l in listings]), 1)

    under_500k, range_500k_to_750k, range_750k_to_1m, over_1m = _tier_counts(prices)

    return CommunityStats(
        active_listings=total_count,
        median_price=median_price,
        avg_price=int(avg_price),
        price_per_sqft=int(price_per_sqft),
        avg_days_on_market=int(avg_dom),
        min_price=prices[0],
        max_price=prices[-1],
        single_family_count=_count_type(listings, SINGLE_FAMILY_KEYWORD),
        condo_count=_count_type(listings, CONDO_KEYWORD),
        townhouse_count=_count_type(listings, TOWNHOUSE_KEYWORD),
        avg_bedrooms=avg_beds,
        avg_bathrooms=avg_baths,
        avg_sqft=int(avg_sqft),
        under_500k=under_500k,
        range_500k_to_750k=range_500k_to_750k,
        range_750k_to_1m=range_750k_to_1m,
        over_1m=over_1m,
    )
