"""Plain-language community description built from market statistics."""

from src.config import settings
from src.models.listing import CommunityStats


def _price_context(name: str, median_price: int, metro: str) -> str:
    if median_price < 400_000:
        return (
            f"This makes {name} one of the more affordable neighborhoods in the {metro} area, "
            "offering great value for homebuyers."
        )
    if median_price < 600_000:
        return (
            f"{name} offers moderately priced homes compared to the broader {metro} market, "
            "attracting a mix of first-time buyers and growing families."
        )
    if median_price < 1_000_000:
        return (
            f"As an established neighborhood, {name} features homes that reflect the area's "
            "desirability and strong market fundamentals."
        )
    return f"{name} is one of {metro}'s premier neighborhoods, featuring luxury homes and an exceptional quality of life."


def _market_activity(name: str, days: int) -> str:
    if days < 20:
        return (
            f"Properties in {name} are selling quickly, averaging just {days} days on market, "
            "a sign of strong buyer demand."
        )
    if days < 45:
        return f"The market in {name} is active, with homes typically selling within {days} days."
    return f"Buyers have time to carefully consider their options, with homes averaging {days} days on market."


def describe_community(
    name: str,
    county: str,
    stats: CommunityStats | None,
    metro_area: str | None = None,
    brokerage_name: str | None = None,
) -> str:
    """Compose the community description.

    Market sentences are included only when there are active listings.
    """
    metro_area = metro_area or settings.metro_area
    brokerage_name = brokerage_name or settings.brokerage_name
    metro = metro_area.split(",")[0]

    parts = [
        f"{name} is a sought-after neighborhood in {county} County, "
        f"located in the greater {metro_area} metropolitan area."
    ]

    if stats is not None and stats.active_listings > 0:
        parts.append(
            f"The {name} real estate market currently has {stats.active_listings} active listings "
            f"with a median home price of ${stats.median_price:,}."
        )
        parts.append(_price_context(name, stats.median_price, metro))

        if stats.avg_sqft > 0:
            parts.append(
                f"Homes in {name} average {stats.avg_sqft:,} square feet with {stats.avg_bedrooms} bedrooms, "
                f"priced at approximately ${stats.price_per_sqft} per square foot."
            )

        parts.append(_market_activity(name, stats.avg_days_on_market))

    parts.append(
        f"Whether you're looking to buy or sell in {name}, our team at {brokerage_name} can help you "
        "navigate this competitive market. Contact us today for a personalized consultation."
    )
    return " ".join(parts)
