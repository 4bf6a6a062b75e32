"""Geographic unit selection for community polygons."""

import logging
from typing import Iterable

from src.models.community import BoundingBox, Polygon

logger = logging.getLogger(__name__)


def bounding_box(polygon: Polygon) -> BoundingBox:
    """Axis-aligned bounding box of a polygon's (lng, lat) vertices."""
    if len(polygon) < 3:
        raise ValueError(f"Polygon needs at least 3 vertices, got {len(polygon)}")

    lngs = [lng for lng, _ in polygon]
    lats = [lat for _, lat in polygon]
    return BoundingBox(
        min_lat=min(lats),
        max_lat=max(lats),
        min_lng=min(lngs),
        max_lng=max(lngs),
    )


def select_units(polygon: Polygon, candidate_units: Iterable[str]) -> list[str]:
    """Pick the zip codes whose area may intersect the polygon.

    Without a zip centroid/boundary index every candidate is kept, which
    over-approximates a bounding-box test and never drops an intersecting
    unit. Listing queries are constrained by the exact polygon separately.
    """
    box = bounding_box(polygon)
    logger.debug(
        "Polygon bbox lat [%s, %s] lng [%s, %s]",
        box.min_lat, box.max_lat, box.min_lng, box.max_lng,
    )
    return list(candidate_units)
