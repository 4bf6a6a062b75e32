"""Community (named neighborhood polygon) data types."""

from dataclasses import dataclass

# (longitude, latitude) vertices, implicitly closed
Polygon = tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class BoundingBox:
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float


@dataclass(frozen=True)
class Community:
    slug: str
    name: str
    county: str
    polygon: Polygon

    @property
    def has_valid_polygon(self) -> bool:
        return len(self.polygon) >= 3
