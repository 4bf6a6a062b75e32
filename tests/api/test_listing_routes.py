"""Tests for the listing search route."""

from decimal import Decimal

import httpx
import pytest
from fastapi.testclient import TestClient

from src.api.app import app
from src.api.deps import get_listings_client
from src.models.filters import DEFAULT_QUERY, ListingType, RangeField, RangeFilter, ToggleField
from src.models.listing import ListingRecord, ListingSearchResult

POLYGON = [[-97.733, 30.302], [-97.7205, 30.302], [-97.7205, 30.316]]


class RecordingListings:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.queries = []

    async def search_listings(self, polygon, page_size=200, query=None):
        self.queries.append((polygon, page_size, query))
        if self.error:
            raise self.error
        return ListingSearchResult(
            listings=[ListingRecord(price=650_000, sqft=1800, bedrooms=3,
                                    bathrooms=Decimal("2.5"), property_type="Townhouse")],
            total=57,
        )


@pytest.fixture
def listings():
    fake = RecordingListings()
    app.dependency_overrides[get_listings_client] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def test_search_with_filters(client, listings):
    resp = client.post("/api/v1/listings/search", json={
        "polygon": POLYGON,
        "page_size": 50,
        "listing_type": "rent",
        "filters": [
            {"kind": "range", "field": "price", "minimum": 500000, "maximum": 750000},
            {"kind": "multi_select", "field": "home_type", "values": ["Townhouse"]},
            {"kind": "toggle", "field": "price_reduced"},
        ],
    })
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["total"] == 57
    assert payload["listings"][0]["bathrooms"] == 2.5

    polygon, page_size, query = listings.queries[0]
    assert polygon == ((-97.733, 30.302), (-97.7205, 30.302), (-97.7205, 30.316))
    assert page_size == 50
    assert query.listing_type == ListingType.RENT
    assert query.filters[0] == RangeFilter(RangeField.PRICE, Decimal("500000"), Decimal("750000"))
    assert query.filters[2].field == ToggleField.PRICE_REDUCED


def test_default_filters(client, listings):
    resp = client.post("/api/v1/listings/search", json={"polygon": POLYGON})
    assert resp.status_code == 200
    _, page_size, query = listings.queries[0]
    assert page_size == 200
    assert query.filters == DEFAULT_QUERY.filters


def test_inverted_range_rejected(client, listings):
    resp = client.post("/api/v1/listings/search", json={
        "polygon": POLYGON,
        "filters": [{"kind": "range", "field": "sqft", "minimum": 3000, "maximum": 1000}],
    })
    assert resp.status_code == 422
    assert listings.queries == []


def test_unknown_filter_kind_rejected(client, listings):
    resp = client.post("/api/v1/listings/search", json={
        "polygon": POLYGON,
        "filters": [{"kind": "slider", "field": "price"}],
    })
    assert resp.status_code == 422


def test_range_field_not_a_toggle(client, listings):
    resp = client.post("/api/v1/listings/search", json={
        "polygon": POLYGON,
        "filters": [{"kind": "toggle", "field": "price"}],
    })
    assert resp.status_code == 422


def test_polygon_needs_three_vertices(client, listings):
    resp = client.post("/api/v1/listings/search", json={"polygon": POLYGON[:2]})
    assert resp.status_code == 422


def test_upstream_failure(client, listings):
    listings.error = httpx.ConnectError("down")
    resp = client.post("/api/v1/listings/search", json={"polygon": POLYGON})
    assert resp.status_code == 502
