"""FastAPI dependency injection."""

from src.data.census import CensusClient
from src.data.communities import CommunityRegistry
from src.data.listings import ListingsClient


def get_listings_client() -> ListingsClient:
    return ListingsClient()


def get_census_client() -> CensusClient:
    return CensusClient()


def get_community_registry() -> CommunityRegistry:
    return CommunityRegistry()
