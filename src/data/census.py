"""Census API client for zip-level ACS demographic data."""

import asyncio
import logging

import httpx

from src.config import settings
from src.data.cache import cached
from src.engine.demographics import ACS_VARIABLES, accumulate, parse_census_row, summarize
from src.models.demographics import CensusUnitRow, DemographicData, DemographicTotals

logger = logging.getLogger(__name__)

# Zip codes per ACS request
CENSUS_BATCH_SIZE = 50


def batch_zips(zips: list[str], size: int = CENSUS_BATCH_SIZE) -> list[list[str]]:
    return [zips[i:i + size] for i in range(0, len(zips), size)]


def parse_table(table: list[list]) -> list[CensusUnitRow]:
    """Parse an ACS response table, skipping the header row.

    Columns follow ACS_VARIABLES order; the trailing geography column
    carries the zip code.
    """
    n_vars = len(ACS_VARIABLES)
    rows = []
    for values in table[1:]:
        if not isinstance(values, (list, tuple)):
            continue
        geo_id = str(values[n_vars]) if len(values) > n_vars else ""
        rows.append(parse_census_row(values[:n_vars], geo_id=geo_id))
    return rows


class CensusClient:
    def __init__(
        self,
        api_key: str | None = None,
        revalidate_seconds: int | None = None,
        base_url: str | None = None,
        year: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or settings.census_api_key
        self.revalidate_seconds = (
            settings.census_revalidate_seconds if revalidate_seconds is None else revalidate_seconds
        )
        self.base_url = base_url or settings.census_base_url
        self.year = year or settings.census_year
        self.transport = transport

    @cached("census:acs5:zcta")
    async def _fetch_batch(self, endpoint: str, zip_list: str) -> list[list] | None:
        """Fetch the raw ACS table for a comma-joined list of zip codes.

        The endpoint is part of the cache key, so each survey year and host
        is cached separately. Returns None if the request fails or the body is not a table.
        """
        params = {
            "get": ",".join(ACS_VARIABLES.keys()),
            "for": f"zip code tabulation area:{zip_list}",
        }
        if self.api_key:
            params["key"] = self.api_key

        try:
            async with httpx.AsyncClient(timeout=15.0, transport=self.transport) as client:
                resp = await client.get(endpoint, params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Census ACS error: %s", e.response.status_code)
            return None
        except (httpx.RequestError, ValueError) as e:
            logger.warning("Census ACS request failed: %s", e)
            return None

        if not isinstance(data, list):
            logger.warning("Census ACS returned unexpected payload type %s", type(data).__name__)
            return None
        return data

    async def _batch_totals(self, batch: list[str]) -> DemographicTotals:
        endpoint = f"{self.base_url}/{self.year}/acs/acs5"
        table = await self._fetch_batch(endpoint, ",".join(batch))
        if not table:
            return DemographicTotals()
        return accumulate(parse_table(table))

    async def get_demographics_for_zips(self, zips: list[str]) -> DemographicData | None:
        """Fetch and combine ACS data for a list of zip codes.

        Zips are requested in batches of CENSUS_BATCH_SIZE; a failed batch
        contributes nothing. Returns None when no population data comes back.
        """
        if not zips:
            return None

        batches = batch_zips(zips)
        results = await asyncio.gather(
            *(self._batch_totals(b) for b in batches), return_exceptions=True
        )

        totals = DemographicTotals()
        for batch, partial in zip(batches, results):
            if isinstance(partial, Exception):
                logger.warning("Census batch of %d zips failed: %s", len(batch), partial)
                continue
            totals = totals + partial

        logger.info(
            "Census ACS: %d zips in %d batches, population %d",
            len(zips), len(batches), totals.population,
        )
        return summarize(totals)
