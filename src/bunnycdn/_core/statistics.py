"""Account statistics API client."""

from __future__ import annotations

from typing import Any

from .._http import iter_coroutine
from ..models import Statistics
from ..types import StatisticsParameters
from .request import BaseResourceClient, decode_model, format_bool


def build_statistics_params(params: StatisticsParameters | None) -> dict[str, Any]:
    query: dict[str, Any] = {}
    if params is None:
        return query
    if params.date_from is not None:
        query["dateFrom"] = params.date_from.isoformat()
    if params.date_to is not None:
        query["dateTo"] = params.date_to.isoformat()
    if params.pull_zone is not None:
        query["pullZone"] = params.pull_zone
    if params.server_zone_id is not None:
        query["serverZoneId"] = params.server_zone_id
    if params.load_errors is not None:
        query["loadErrors"] = format_bool(params.load_errors)
    if params.hourly is not None:
        query["hourly"] = format_bool(params.hourly)
    return query


class BaseStatisticsClient(BaseResourceClient):
    async def _retrieve(self, params: StatisticsParameters | None = None) -> Statistics:
        response = await self._get(
            self._api_url("/statistics"), self._api_key, build_statistics_params(params)
        )
        return decode_model(Statistics, response.data)


class StatisticsClient(BaseStatisticsClient):
    def get(self, params: StatisticsParameters | None = None) -> Statistics:
        """Traffic statistics for the account, or one pull zone with ``params.pull_zone``."""
        return iter_coroutine(self._retrieve(params))


class AsyncStatisticsClient(BaseStatisticsClient):
    async def get(self, params: StatisticsParameters | None = None) -> Statistics:
        return await self._retrieve(params)
