"""Regions and countries API clients.

Both are read-only reference lists of the management API.
"""

from __future__ import annotations

from .._http import iter_coroutine
from ..models import Country, ListResult, Region
from .request import BaseResourceClient, decode_list


class BaseRegionsClient(BaseResourceClient):
    async def _list(self) -> ListResult[Region]:
        response = await self._get(self._api_url("/region"), self._api_key)
        return decode_list(Region, response)


class RegionsClient(BaseRegionsClient):
    def list(self) -> ListResult[Region]:
        return iter_coroutine(self._list())


class AsyncRegionsClient(BaseRegionsClient):
    async def list(self) -> ListResult[Region]:
        return await self._list()


class BaseCountriesClient(BaseResourceClient):
    async def _list(self) -> ListResult[Country]:
        response = await self._get(self._api_url("/country"), self._api_key)
        return decode_list(Country, response)


class CountriesClient(BaseCountriesClient):
    def list(self) -> ListResult[Country]:
        return iter_coroutine(self._list())


class AsyncCountriesClient(BaseCountriesClient):
    async def list(self) -> ListResult[Country]:
        return await self._list()
