"""API keys client."""

from __future__ import annotations

from .._http import iter_coroutine
from ..models import APIKey, ListResult
from ..types import PageParameters
from .request import BaseResourceClient, build_page_params, decode_list


class BaseAPIKeysClient(BaseResourceClient):
    async def _list(self, page_params: PageParameters | None = None) -> ListResult[APIKey]:
        # The endpoint always answers with a pagination envelope
        response = await self._get(
            self._api_url("/apikey"),
            self._api_key,
            build_page_params(page_params or PageParameters()),
        )
        return decode_list(APIKey, response)


class APIKeysClient(BaseAPIKeysClient):
    def list(self, page_params: PageParameters | None = None) -> ListResult[APIKey]:
        return iter_coroutine(self._list(page_params))


class AsyncAPIKeysClient(BaseAPIKeysClient):
    async def list(self, page_params: PageParameters | None = None) -> ListResult[APIKey]:
        return await self._list(page_params)
