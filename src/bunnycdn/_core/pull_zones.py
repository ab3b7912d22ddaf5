"""Pull zones API client."""

from __future__ import annotations

from typing import Any

from .._http import iter_coroutine
from ..models import ListResult, PullZone
from ..types import PageParameters, PullZonesParameters
from .request import BaseResourceClient, build_page_params, decode_list, decode_model, format_bool


def build_list_params(
    params: PullZonesParameters | None,
    page_params: PageParameters | None,
) -> dict[str, Any]:
    query = build_page_params(page_params)
    if params is not None:
        if params.search is not None:
            query["search"] = params.search
        if params.include_certificate is not None:
            query["includeCertificate"] = format_bool(params.include_certificate)
    return query


class BasePullZonesClient(BaseResourceClient):
    async def _list(
        self,
        params: PullZonesParameters | None = None,
        page_params: PageParameters | None = None,
    ) -> ListResult[PullZone]:
        response = await self._get(
            self._api_url("/pullzone"),
            self._api_key,
            build_list_params(params, page_params),
        )
        return decode_list(PullZone, response)

    async def _retrieve(self, id: int, include_certificate: bool | None = None) -> PullZone:
        query: dict[str, Any] = {}
        if include_certificate is not None:
            query["includeCertificate"] = format_bool(include_certificate)
        response = await self._get(self._api_url(f"/pullzone/{id}"), self._api_key, query)
        return decode_model(PullZone, response.data)


class PullZonesClient(BasePullZonesClient):
    def list(
        self,
        params: PullZonesParameters | None = None,
        page_params: PageParameters | None = None,
    ) -> ListResult[PullZone]:
        """List pull zones, optionally filtered by ``params.search``."""
        return iter_coroutine(self._list(params, page_params))

    def get(self, id: int, include_certificate: bool | None = None) -> PullZone:
        return iter_coroutine(self._retrieve(id, include_certificate))


class AsyncPullZonesClient(BasePullZonesClient):
    async def list(
        self,
        params: PullZonesParameters | None = None,
        page_params: PageParameters | None = None,
    ) -> ListResult[PullZone]:
        return await self._list(params, page_params)

    async def get(self, id: int, include_certificate: bool | None = None) -> PullZone:
        return await self._retrieve(id, include_certificate)
