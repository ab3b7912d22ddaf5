"""Storage zones API client."""

from __future__ import annotations

import logging
from typing import Any

from .._http import iter_coroutine
from ..errors import DecodeError, ValidationError
from ..models import ListResult, StorageZone, StorageZoneStatistics
from ..types import (
    AddStorageZoneParameters,
    PageParameters,
    StorageZonesParameters,
    StorageZoneStatisticsParameters,
    UpdateStorageZoneParameters,
)
from .request import BaseResourceClient, build_page_params, decode_list, decode_model, format_bool

logger = logging.getLogger("bunnycdn.storage_zones")


def _require_name(name: str, field: str = "name") -> str:
    used = (name or "").strip()
    if not used:
        raise ValidationError(
            "Invalid storage zone name. Must not be empty", field=field
        )
    return used


def build_list_params(
    params: StorageZonesParameters | None,
    page_params: PageParameters | None,
) -> dict[str, Any]:
    query = build_page_params(page_params)
    if params is not None:
        if params.include_deleted is not None:
            query["includeDeleted"] = format_bool(params.include_deleted)
        if params.search is not None:
            query["search"] = params.search
    return query


def build_add_body(params: AddStorageZoneParameters) -> dict[str, Any]:
    body: dict[str, Any] = {
        "Name": _require_name(params.name),
        "Region": params.region.strip(),
        "ZoneTier": int(params.zone_tier),
    }
    if not body["Region"]:
        raise ValidationError(
            "Invalid storage zone region. Must not be empty", field="region"
        )
    if params.replication_regions is not None:
        body["ReplicationRegions"] = list(params.replication_regions)
    if params.origin_url is not None:
        body["OriginUrl"] = params.origin_url
    return body


def build_update_body(params: UpdateStorageZoneParameters) -> dict[str, Any]:
    body: dict[str, Any] = {}
    if params.replication_regions is not None:
        body["ReplicationZones"] = list(params.replication_regions)
    if params.origin_url is not None:
        body["OriginUrl"] = params.origin_url
    if params.custom_404_file_path is not None:
        body["Custom404FilePath"] = params.custom_404_file_path
    if params.rewrite_404_to_200 is not None:
        body["Rewrite404To200"] = params.rewrite_404_to_200
    return body


def build_statistics_params(
    params: StorageZoneStatisticsParameters | None,
) -> dict[str, Any]:
    query: dict[str, Any] = {}
    if params is not None:
        if params.date_from is not None:
            query["dateFrom"] = params.date_from.isoformat()
        if params.date_to is not None:
            query["dateTo"] = params.date_to.isoformat()
    return query


class BaseStorageZonesClient(BaseResourceClient):
    """Base storage zones client with shared async business logic."""

    def _zone_url(self, suffix: str = "") -> str:
        return self._api_url("/storagezone" + suffix)

    async def _list(
        self,
        params: StorageZonesParameters | None = None,
        page_params: PageParameters | None = None,
    ) -> ListResult[StorageZone]:
        response = await self._get(
            self._zone_url(), self._api_key, build_list_params(params, page_params)
        )
        return decode_list(StorageZone, response)

    async def _retrieve(self, id: int) -> StorageZone:
        # Id validity is left to the API
        response = await self._get(self._zone_url(f"/{id}"), self._api_key)
        return decode_model(StorageZone, response.data)

    async def _check_availability(self, name: str) -> bool:
        """True when no active or deleted zone uses ``name``."""
        used_name = _require_name(name)
        response = await self._post(
            self._zone_url("/checkavailability"), self._api_key, {"Name": used_name}
        )
        data = response.data
        if not isinstance(data, dict) or not isinstance(data.get("Available"), bool):
            raise DecodeError(
                "Unexpected availability response",
                error_key="decode.invalid",
                field="Available",
            )
        return data["Available"]

    async def _find(
        self,
        name: str,
        include_deleted: bool | None = None,
    ) -> StorageZone | None:
        if await self._check_availability(name):
            return None
        zones = await self._list(
            StorageZonesParameters(
                include_deleted=True if include_deleted is None else include_deleted,
                search=name,
            )
        )
        wanted = name.strip().lower()
        for zone in zones:
            if zone.name.strip().lower() == wanted:
                return zone
        return None

    async def _add(self, params: AddStorageZoneParameters) -> StorageZone:
        response = await self._post(self._zone_url(), self._api_key, build_add_body(params))
        zone = decode_model(StorageZone, response.data)
        logger.debug("created storage zone %s (%d)", zone.name, zone.id)
        return zone

    async def _add_exists_ok(
        self,
        params: AddStorageZoneParameters,
        include_deleted: bool | None = None,
    ) -> StorageZone:
        found = await self._find(params.name, include_deleted)
        if found is not None:
            return found
        return await self._add(params)

    async def _update(self, id: int, params: UpdateStorageZoneParameters) -> None:
        await self._post(self._zone_url(f"/{id}"), self._api_key, build_update_body(params))

    async def _delete_zone(self, id: int) -> None:
        # Deleting an already deleted zone is reported as an error by the API
        await self._delete(self._zone_url(f"/{id}"), self._api_key)

    async def _get_statistics(
        self,
        id: int,
        params: StorageZoneStatisticsParameters | None = None,
    ) -> StorageZoneStatistics:
        response = await self._get(
            self._zone_url(f"/{id}/statistics"),
            self._api_key,
            build_statistics_params(params),
        )
        return decode_model(StorageZoneStatistics, response.data)


class StorageZonesClient(BaseStorageZonesClient):
    def list(
        self,
        params: StorageZonesParameters | None = None,
        page_params: PageParameters | None = None,
    ) -> ListResult[StorageZone]:
        return iter_coroutine(self._list(params, page_params))

    def get(self, id: int) -> StorageZone:
        return iter_coroutine(self._retrieve(id))

    def check_availability(self, name: str) -> bool:
        return iter_coroutine(self._check_availability(name))

    def find(self, name: str, include_deleted: bool | None = None) -> StorageZone | None:
        """Find a zone by name, case-insensitively; None when the name is free.

        ``include_deleted`` defaults to searching deleted zones too.
        """
        return iter_coroutine(self._find(name, include_deleted))

    def add(self, params: AddStorageZoneParameters) -> StorageZone:
        """Create a storage zone.

        The API rejects a name used by an active or deleted zone with the
        error key ``storagezone.name_taken``; see ``add_exists_ok``.
        """
        return iter_coroutine(self._add(params))

    def add_exists_ok(
        self,
        params: AddStorageZoneParameters,
        include_deleted: bool | None = None,
    ) -> StorageZone:
        """Return the zone named ``params.name``, creating it when it doesn't exist."""
        return iter_coroutine(self._add_exists_ok(params, include_deleted))

    def update(self, id: int, params: UpdateStorageZoneParameters) -> None:
        return iter_coroutine(self._update(id, params))

    def delete(self, id: int) -> None:
        return iter_coroutine(self._delete_zone(id))

    def get_statistics(
        self,
        id: int,
        params: StorageZoneStatisticsParameters | None = None,
    ) -> StorageZoneStatistics:
        return iter_coroutine(self._get_statistics(id, params))


class AsyncStorageZonesClient(BaseStorageZonesClient):
    async def list(
        self,
        params: StorageZonesParameters | None = None,
        page_params: PageParameters | None = None,
    ) -> ListResult[StorageZone]:
        return await self._list(params, page_params)

    async def get(self, id: int) -> StorageZone:
        return await self._retrieve(id)

    async def check_availability(self, name: str) -> bool:
        return await self._check_availability(name)

    async def find(
        self, name: str, include_deleted: bool | None = None
    ) -> StorageZone | None:
        return await self._find(name, include_deleted)

    async def add(self, params: AddStorageZoneParameters) -> StorageZone:
        return await self._add(params)

    async def add_exists_ok(
        self,
        params: AddStorageZoneParameters,
        include_deleted: bool | None = None,
    ) -> StorageZone:
        return await self._add_exists_ok(params, include_deleted)

    async def update(self, id: int, params: UpdateStorageZoneParameters) -> None:
        return await self._update(id, params)

    async def delete(self, id: int) -> None:
        return await self._delete_zone(id)

    async def get_statistics(
        self,
        id: int,
        params: StorageZoneStatisticsParameters | None = None,
    ) -> StorageZoneStatistics:
        return await self._get_statistics(id, params)
