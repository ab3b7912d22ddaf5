"""Request parameter records for the resource clients."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .models import StorageZoneTier


@dataclass(slots=True)
class PageParameters:
    """Ask a list endpoint for one page of results.

    When sent, the API wraps the list in a pagination envelope.
    """

    page: int = 1
    per_page: int = 1000


@dataclass(slots=True)
class StorageZonesParameters:
    include_deleted: bool | None = None
    search: str | None = None


@dataclass(slots=True)
class AddStorageZoneParameters:
    """Body of a storage zone creation.

    ``region`` is a region code as returned by ``regions.list()``, e.g. "DE".
    """

    name: str
    region: str
    zone_tier: StorageZoneTier = StorageZoneTier.STANDARD
    replication_regions: list[str] | None = None
    origin_url: str | None = None


@dataclass(slots=True)
class UpdateStorageZoneParameters:
    replication_regions: list[str] | None = None
    origin_url: str | None = None
    custom_404_file_path: str | None = None
    rewrite_404_to_200: bool | None = None


@dataclass(slots=True)
class StorageZoneStatisticsParameters:
    # Both default to the last 30 days on the API side
    date_from: datetime | None = None
    date_to: datetime | None = None


@dataclass(slots=True)
class PullZonesParameters:
    search: str | None = None
    include_certificate: bool | None = None


@dataclass(slots=True)
class StatisticsParameters:
    """Filters for account statistics.

    See https://docs.bunny.net/reference/statisticspublic_index
    """

    date_from: datetime | None = None
    date_to: datetime | None = None
    pull_zone: int | None = None
    server_zone_id: int | None = None
    # Include non-2xx response charts
    load_errors: bool | None = None
    hourly: bool | None = None


__all__ = [
    "PageParameters",
    "StorageZonesParameters",
    "AddStorageZoneParameters",
    "UpdateStorageZoneParameters",
    "StorageZoneStatisticsParameters",
    "PullZonesParameters",
    "StatisticsParameters",
]
