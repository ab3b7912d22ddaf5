from __future__ import annotations

from enum import IntEnum
from typing import Annotated

from pydantic import Field

from ._base import BunnyModel, UTCDateTime, enum_by_name
from .pullzone import PullZone


class StorageZoneTier(IntEnum):
    STANDARD = 0
    EDGE = 1


class StorageZone(BunnyModel):
    """A file-storage container.

    See https://docs.bunny.net/reference/storagezonepublic_index
    """

    id: int
    user_id: str = ""
    name: str
    # Read-write API access key / FTP password
    password: str | None = None
    date_modified: UTCDateTime
    deleted: bool = False
    storage_used: int = 0
    files_stored: int = 0
    region: str = ""
    replication_regions: list[str] = Field(default_factory=list)
    pull_zones: list[PullZone] | None = None
    read_only_password: str | None = None
    rewrite_404_to_200: bool = False
    custom_404_file_path: str | None = None
    storage_hostname: str | None = None
    zone_tier: Annotated[StorageZoneTier, enum_by_name(StorageZoneTier)] = (
        StorageZoneTier.STANDARD
    )
    # True while a new replication region is being enabled
    replication_change_in_progress: bool = False
    price_override: float = 0.0
    discount: int = 0
