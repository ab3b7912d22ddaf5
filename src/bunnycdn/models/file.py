from __future__ import annotations

from ._base import BunnyModel, UTCDateTime


class StorageFile(BunnyModel):
    """An entry of a storage zone directory listing (a file or a directory)."""

    guid: str
    storage_zone_name: str
    path: str
    object_name: str
    length: int = 0
    last_changed: UTCDateTime
    server_id: int = 0
    array_number: int = 0
    is_directory: bool
    user_id: str = ""
    content_type: str = ""
    date_created: UTCDateTime
    storage_zone_id: int
    checksum: str | None = None
    replicated_zones: str | None = None

    @property
    def full_path(self) -> str:
        """Path of the entry relative to the zone root, directories with a trailing slash."""
        prefix = f"/{self.storage_zone_name}/"
        relative = self.path[len(prefix) :] if self.path.startswith(prefix) else self.path
        suffix = "/" if self.is_directory else ""
        return f"{relative.lstrip('/')}{self.object_name}{suffix}"
