"""Python client for the bunny.net storage and CDN APIs."""

from .client import AsyncBunnyCDNClient, BunnyCDNClient
from .config import ClientConfig, load_config
from .endpoints import StorageEndpoint
from .errors import (
    BunnyError,
    ConfigError,
    DecodeError,
    RemoteError,
    TransportError,
    ValidationError,
)
from .models import (
    APIKey,
    Country,
    ListResult,
    PageMeta,
    PullZone,
    Region,
    Statistics,
    StorageFile,
    StorageZone,
    StorageZoneStatistics,
    StorageZoneTier,
)
from .types import (
    AddStorageZoneParameters,
    PageParameters,
    PullZonesParameters,
    StatisticsParameters,
    StorageZonesParameters,
    StorageZoneStatisticsParameters,
    UpdateStorageZoneParameters,
)

__version__ = "0.1.0"

__all__ = [
    "BunnyCDNClient",
    "AsyncBunnyCDNClient",
    "ClientConfig",
    "load_config",
    "StorageEndpoint",
    "BunnyError",
    "ConfigError",
    "DecodeError",
    "RemoteError",
    "TransportError",
    "ValidationError",
    "APIKey",
    "Country",
    "ListResult",
    "PageMeta",
    "PullZone",
    "Region",
    "Statistics",
    "StorageFile",
    "StorageZone",
    "StorageZoneStatistics",
    "StorageZoneTier",
    "AddStorageZoneParameters",
    "PageParameters",
    "PullZonesParameters",
    "StatisticsParameters",
    "StorageZonesParameters",
    "StorageZoneStatisticsParameters",
    "UpdateStorageZoneParameters",
]
