"""Resource clients sharing one async implementation with sync and async facades."""

from .api_keys import APIKeysClient, AsyncAPIKeysClient
from .files import AsyncFilesClient, FilesClient
from .pull_zones import AsyncPullZonesClient, PullZonesClient
from .regions import AsyncCountriesClient, AsyncRegionsClient, CountriesClient, RegionsClient
from .request import APIResponse, BaseResourceClient, classify_response
from .statistics import AsyncStatisticsClient, StatisticsClient
from .storage_zones import AsyncStorageZonesClient, StorageZonesClient

__all__ = [
    "APIResponse",
    "BaseResourceClient",
    "classify_response",
    "FilesClient",
    "AsyncFilesClient",
    "StorageZonesClient",
    "AsyncStorageZonesClient",
    "PullZonesClient",
    "AsyncPullZonesClient",
    "APIKeysClient",
    "AsyncAPIKeysClient",
    "RegionsClient",
    "AsyncRegionsClient",
    "CountriesClient",
    "AsyncCountriesClient",
    "StatisticsClient",
    "AsyncStatisticsClient",
]
