"""bunny.net API clients with namespaced sub-clients."""

from __future__ import annotations

from typing import Any

import httpx

from ._core import (
    APIKeysClient,
    AsyncAPIKeysClient,
    AsyncCountriesClient,
    AsyncFilesClient,
    AsyncPullZonesClient,
    AsyncRegionsClient,
    AsyncStatisticsClient,
    AsyncStorageZonesClient,
    CountriesClient,
    FilesClient,
    PullZonesClient,
    RegionsClient,
    StatisticsClient,
    StorageZonesClient,
)
from ._http import AsyncTransport, BlockingTransport, iter_coroutine
from .config import ClientConfig, load_config


class BunnyCDNClient:
    """Synchronous bunny.net SDK client.

    Without ``config`` the configuration is read from the environment with
    :func:`bunnycdn.load_config`.

    Example:
        >>> with BunnyCDNClient() as client:
        ...     for entry in client.files.list("/images"):
        ...         print(entry.full_path)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
    ):
        self._config = config if config is not None else load_config()
        self._config.validate()
        self._transport = BlockingTransport(
            self._config.timeout, self._config.headers, client=http_client
        )
        self.files = FilesClient(self._transport, self._config)
        self.storage_zones = StorageZonesClient(self._transport, self._config)
        self.pull_zones = PullZonesClient(self._transport, self._config)
        self.api_keys = APIKeysClient(self._transport, self._config)
        self.regions = RegionsClient(self._transport, self._config)
        self.statistics = StatisticsClient(self._transport, self._config)
        self.countries = CountriesClient(self._transport, self._config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        iter_coroutine(self._transport.close())

    def __enter__(self) -> BunnyCDNClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncBunnyCDNClient:
    """Asynchronous bunny.net SDK client."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._config = config if config is not None else load_config()
        self._config.validate()
        self._transport = AsyncTransport(
            self._config.timeout, self._config.headers, client=http_client
        )
        self.files = AsyncFilesClient(self._transport, self._config)
        self.storage_zones = AsyncStorageZonesClient(self._transport, self._config)
        self.pull_zones = AsyncPullZonesClient(self._transport, self._config)
        self.api_keys = AsyncAPIKeysClient(self._transport, self._config)
        self.regions = AsyncRegionsClient(self._transport, self._config)
        self.statistics = AsyncStatisticsClient(self._transport, self._config)
        self.countries = AsyncCountriesClient(self._transport, self._config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> AsyncBunnyCDNClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
