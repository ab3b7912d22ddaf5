"""Fixtures for live API tests.

These tests require real API credentials set via environment variables:
- BUNNYSTORAGE_API_KEY: account API key
- BUNNYSTORAGE_READ_PASSWORD / BUNNYSTORAGE_WRITE_PASSWORD: storage zone passwords
- BUNNYSTORAGE_STORAGE_ZONE_NAME: storage zone used for file tests
- BUNNYSTORAGE_ENDPOINT: storage hostname, e.g. storage.bunnycdn.com

A ``.env`` file in the working directory is read as well.
"""

from collections.abc import Generator

import pytest

from bunnycdn import BunnyCDNClient, ClientConfig, ConfigError, load_config


@pytest.fixture(scope="session")
def live_config() -> ClientConfig:
    try:
        return load_config(env_file=True)
    except ConfigError as exc:
        pytest.skip(f"Requires BUNNYSTORAGE_* environment variables ({exc})")


@pytest.fixture
def live_client(live_config: ClientConfig) -> Generator[BunnyCDNClient, None, None]:
    with BunnyCDNClient(live_config) as client:
        yield client
