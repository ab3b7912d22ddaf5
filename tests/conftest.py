"""Shared fixtures for all tests."""

import time
import uuid
from collections.abc import Generator

import pytest

from bunnycdn import ClientConfig, StorageEndpoint
from bunnycdn.config import (
    ENV_API_KEY,
    ENV_ENDPOINT,
    ENV_READ_PASSWORD,
    ENV_STORAGE_ZONE_NAME,
    ENV_WRITE_PASSWORD,
)

TEST_ZONE = "test-zone"


@pytest.fixture
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear all BUNNYSTORAGE_* environment variables for testing.

    This ensures tests don't accidentally use real credentials from the environment.
    """
    for var in (
        ENV_API_KEY,
        ENV_READ_PASSWORD,
        ENV_WRITE_PASSWORD,
        ENV_STORAGE_ZONE_NAME,
        ENV_ENDPOINT,
    ):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_api_key() -> str:
    return "test-api-key-123456789"


@pytest.fixture
def mock_read_password() -> str:
    return "test-read-password-123"


@pytest.fixture
def mock_write_password() -> str:
    return "test-write-password-456"


@pytest.fixture
def mock_source(
    mock_api_key: str, mock_read_password: str, mock_write_password: str
) -> dict[str, str]:
    """A complete configuration mapping as it would appear in the environment."""
    return {
        ENV_API_KEY: mock_api_key,
        ENV_READ_PASSWORD: mock_read_password,
        ENV_WRITE_PASSWORD: mock_write_password,
        ENV_STORAGE_ZONE_NAME: TEST_ZONE,
        ENV_ENDPOINT: "storage.bunnycdn.com",
    }


@pytest.fixture
def mock_config(
    mock_api_key: str, mock_read_password: str, mock_write_password: str
) -> ClientConfig:
    return ClientConfig(
        api_key=mock_api_key,
        read_password=mock_read_password,
        write_password=mock_write_password,
        storage_zone_name=TEST_ZONE,
        endpoint=StorageEndpoint.FALKENSTEIN,
    )


@pytest.fixture
def unique_test_name() -> str:
    """Generate a unique test resource name with timestamp."""
    timestamp = int(time.time())
    unique_id = uuid.uuid4().hex[:8]
    return f"bunnycdn-py-test-{timestamp}-{unique_id}"

