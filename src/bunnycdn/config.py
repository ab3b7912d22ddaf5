"""Client configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from dotenv import dotenv_values, find_dotenv

from ._http import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT
from .endpoints import StorageEndpoint
from .errors import ConfigError

logger = logging.getLogger("bunnycdn.config")

ENV_API_KEY = "BUNNYSTORAGE_API_KEY"
ENV_READ_PASSWORD = "BUNNYSTORAGE_READ_PASSWORD"
ENV_WRITE_PASSWORD = "BUNNYSTORAGE_WRITE_PASSWORD"
ENV_STORAGE_ZONE_NAME = "BUNNYSTORAGE_STORAGE_ZONE_NAME"
ENV_ENDPOINT = "BUNNYSTORAGE_ENDPOINT"


@dataclass(frozen=True)
class ClientConfig:
    """SDK configuration.

    ``write_password`` may be omitted; uploads and deletes then fail with a
    ValidationError instead of reaching the API.
    """

    api_key: str
    read_password: str
    storage_zone_name: str
    endpoint: StorageEndpoint | None
    write_password: str | None = None
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    headers: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Raise ConfigError naming the first required field that is unusable."""
        if not _is_filled(self.api_key):
            raise ConfigError("API key must not be empty", field="api_key")
        if not _is_filled(self.read_password):
            raise ConfigError("Read password must not be empty", field="read_password")
        if not isinstance(self.endpoint, StorageEndpoint):
            raise ConfigError("Endpoint must be a known storage endpoint", field="endpoint")
        if not _is_filled(self.storage_zone_name):
            raise ConfigError(
                "Storage zone name must not be empty", field="storage_zone_name"
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ConfigError:
            return False
        return True

    @property
    def storage_url(self) -> str:
        """Root URL of the configured storage zone, without a trailing slash."""
        if self.endpoint is None:
            raise ConfigError("Endpoint must be a known storage endpoint", field="endpoint")
        return f"{self.endpoint.url}/{self.storage_zone_name}"

    def api_url(self, path: str) -> str:
        return self.api_base_url.rstrip("/") + "/" + path.lstrip("/")


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _require(source: Mapping[str, str], key: str) -> str:
    value = source.get(key)
    if value is None:
        raise ConfigError(f"Missing configuration value. Check {key}", field=key)
    trimmed = value.strip()
    if not trimmed:
        raise ConfigError(
            f"Invalid configuration value. Must not be empty. Check {key}", field=key
        )
    return trimmed


def _optional(source: Mapping[str, str], key: str) -> str | None:
    value = source.get(key)
    if value is None or not value.strip():
        logger.debug("%s not set; write operations are disabled", key)
        return None
    return value.strip()


def _read_env_file(env_file: str | os.PathLike[str] | bool) -> dict[str, str]:
    path = find_dotenv(usecwd=True) if env_file is True else os.fspath(env_file)
    if not path:
        return {}
    return {k: v for k, v in dotenv_values(path).items() if v is not None}


def load_config(
    source: Mapping[str, str] | None = None,
    *,
    env_file: str | os.PathLike[str] | bool | None = None,
    api_base_url: str = DEFAULT_API_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> ClientConfig:
    """Build a ClientConfig from a key-value source.

    Args:
        source: Mapping to read from. Defaults to ``os.environ``.
        env_file: Optional ``.env`` file whose values sit underneath ``source``.
            ``True`` searches for one starting at the working directory.
        api_base_url: Management API root.
        timeout: Request timeout in seconds.

    Raises:
        ConfigError: If a required value is missing or blank, or the endpoint
            name is not a known storage host.
    """
    values: dict[str, str] = {}
    if env_file:
        values.update(_read_env_file(env_file))
    values.update(os.environ if source is None else source)

    config = ClientConfig(
        api_key=_require(values, ENV_API_KEY),
        read_password=_require(values, ENV_READ_PASSWORD),
        storage_zone_name=_require(values, ENV_STORAGE_ZONE_NAME),
        endpoint=StorageEndpoint.from_name(_require(values, ENV_ENDPOINT)),
        write_password=_optional(values, ENV_WRITE_PASSWORD),
        api_base_url=api_base_url,
        timeout=timeout,
    )
    config.validate()
    return config


__all__ = [
    "ClientConfig",
    "load_config",
    "ENV_API_KEY",
    "ENV_READ_PASSWORD",
    "ENV_WRITE_PASSWORD",
    "ENV_STORAGE_ZONE_NAME",
    "ENV_ENDPOINT",
]
