"""Regional storage endpoints."""

from __future__ import annotations

from enum import Enum

from .errors import ConfigError


class StorageEndpoint(str, Enum):
    """The storage hosts a storage zone can be served from.

    Each member's value is its hostname.
    """

    FALKENSTEIN = "storage.bunnycdn.com"
    LONDON = "uk.storage.bunnycdn.com"
    NEW_YORK = "ny.storage.bunnycdn.com"
    LOS_ANGELES = "la.storage.bunnycdn.com"
    SINGAPORE = "sg.storage.bunnycdn.com"
    STOCKHOLM = "se.storage.bunnycdn.com"
    SAO_PAULO = "br.storage.bunnycdn.com"
    JOHANNESBURG = "jh.storage.bunnycdn.com"
    SYDNEY = "syd.storage.bunnycdn.com"

    @property
    def hostname(self) -> str:
        return self.value

    @property
    def url(self) -> str:
        return f"https://{self.value}"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> StorageEndpoint:
        """Look up an endpoint by its exact hostname.

        Raises:
            ConfigError: If ``name`` is not one of the known hostnames.
        """
        for endpoint in cls:
            if endpoint.value == name:
                return endpoint
        raise ConfigError(
            f"Invalid endpoint name - provided {name!r}",
            error_key="endpoint.invalid",
            field="endpoint",
        )


__all__ = ["StorageEndpoint"]
