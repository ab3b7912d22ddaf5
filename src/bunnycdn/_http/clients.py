"""Client factory functions for creating pre-configured httpx clients."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .config import CONTENT_TYPE_JSON, DEFAULT_TIMEOUT


def _client_kwargs(
    timeout: float | None,
    headers: Mapping[str, str] | None,
) -> dict[str, Any]:
    """Shared keyword arguments for the sync and async factories.

    Static headers are client defaults, so per-request headers take precedence.
    """
    effective_timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
    return {
        "timeout": httpx.Timeout(effective_timeout),
        "headers": {"accept": CONTENT_TYPE_JSON, **(headers or {})},
    }


def create_base_client(
    timeout: float | None = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.Client:
    """Create a sync httpx client shared by every request of one bunny.net client.

    Auth is handled per-request, since the access key differs between the
    management API and the storage API.

    Args:
        timeout: Request timeout in seconds. Defaults to DEFAULT_TIMEOUT.
        headers: Extra static headers added to every request.

    Returns:
        An httpx.Client with basic configuration.
    """
    return httpx.Client(**_client_kwargs(timeout, headers))


def create_base_async_client(
    timeout: float | None = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an async httpx client shared by every request of one bunny.net client.

    Args:
        timeout: Request timeout in seconds. Defaults to DEFAULT_TIMEOUT.
        headers: Extra static headers added to every request.

    Returns:
        An httpx.AsyncClient with basic configuration.
    """
    return httpx.AsyncClient(**_client_kwargs(timeout, headers))


__all__ = [
    "create_base_client",
    "create_base_async_client",
]
