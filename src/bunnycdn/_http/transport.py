"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

import abc
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from .clients import create_base_async_client, create_base_client
from .config import ACCESS_KEY_HEADER, CONTENT_TYPE_JSON, CONTENT_TYPE_OCTET_STREAM

logger = logging.getLogger("bunnycdn.http")


@dataclass(frozen=True, slots=True)
class JSONBody:
    """JSON request body - sets Content-Type to application/json."""

    data: Any


@dataclass(frozen=True, slots=True)
class BytesBody:
    """Raw bytes request body with explicit content type."""

    data: bytes
    content_type: str = CONTENT_TYPE_OCTET_STREAM


RequestBody = JSONBody | BytesBody | None

ChunkSink = Callable[[bytes], None]


def _build_request(
    access_key: str,
    body: RequestBody,
    headers: Mapping[str, str] | None,
) -> tuple[dict[str, str], Any | None, bytes | None]:
    request_headers = {ACCESS_KEY_HEADER: access_key}

    json_data: Any | None = None
    raw_content: bytes | None = None
    if isinstance(body, JSONBody):
        json_data = body.data
        request_headers["content-type"] = CONTENT_TYPE_JSON
    elif isinstance(body, BytesBody):
        raw_content = body.data
        request_headers["content-type"] = body.content_type

    # Explicit overrides win over body-derived headers
    if headers:
        request_headers.update(headers)
    return request_headers, json_data, raw_content


class BaseTransport(abc.ABC):
    """Abstract transport with async interface."""

    @abc.abstractmethod
    async def send(
        self,
        method: str,
        url: str,
        *,
        access_key: str,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send an HTTP request and return the response."""
        ...

    @abc.abstractmethod
    async def stream(
        self,
        method: str,
        url: str,
        *,
        access_key: str,
        on_chunk: ChunkSink,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and feed the body to ``on_chunk`` as it arrives.

        Raises httpx.HTTPStatusError before any chunk is delivered when the
        response is not a success.
        """
        ...

    @abc.abstractmethod
    async def close(self) -> None: ...


class BlockingTransport(BaseTransport):
    """Sync I/O transport. Methods are async def but don't suspend."""

    def __init__(
        self,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._timeout = timeout
        self._headers = dict(headers or {})
        self._client = client

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = create_base_client(timeout=self._timeout, headers=self._headers)
        return self._client

    async def send(
        self,
        method: str,
        url: str,
        *,
        access_key: str,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        request_headers, json_data, raw_content = _build_request(access_key, body, headers)
        logger.debug("%s %s", method, url)
        return self._get_client().request(
            method,
            url,
            params=dict(params) if params else None,
            json=json_data,
            content=raw_content,
            headers=request_headers,
        )

    async def stream(
        self,
        method: str,
        url: str,
        *,
        access_key: str,
        on_chunk: ChunkSink,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        request_headers, _, _ = _build_request(access_key, None, headers)
        logger.debug("%s %s (streaming)", method, url)
        with self._get_client().stream(method, url, headers=request_headers) as resp:
            if not resp.is_success:
                resp.read()
                resp.raise_for_status()
            for chunk in resp.iter_bytes():
                if chunk:
                    on_chunk(chunk)
        return resp

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


class AsyncTransport(BaseTransport):
    """Async I/O transport using httpx.AsyncClient."""

    def __init__(
        self,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout
        self._headers = dict(headers or {})
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = create_base_async_client(
                timeout=self._timeout, headers=self._headers
            )
        return self._client

    async def send(
        self,
        method: str,
        url: str,
        *,
        access_key: str,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        request_headers, json_data, raw_content = _build_request(access_key, body, headers)
        logger.debug("%s %s", method, url)
        return await self._get_client().request(
            method,
            url,
            params=dict(params) if params else None,
            json=json_data,
            content=raw_content,
            headers=request_headers,
        )

    async def stream(
        self,
        method: str,
        url: str,
        *,
        access_key: str,
        on_chunk: ChunkSink,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        request_headers, _, _ = _build_request(access_key, None, headers)
        logger.debug("%s %s (streaming)", method, url)
        async with self._get_client().stream(method, url, headers=request_headers) as resp:
            if not resp.is_success:
                await resp.aread()
                resp.raise_for_status()
            async for chunk in resp.aiter_bytes():
                if chunk:
                    on_chunk(chunk)
        return resp

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


__all__ = [
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "JSONBody",
    "BytesBody",
    "RequestBody",
    "ChunkSink",
]
