"""Shared HTTP infrastructure for bunny.net API clients."""

from .clients import create_base_async_client, create_base_client
from .config import (
    ACCESS_KEY_HEADER,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_OCTET_STREAM,
    DEFAULT_API_BASE_URL,
    DEFAULT_TIMEOUT,
)
from .iter_coroutine import iter_coroutine
from .transport import (
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    BytesBody,
    ChunkSink,
    JSONBody,
    RequestBody,
)

__all__ = [
    "ACCESS_KEY_HEADER",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_OCTET_STREAM",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_TIMEOUT",
    "iter_coroutine",
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "JSONBody",
    "BytesBody",
    "RequestBody",
    "ChunkSink",
    "create_base_client",
    "create_base_async_client",
]
