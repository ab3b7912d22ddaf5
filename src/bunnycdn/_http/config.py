"""HTTP configuration constants for bunny.net API clients."""

DEFAULT_API_BASE_URL = "https://api.bunny.net"
DEFAULT_TIMEOUT = 60.0

ACCESS_KEY_HEADER = "AccessKey"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"


__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ACCESS_KEY_HEADER",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_OCTET_STREAM",
]
