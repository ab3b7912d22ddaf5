"""Exception hierarchy for the bunny.net client.

Every failure surfaced by this package is a :class:`BunnyError`. It carries
the same three fields as the error payload the remote API returns, so a
remote rejection and a local one look the same to callers.
"""

from __future__ import annotations


class BunnyError(Exception):
    """Base error with a machine-readable key, the offending field and a message."""

    def __init__(self, message: str, *, error_key: str = "", field: str = "") -> None:
        super().__init__(message)
        self.error_key = error_key
        self.field = field
        self.message = message

    def __str__(self) -> str:
        details = ", ".join(
            f"{name}={value}"
            for name, value in (("error_key", self.error_key), ("field", self.field))
            if value
        )
        return f"{self.message} ({details})" if details else self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"error_key={self.error_key!r}, field={self.field!r})"
        )


class ConfigError(BunnyError):
    """A required setting is missing or blank, or the endpoint is unknown."""


class TransportError(BunnyError):
    """The request failed on the wire or came back with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_key: str = "",
        field: str = "",
    ) -> None:
        super().__init__(message, error_key=error_key, field=field)
        self.status_code = status_code


class RemoteError(BunnyError):
    """A 2xx response whose body is the API's error payload."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_key: str = "",
        field: str = "",
    ) -> None:
        super().__init__(message, error_key=error_key, field=field)
        self.status_code = status_code


class ValidationError(BunnyError):
    """Input rejected locally before any request was sent."""


class DecodeError(BunnyError):
    """A response body did not match the expected record shape."""


__all__ = [
    "BunnyError",
    "ConfigError",
    "TransportError",
    "RemoteError",
    "ValidationError",
    "DecodeError",
]
