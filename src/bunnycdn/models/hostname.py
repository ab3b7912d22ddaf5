from __future__ import annotations

from pydantic import Field

from ._base import BunnyModel


class Hostname(BunnyModel):
    """A hostname linked to a pull zone."""

    id: int
    value: str
    force_ssl: bool = Field(default=False, alias="ForceSSL")
    # True for the b-cdn.net hostname managed by bunny.net
    is_system_hostname: bool = False
    has_certificate: bool = False
    # Base64Url encoded; only returned when the certificate is requested
    certificate: str | None = None
    certificate_key: str | None = None
