from __future__ import annotations

from ._base import BunnyModel


class Region(BunnyModel):
    """An edge region and its pricing."""

    id: int
    name: str
    price_per_gigabyte: float = 0.0
    region_code: str = ""
    continent_code: str = ""
    country_code: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    allow_latency_routing: bool = False
