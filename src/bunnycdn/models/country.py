from __future__ import annotations

from pydantic import Field

from ._base import BunnyModel


class Country(BunnyModel):
    """A billing country. See https://docs.bunny.net/reference/countriespublic_getcountrylist"""

    name: str
    iso_code: str
    is_eu: bool = Field(default=False, alias="IsEU")
    tax_rate: float = 0.0
    tax_prefix: str = ""
    flag_url: str = ""
    pop_list: list[str] = Field(default_factory=list)
