from __future__ import annotations

from pydantic import Field

from ._base import BunnyModel


class APIKey(BunnyModel):
    id: int
    key: str
    roles: list[str] = Field(default_factory=list)
