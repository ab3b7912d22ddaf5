"""Shared pieces for the wire records."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

_E = TypeVar("_E", bound=Enum)

# The API emits several timestamp layouts, including one with no separator
# between date and time.
_DATETIME_FORMATS = (
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d%H:%M:%S",
    "%Y-%m-%d%H:%M:%S.%f",
)


def wire_name(field_name: str) -> str:
    """snake_case attribute -> PascalCase wire key ("error_3xx_chart" -> "Error3xxChart")."""
    return "".join(part[:1].upper() + part[1:] for part in field_name.split("_"))


def parse_datetime(value: Any) -> Any:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str):
        return value
    text = value.strip()
    # strptime's %f takes at most six digits; the API sometimes sends seven
    head, dot, fraction = text.partition(".")
    if dot and len(fraction) > 6 and fraction.isdigit():
        text = f"{head}.{fraction[:6]}"
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


UTCDateTime = Annotated[
    datetime,
    BeforeValidator(parse_datetime),
    PlainSerializer(lambda dt: dt.isoformat(), return_type=str),
]


def _fold(name: str) -> str:
    return name.replace("_", "").lower()


def enum_by_name(enum_cls: type[_E]) -> BeforeValidator:
    """Accept an enum member by its wire name ("ForceSSL" for FORCE_SSL) as well as by value."""
    by_name = {_fold(member.name): member for member in enum_cls}

    def coerce(value: Any) -> Any:
        if isinstance(value, str) and _fold(value) in by_name:
            return by_name[_fold(value)]
        return value

    return BeforeValidator(coerce)


class BunnyModel(BaseModel):
    """Base for records decoded from the API.

    Attributes map to PascalCase keys through ``wire_name``; fields whose wire
    key doesn't follow that rule declare it with ``Field(alias=...)`` next to
    the attribute.
    """

    model_config = ConfigDict(
        alias_generator=wire_name,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


__all__ = [
    "BunnyModel",
    "UTCDateTime",
    "enum_by_name",
    "parse_datetime",
    "wire_name",
]
