from __future__ import annotations

from enum import IntEnum
from typing import Annotated

from pydantic import Field

from ._base import BunnyModel, enum_by_name


class TriggerType(IntEnum):
    URL = 0
    REQUEST_HEADER = 1
    RESPONSE_HEADER = 2
    URL_EXTENSION = 3
    COUNTRY_CODE = 4
    REMOTE_IP = 5
    URL_QUERY_STRING = 6
    RANDOM_CHANCE = 7
    STATUS_CODE = 8
    REQUEST_METHOD = 9
    COOKIE_VALUE = 10
    COUNTRY_STATE_CODE = 11
    ORIGIN_RETRY_ATTEMPT_COUNT = 12
    ORIGIN_CONNECTION_ERROR = 13


class TriggerPatternMatchingType(IntEnum):
    MATCH_ANY = 0
    MATCH_ALL = 1
    MATCH_NONE = 2


class TriggerMatchingType(IntEnum):
    MATCH_ANY = 0
    MATCH_ALL = 1
    MATCH_NONE = 2


class Trigger(BunnyModel):
    """One condition of an edge rule."""

    trigger_type: Annotated[TriggerType, enum_by_name(TriggerType)] = Field(
        default=TriggerType.URL, alias="Type"
    )
    # The list of pattern matches that will trigger the edge rule
    pattern_matches: list[str] = Field(default_factory=list)
    pattern_matching_type: Annotated[
        TriggerPatternMatchingType, enum_by_name(TriggerPatternMatchingType)
    ] = TriggerPatternMatchingType.MATCH_ANY
    # Meaning depends on the trigger type, e.g. the header name
    parameter_1: str | None = None
