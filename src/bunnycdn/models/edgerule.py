from __future__ import annotations

from enum import IntEnum
from typing import Annotated

from pydantic import Field

from ._base import BunnyModel, enum_by_name
from .trigger import Trigger, TriggerMatchingType


class EdgeRuleActionType(IntEnum):
    FORCE_SSL = 0
    REDIRECT = 1
    ORIGIN_URL = 2
    OVERRIDE_CACHE_TIME = 3
    BLOCK_REQUEST = 4
    SET_RESPONSE_HEADER = 5
    SET_REQUEST_HEADER = 6
    FORCE_DOWNLOAD = 7
    DISABLE_TOKEN_AUTHENTICATION = 8
    ENABLE_TOKEN_AUTHENTICATION = 9
    OVERRIDE_CACHE_TIME_PUBLIC = 10
    IGNORE_QUERY_STRING = 11
    DISABLE_OPTIMIZER = 12
    FORCE_COMPRESSION = 13
    SET_STATUS_CODE = 14
    BYPASS_PERMA_CACHE = 15
    OVERRIDE_BROWSER_CACHE_TIME = 16
    ORIGIN_STORAGE = 17
    SET_NETWORK_RATE_LIMIT = 18
    SET_CONNECTION_LIMIT = 19
    SET_REQUESTS_PER_SECOND_LIMIT = 20
    RUN_EDGE_SCRIPT = 21
    ORIGIN_MAGIC_CONTAINERS = 22
    DISABLE_WAF = 23
    RETRY_ORIGIN = 24


class EdgeRule(BunnyModel):
    guid: str
    action_type: Annotated[EdgeRuleActionType, enum_by_name(EdgeRuleActionType)] = (
        EdgeRuleActionType.FORCE_SSL
    )
    # Meaning of both parameters depends on action_type
    action_parameter_1: str | None = None
    action_parameter_2: str | None = None
    triggers: list[Trigger] = Field(default_factory=list)
    trigger_matching_type: Annotated[
        TriggerMatchingType, enum_by_name(TriggerMatchingType)
    ] = TriggerMatchingType.MATCH_ANY
    description: str = ""
    enabled: bool = True
