"""Typed records decoded from bunny.net API responses."""

from ._base import BunnyModel, UTCDateTime, parse_datetime, wire_name
from .apikey import APIKey
from .country import Country
from .edgerule import EdgeRule, EdgeRuleActionType
from .envelope import ErrorPayload, ListResult, PageMeta
from .file import StorageFile
from .hostname import Hostname
from .pullzone import LogForwardingProtocol, PullZone, PullZoneType
from .region import Region
from .statistics import Statistics, StorageZoneStatistics
from .storagezone import StorageZone, StorageZoneTier
from .trigger import Trigger, TriggerMatchingType, TriggerPatternMatchingType, TriggerType

__all__ = [
    "BunnyModel",
    "UTCDateTime",
    "parse_datetime",
    "wire_name",
    "APIKey",
    "Country",
    "EdgeRule",
    "EdgeRuleActionType",
    "ErrorPayload",
    "ListResult",
    "PageMeta",
    "StorageFile",
    "Hostname",
    "LogForwardingProtocol",
    "PullZone",
    "PullZoneType",
    "Region",
    "Statistics",
    "StorageZoneStatistics",
    "StorageZone",
    "StorageZoneTier",
    "Trigger",
    "TriggerMatchingType",
    "TriggerPatternMatchingType",
    "TriggerType",
]
