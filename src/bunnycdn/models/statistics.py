from __future__ import annotations

from pydantic import Field

from ._base import BunnyModel

Chart = dict[str, float]


def _chart():
    return Field(default_factory=dict)


class Statistics(BunnyModel):
    """Account or pull zone traffic statistics.

    Chart fields map an ISO timestamp (or a region code for
    ``geo_traffic_distribution``) to a value.
    See https://docs.bunny.net/reference/statisticspublic_index
    """

    total_bandwidth_used: int = 0
    total_origin_traffic: int = 0
    average_origin_response_time: int = 0
    origin_response_time_chart: Chart = _chart()
    total_requests_served: int = 0
    cache_hit_rate: float = 0.0
    bandwidth_used_chart: Chart = _chart()
    bandwidth_cached_chart: Chart = _chart()
    cache_hit_rate_chart: Chart = _chart()
    requests_served_chart: Chart = _chart()
    pull_requests_pulled_chart: Chart = _chart()
    origin_shield_bandwidth_used_chart: Chart = _chart()
    origin_shield_internal_bandwidth_used_chart: Chart = _chart()
    origin_traffic_chart: Chart = _chart()
    user_balance_history_chart: Chart = _chart()
    geo_traffic_distribution: Chart = _chart()
    error_3xx_chart: Chart = _chart()
    error_4xx_chart: Chart = _chart()
    error_5xx_chart: Chart = _chart()


class StorageZoneStatistics(BunnyModel):
    storage_used_chart: Chart = _chart()
    file_count_chart: Chart = _chart()
