from __future__ import annotations

from enum import IntEnum
from typing import Annotated

from pydantic import Field

from ._base import BunnyModel, enum_by_name
from .edgerule import EdgeRule
from .hostname import Hostname


class PullZoneType(IntEnum):
    PREMIUM = 0
    VOLUME = 1


class LogForwardingProtocol(IntEnum):
    UDP = 0
    TCP = 1
    TCP_ENCRYPTED = 2
    DATA_DOG = 3


def _empty_list():
    return Field(default_factory=list)


class PullZone(BunnyModel):
    """A CDN distribution.

    See https://docs.bunny.net/reference/pullzonepublic_index
    """

    id: int
    name: str
    # Where files are fetched from; empty when backed by a storage zone
    origin_url: str | None = None
    enabled: bool = True
    hostnames: list[Hostname] = _empty_list()
    storage_zone_id: int = 0
    edge_script_id: int = 0
    # Empty means every referrer is allowed
    allowed_referrers: list[str] = _empty_list()
    blocked_referrers: list[str] = _empty_list()
    blocked_ips: list[str] = _empty_list()
    enable_geo_zone_us: bool = Field(default=True, alias="EnableGeoZoneUS")
    enable_geo_zone_eu: bool = Field(default=True, alias="EnableGeoZoneEU")
    enable_geo_zone_asia: bool = Field(default=True, alias="EnableGeoZoneASIA")
    enable_geo_zone_sa: bool = Field(default=True, alias="EnableGeoZoneSA")
    enable_geo_zone_af: bool = Field(default=True, alias="EnableGeoZoneAF")
    zone_security_enabled: bool = False
    zone_security_key: str | None = None
    zone_security_include_hash_remote_ip: bool = Field(
        default=False, alias="ZoneSecurityIncludeHashRemoteIP"
    )
    ignore_query_strings: bool = True
    # Bytes; 0 for unlimited
    monthly_bandwidth_limit: int = 0
    monthly_bandwidth_used: int = 0
    monthly_charges: float = 0.0
    add_host_header: bool = False
    origin_host_header: str | None = None
    pull_zone_type: Annotated[PullZoneType, enum_by_name(PullZoneType)] = Field(
        default=PullZoneType.PREMIUM, alias="Type"
    )
    access_control_origin_header_extensions: list[str] = _empty_list()
    enable_access_control_origin: bool = False
    disable_cookies: bool = True
    budget_redirected_countries: list[str] = _empty_list()
    blocked_countries: list[str] = _empty_list()
    enable_origin_shield: bool = False
    cache_control_max_age_override: int = -1
    cache_control_public_max_age_override: int = -1
    burst_size: int = 0
    request_limit: int = 0
    block_root_path_access: bool = False
    block_post_requests: bool = False
    # kb/s; 0 for unlimited
    limit_rate_per_second: float = 0.0
    limit_rate_after: float = 0.0
    connection_limit_per_ip_count: int = 0
    price_override: float = 0.0
    add_canonical_header: bool = False
    enable_logging: bool = True
    enable_cache_slice: bool = False
    enable_smart_cache: bool = False
    edge_rules: list[EdgeRule] = _empty_list()
    enable_web_p_vary: bool = False
    enable_avif_vary: bool = False
    enable_country_code_vary: bool = False
    enable_mobile_vary: bool = False
    enable_cookie_vary: bool = False
    cookie_vary_parameters: list[str] = _empty_list()
    enable_hostname_vary: bool = False
    cname_domain: str | None = None
    aws_signing_enabled: bool = Field(default=False, alias="AWSSigningEnabled")
    aws_signing_key: str | None = Field(default=None, alias="AWSSigningKey")
    aws_signing_secret: str | None = Field(default=None, alias="AWSSigningSecret")
    aws_signing_region_name: str | None = Field(default=None, alias="AWSSigningRegionName")
    logging_ip_anonymization_enabled: bool = Field(
        default=True, alias="LoggingIPAnonymizationEnabled"
    )
    enable_tls1: bool = Field(default=True, alias="EnableTLS1")
    enable_tls1_1: bool = Field(default=True, alias="EnableTLS1_1")
    verify_origin_ssl: bool = Field(default=False, alias="VerifyOriginSSL")
    error_page_enable_custom_code: bool = False
    error_page_custom_code: str | None = None
    error_page_enable_statuspage_widget: bool = False
    error_page_statuspage_code: str | None = None
    error_page_whitelabel: bool = False
    origin_shield_zone_code: str | None = None
    log_forwarding_enabled: bool = False
    log_forwarding_hostname: str | None = None
    log_forwarding_port: int = 0
    log_forwarding_token: str | None = None
    log_forwarding_protocol: Annotated[
        LogForwardingProtocol, enum_by_name(LogForwardingProtocol)
    ] = LogForwardingProtocol.UDP
