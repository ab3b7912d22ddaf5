"""Fixtures for integration tests using respx mocking."""

import pytest

# API base URLs
API_BASE = "https://api.bunny.net"
STORAGE_BASE = "https://storage.bunnycdn.com"
ZONE_BASE = f"{STORAGE_BASE}/test-zone"


# =============================================================================
# Storage API Mock Responses
# =============================================================================


def make_storage_file(
    name: str,
    *,
    path: str = "/test-zone/",
    is_directory: bool = False,
    length: int = 13,
) -> dict:
    return {
        "Guid": f"guid-{name}",
        "StorageZoneName": "test-zone",
        "Path": path,
        "ObjectName": name,
        "Length": length,
        "LastChanged": "2024-01-15T10:30:00.123",
        "ServerId": 12,
        "ArrayNumber": 0,
        "IsDirectory": is_directory,
        "UserId": "user-1",
        "ContentType": "" if is_directory else "text/plain",
        "DateCreated": "2024-01-15T10:29:00",
        "StorageZoneId": 1001,
        "Checksum": None if is_directory else "ABC123",
        "ReplicatedZones": "",
    }


@pytest.fixture
def storage_file_factory():
    """Build directory listing entries."""
    return make_storage_file


@pytest.fixture
def mock_files_list_response() -> list:
    """Mock response for a directory listing."""
    return [
        make_storage_file("images", is_directory=True, length=0),
        make_storage_file("hello.txt"),
    ]


@pytest.fixture
def mock_error_payload() -> dict:
    """The API's error body, returned with a 200 status by some endpoints."""
    return {
        "ErrorKey": "storagezone.not_found",
        "Field": "Id",
        "Message": "The requested storage zone was not found",
    }


# =============================================================================
# Management API Mock Responses
# =============================================================================


@pytest.fixture
def mock_region_data() -> list:
    return [
        {
            "Id": 1,
            "Name": "EU: Falkenstein, DE",
            "PricePerGigabyte": 0.01,
            "RegionCode": "DE",
            "ContinentCode": "EU",
            "CountryCode": "DE",
            "Latitude": 50.47,
            "Longitude": 12.37,
            "AllowLatencyRouting": True,
        },
        {
            "Id": 2,
            "Name": "NA: New York City, NY",
            "PricePerGigabyte": 0.01,
            "RegionCode": "NY",
            "ContinentCode": "NA",
            "CountryCode": "US",
            "Latitude": 40.71,
            "Longitude": -74.0,
            "AllowLatencyRouting": True,
        },
    ]


@pytest.fixture
def mock_storage_zone_data() -> dict:
    return {
        "Id": 1001,
        "UserId": "user-1",
        "Name": "test-zone",
        "Password": "write-password",
        "DateModified": "2024-01-15T10:30:00",
        "Deleted": False,
        "StorageUsed": 2048,
        "FilesStored": 2,
        "Region": "DE",
        "ReplicationRegions": ["NY"],
        "PullZones": [],
        "ReadOnlyPassword": "read-password",
        "Rewrite404To200": False,
        "Custom404FilePath": None,
        "StorageHostname": "storage.bunnycdn.com",
        "ZoneTier": 0,
        "ReplicationChangeInProgress": False,
        "PriceOverride": 0.0,
        "Discount": 0,
    }


@pytest.fixture
def mock_pull_zone_data() -> dict:
    return {
        "Id": 2002,
        "Name": "test-pull-zone",
        "OriginUrl": "https://example.com",
        "Enabled": True,
        "Hostnames": [
            {
                "Id": 1,
                "Value": "test-pull-zone.b-cdn.net",
                "ForceSSL": True,
                "IsSystemHostname": True,
                "HasCertificate": True,
            }
        ],
        "StorageZoneId": 0,
        "EnableGeoZoneUS": True,
        "EnableGeoZoneEU": False,
        "Type": 1,
        "EdgeRules": [],
    }


@pytest.fixture
def mock_api_keys_response() -> dict:
    """Paginated envelope, as returned by /apikey."""
    return {
        "Items": [
            {"Id": 1, "Key": "key-one", "Roles": ["Admin"]},
            {"Id": 2, "Key": "key-two", "Roles": []},
        ],
        "CurrentPage": 1,
        "TotalItems": 2,
        "HasMoreItems": False,
    }


@pytest.fixture
def mock_statistics_response() -> dict:
    return {
        "TotalBandwidthUsed": 1024,
        "TotalOriginTraffic": 512,
        "AverageOriginResponseTime": 40,
        "TotalRequestsServed": 10,
        "CacheHitRate": 92.5,
        "BandwidthUsedChart": {"2024-01-15T00:00:00Z": 1024.0},
        "GeoTrafficDistribution": {"EU: Falkenstein, DE": 1024.0},
        "Error4xxChart": {"2024-01-15T00:00:00Z": 1.0},
    }


@pytest.fixture
def mock_countries_response() -> list:
    return [
        {
            "Name": "Germany",
            "IsoCode": "DE",
            "IsEU": True,
            "TaxRate": 19.0,
            "TaxPrefix": "DE",
            "FlagUrl": "https://bunnycdn.com/flags/de.png",
            "PopList": ["Falkenstein", "Frankfurt"],
        }
    ]
