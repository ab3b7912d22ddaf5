#!/usr/bin/env python3
"""
Async example demonstrating the management API.

Lists regions, looks up the configured storage zone and prints its usage.

Requirements:
- BUNNYSTORAGE_* variables set in the environment or a .env file

Usage:
    python examples/storage_zones_async.py
"""

import asyncio

from dotenv import find_dotenv, load_dotenv

from bunnycdn import AsyncBunnyCDNClient, ConfigError, load_config

load_dotenv(find_dotenv(usecwd=True))


async def main() -> None:
    print("bunny.net Storage Zones - Async Example")
    print("=" * 50)

    try:
        config = load_config()
    except ConfigError as exc:
        print(f"Skipping: {exc}")
        return

    async with AsyncBunnyCDNClient(config) as client:
        regions = await client.regions.list()
        print(f"\nFound {len(regions)} regions")
        for region in regions[:5]:
            print(f"   - {region.region_code}: {region.name}")

        zone = await client.storage_zones.find(config.storage_zone_name)
        if zone is None:
            print(f"\nStorage zone {config.storage_zone_name!r} does not exist")
            return
        print(f"\nStorage zone {zone.name} ({zone.id})")
        replicas = ", ".join(zone.replication_regions) or "-"
        print(f"   region: {zone.region}, replicated to: {replicas}")
        print(f"   {zone.files_stored} files, {zone.storage_used} bytes")

        stats = await client.storage_zones.get_statistics(zone.id)
        print(f"   {len(stats.storage_used_chart)} days of usage history")


if __name__ == "__main__":
    asyncio.run(main())
