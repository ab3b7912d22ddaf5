#!/usr/bin/env python3
"""
Example demonstrating the storage zone files API.

Uploads a small file, lists its directory, downloads it back and removes the
directory again.

Requirements:
- BUNNYSTORAGE_API_KEY, BUNNYSTORAGE_READ_PASSWORD, BUNNYSTORAGE_WRITE_PASSWORD,
  BUNNYSTORAGE_STORAGE_ZONE_NAME and BUNNYSTORAGE_ENDPOINT set in the
  environment or a .env file

Usage:
    python examples/storage_files.py
"""

import tempfile
import uuid

from dotenv import find_dotenv, load_dotenv

from bunnycdn import BunnyCDNClient, BunnyError, ConfigError, load_config

load_dotenv(find_dotenv(usecwd=True))


def main() -> None:
    print("bunny.net Storage - Files Example")
    print("=" * 50)

    try:
        config = load_config()
    except ConfigError as exc:
        print(f"Skipping: {exc}")
        return
    if config.write_password is None:
        print("Skipping: BUNNYSTORAGE_WRITE_PASSWORD is required to upload")
        return

    directory = f"bunnycdn-example-{uuid.uuid4().hex[:8]}/"
    with BunnyCDNClient(config) as client:
        try:
            print(f"\n1. Uploading {directory}hello.txt ...")
            key = client.files.upload_bytes(
                f"{directory}hello.txt", b"Hello, bunny!", checksum=True
            )
            print(f"   Stored as {key}")

            print("\n2. Listing the directory ...")
            for entry in client.files.list(directory):
                print(f"   - {entry.full_path} ({entry.length} bytes)")

            print("\n3. Downloading it back ...")
            with tempfile.TemporaryDirectory() as tmp:
                written = client.files.download(key, tmp)
                with open(written, "rb") as f:
                    print(f"   {written}: {f.read()!r}")
        except BunnyError as exc:
            print(f"Error: {exc}")
            raise
        finally:
            print("\n4. Cleaning up ...")
            client.files.delete_directory(directory)

    print("\nDone")


if __name__ == "__main__":
    main()
