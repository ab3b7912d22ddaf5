"""Storage zone files API client."""

from __future__ import annotations

import hashlib
import logging
import os

from .._http import BytesBody, iter_coroutine
from ..errors import BunnyError, ValidationError
from ..models import ListResult, StorageFile
from ..paths import (
    directory_delete_key,
    file_delete_key,
    listing_url,
    normalize_path,
    quote_key,
    resolve_download_path,
    resolve_upload_key,
    strip_leading,
)
from .request import APIResponse, BaseResourceClient, decode_list

logger = logging.getLogger("bunnycdn.files")

CHECKSUM_HEADER = "Checksum"


def _local_io_error(action: str, path: str, exc: OSError) -> BunnyError:
    return BunnyError(
        f"Failed {action} {path!r}: {exc}", error_key="local.io_error", field="local_path"
    )


def _remove_partial(path: str) -> None:
    try:
        if os.path.exists(path):
            os.remove(path)
            logger.debug("removed partial download %s", path)
    except OSError as exc:
        logger.warning("could not remove partial download %s: %s", path, exc)


class BaseFilesClient(BaseResourceClient):
    """Base files client with shared async business logic.

    Reads use the storage zone's read password; uploads and deletes use the
    write password.
    """

    def _file_url(self, key: str) -> str:
        return f"{self._config.storage_url}/{quote_key(key)}"

    async def _list(self, directory: str = "/") -> ListResult[StorageFile]:
        url = listing_url(self._config.storage_url, directory)
        response = await self._get(url, self._read_password)
        return decode_list(StorageFile, response)

    async def _put_content(self, key: str, content: bytes, checksum: bool) -> APIResponse:
        headers: dict[str, str] = {}
        if checksum:
            headers[CHECKSUM_HEADER] = hashlib.sha256(content).hexdigest().upper()
        response = await self._put(
            self._file_url(key), self._write_password, BytesBody(content), headers
        )
        logger.debug("uploaded %d bytes to %s", len(content), key)
        return response

    async def _upload(
        self,
        local_path: str | os.PathLike[str],
        remote_path: str | None = None,
        *,
        checksum: bool = False,
    ) -> str:
        key = resolve_upload_key(local_path, remote_path)
        source = os.path.abspath(normalize_path(local_path, "local_path"))
        if not os.path.isfile(source):
            raise ValidationError(
                f"Local file {source!r} does not exist or is not a regular file",
                error_key="local.not_found",
                field="local_path",
            )
        # Fail on a missing write password before touching the file
        _ = self._write_password
        try:
            with open(source, "rb") as f:
                content = f.read()
        except OSError as exc:
            raise _local_io_error("reading", source, exc) from exc
        await self._put_content(key, content, checksum)
        return key

    async def _upload_bytes(
        self,
        remote_path: str,
        content: bytes,
        *,
        checksum: bool = False,
    ) -> str:
        key = strip_leading(normalize_path(remote_path, "remote_path"))
        if not key or key.endswith("/"):
            raise ValidationError(
                f"Remote path {remote_path!r} must name a file", field="remote_path"
            )
        await self._put_content(key, bytes(content), checksum)
        return key

    async def _download(
        self,
        remote_path: str,
        local_path: str | os.PathLike[str] | None = None,
        *,
        overwrite: bool = True,
    ) -> str:
        dst = resolve_download_path(remote_path, local_path)
        key = strip_leading(normalize_path(remote_path, "remote_path"))
        if not overwrite and os.path.exists(dst):
            raise ValidationError(
                f"Destination {dst!r} exists; pass overwrite=True to replace it",
                error_key="local.exists",
                field="local_path",
            )
        try:
            os.makedirs(os.path.dirname(dst), exist_ok=True)
        except OSError as exc:
            raise _local_io_error("creating the directory of", dst, exc) from exc

        tmp = dst + ".part"
        try:
            with open(tmp, "wb") as f:
                await self._stream(self._file_url(key), self._read_password, f.write)
            os.replace(tmp, dst)
        except OSError as exc:
            _remove_partial(tmp)
            raise _local_io_error("writing", dst, exc) from exc
        except BaseException:
            _remove_partial(tmp)
            raise
        return dst

    async def _download_bytes(self, remote_path: str) -> bytes:
        key = strip_leading(normalize_path(remote_path, "remote_path"))
        if not key or key.endswith("/"):
            raise ValidationError(
                f"Remote path {remote_path!r} must name a file", field="remote_path"
            )
        buffer = bytearray()
        await self._stream(self._file_url(key), self._read_password, buffer.extend)
        return bytes(buffer)

    async def _delete_entry(self, key: str) -> None:
        await self._delete(self._file_url(key), self._write_password)
        logger.debug("deleted %s", key)

    async def _delete_file(self, path: str) -> None:
        await self._delete_entry(file_delete_key(path))

    async def _delete_directory(self, path: str) -> None:
        await self._delete_entry(directory_delete_key(path))


class FilesClient(BaseFilesClient):
    def list(self, directory: str = "/") -> ListResult[StorageFile]:
        """List a directory of the storage zone; blank or "/" lists the root."""
        return iter_coroutine(self._list(directory))

    def upload(
        self,
        local_path: str | os.PathLike[str],
        remote_path: str | None = None,
        *,
        checksum: bool = False,
    ) -> str:
        """Upload a local file and return the storage key it was written to.

        Without ``remote_path`` the local path is mirrored. A ``remote_path``
        without an extension is a directory that receives the local file name.
        With ``checksum`` the API verifies the upload against a SHA-256 digest.
        """
        return iter_coroutine(self._upload(local_path, remote_path, checksum=checksum))

    def upload_bytes(self, remote_path: str, content: bytes, *, checksum: bool = False) -> str:
        return iter_coroutine(self._upload_bytes(remote_path, content, checksum=checksum))

    def download(
        self,
        remote_path: str,
        local_path: str | os.PathLike[str] | None = None,
        *,
        overwrite: bool = True,
    ) -> str:
        """Download a file and return the absolute local path it was written to."""
        return iter_coroutine(self._download(remote_path, local_path, overwrite=overwrite))

    def download_bytes(self, remote_path: str) -> bytes:
        return iter_coroutine(self._download_bytes(remote_path))

    def delete_file(self, path: str) -> None:
        """Delete a file. Paths ending with "/" are rejected."""
        return iter_coroutine(self._delete_file(path))

    def delete_directory(self, path: str) -> None:
        """Delete a directory and its content. The path must end with "/"."""
        return iter_coroutine(self._delete_directory(path))


class AsyncFilesClient(BaseFilesClient):
    async def list(self, directory: str = "/") -> ListResult[StorageFile]:
        return await self._list(directory)

    async def upload(
        self,
        local_path: str | os.PathLike[str],
        remote_path: str | None = None,
        *,
        checksum: bool = False,
    ) -> str:
        return await self._upload(local_path, remote_path, checksum=checksum)

    async def upload_bytes(
        self, remote_path: str, content: bytes, *, checksum: bool = False
    ) -> str:
        return await self._upload_bytes(remote_path, content, checksum=checksum)

    async def download(
        self,
        remote_path: str,
        local_path: str | os.PathLike[str] | None = None,
        *,
        overwrite: bool = True,
    ) -> str:
        return await self._download(remote_path, local_path, overwrite=overwrite)

    async def download_bytes(self, remote_path: str) -> bytes:
        return await self._download_bytes(remote_path)

    async def delete_file(self, path: str) -> None:
        return await self._delete_file(path)

    async def delete_directory(self, path: str) -> None:
        return await self._delete_directory(path)
