"""
Integration tests for the storage zone files API, sync and async.

Requests are intercepted with respx; every test checks the URL, the access
key and the body the client actually sent.
"""

import errno
import hashlib
import os
from dataclasses import replace

import httpx
import pytest
import respx

from bunnycdn import (
    AsyncBunnyCDNClient,
    BunnyCDNClient,
    BunnyError,
    RemoteError,
    StorageFile,
    TransportError,
    ValidationError,
)
from bunnycdn._core import files as files_module

STORAGE_BASE = "https://storage.bunnycdn.com"


@pytest.fixture
def storage_mock():
    with respx.mock(assert_all_called=False, base_url=STORAGE_BASE) as mock:
        yield mock


@pytest.fixture
def failing_writes(monkeypatch):
    """Make downloads fail with a full disk after the first bytes are written."""
    real_open = open

    class FullDisk:
        def __init__(self, f):
            self._f = f

        def __enter__(self):
            return self

        def __exit__(self, *exc_info):
            self._f.close()

        def write(self, data):
            self._f.write(data[:1])
            raise OSError(errno.ENOSPC, "No space left on device")

    def fake_open(path, mode="r", *args, **kwargs):
        f = real_open(path, mode, *args, **kwargs)
        return FullDisk(f) if "w" in mode else f

    monkeypatch.setattr(files_module, "open", fake_open, raising=False)


@pytest.fixture
def local_file(tmp_path):
    path = tmp_path / "report.json"
    path.write_bytes(b'{"ok": true}')
    return path


class TestFilesList:
    def test_list_root(self, storage_mock, mock_config, mock_files_list_response):
        route = storage_mock.get("/test-zone/").mock(
            return_value=httpx.Response(200, json=mock_files_list_response)
        )

        with BunnyCDNClient(mock_config) as client:
            result = client.files.list()

        assert route.called
        assert len(result) == 2
        assert result.complete
        assert all(isinstance(entry, StorageFile) for entry in result)
        assert result[0].is_directory
        assert result[0].full_path == "images/"
        assert result[1].full_path == "hello.txt"
        request = route.calls[0].request
        assert request.headers["AccessKey"] == mock_config.read_password

    def test_list_collapses_slashes(self, storage_mock, mock_config):
        route = storage_mock.get("/test-zone/a/b/").mock(
            return_value=httpx.Response(200, json=[])
        )

        with BunnyCDNClient(mock_config) as client:
            result = client.files.list("//a/b//")

        assert route.called
        assert len(result) == 0

    def test_list_stops_at_first_malformed_entry(
        self, storage_mock, mock_config, storage_file_factory
    ):
        body = [
            storage_file_factory("one.txt"),
            storage_file_factory("two.txt"),
            {"ObjectName": "broken"},
        ]
        storage_mock.get("/test-zone/").mock(return_value=httpx.Response(200, json=body))

        with BunnyCDNClient(mock_config) as client:
            result = client.files.list("/")

        assert [entry.object_name for entry in result] == ["one.txt", "two.txt"]
        assert result.skipped == 1
        assert not result.complete

    def test_list_error_payload_on_success_status(
        self, storage_mock, mock_config, mock_error_payload
    ):
        storage_mock.get("/test-zone/").mock(
            return_value=httpx.Response(200, json=mock_error_payload)
        )

        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(RemoteError) as exc_info:
                client.files.list()

        assert exc_info.value.error_key == "storagezone.not_found"
        assert exc_info.value.field == "Id"

    @pytest.mark.asyncio
    async def test_list_async(self, storage_mock, mock_config, mock_files_list_response):
        storage_mock.get("/test-zone/images/").mock(
            return_value=httpx.Response(200, json=mock_files_list_response)
        )

        async with AsyncBunnyCDNClient(mock_config) as client:
            result = await client.files.list("images")

        assert len(result) == 2


class TestFilesUpload:
    def test_upload_into_directory(self, storage_mock, mock_config, local_file):
        route = storage_mock.put("/test-zone/x/y/report.json").mock(
            return_value=httpx.Response(201, json={"HttpCode": 201, "Message": "File uploaded."})
        )

        with BunnyCDNClient(mock_config) as client:
            key = client.files.upload(local_file, "/x/y")

        assert key == "x/y/report.json"
        request = route.calls[0].request
        assert request.headers["AccessKey"] == mock_config.write_password
        assert request.headers["content-type"] == "application/octet-stream"
        assert request.content == b'{"ok": true}'
        assert "Checksum" not in request.headers

    def test_upload_renamed_with_checksum(self, storage_mock, mock_config, local_file):
        route = storage_mock.put("/test-zone/x/renamed.json").mock(
            return_value=httpx.Response(201)
        )

        with BunnyCDNClient(mock_config) as client:
            key = client.files.upload(local_file, "x/renamed.json", checksum=True)

        assert key == "x/renamed.json"
        expected = hashlib.sha256(b'{"ok": true}').hexdigest().upper()
        assert route.calls[0].request.headers["Checksum"] == expected

    def test_upload_extension_mismatch(self, storage_mock, mock_config, local_file):
        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(ValidationError) as exc_info:
                client.files.upload(local_file, "/x/y/file.txt")

        assert exc_info.value.error_key == "path.extension_mismatch"
        assert not storage_mock.calls

    def test_upload_missing_local_file(self, storage_mock, mock_config, tmp_path):
        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(ValidationError, match="does not exist"):
                client.files.upload(tmp_path / "missing.json", "/x")

        assert not storage_mock.calls

    def test_upload_without_write_password(self, storage_mock, mock_config, local_file):
        config = replace(mock_config, write_password=None)

        with BunnyCDNClient(config) as client:
            with pytest.raises(ValidationError) as exc_info:
                client.files.upload(local_file, "/x")

        assert exc_info.value.field == "write_password"
        assert not storage_mock.calls

    def test_upload_bytes(self, storage_mock, mock_config):
        route = storage_mock.put("/test-zone/notes/hello.txt").mock(
            return_value=httpx.Response(201)
        )

        with BunnyCDNClient(mock_config) as client:
            key = client.files.upload_bytes("./notes/hello.txt", b"hello")

        assert key == "notes/hello.txt"
        assert route.calls[0].request.content == b"hello"

    @pytest.mark.asyncio
    async def test_upload_async(self, storage_mock, mock_config, local_file):
        route = storage_mock.put("/test-zone/x/report.json").mock(
            return_value=httpx.Response(201)
        )

        async with AsyncBunnyCDNClient(mock_config) as client:
            key = await client.files.upload(local_file, "/x/")

        assert key == "x/report.json"
        assert route.called


class TestFilesDownload:
    def test_download_into_directory(self, storage_mock, mock_config, tmp_path):
        route = storage_mock.get("/test-zone/docs/hello.txt").mock(
            return_value=httpx.Response(200, content=b"hello world")
        )

        with BunnyCDNClient(mock_config) as client:
            written = client.files.download("/docs/hello.txt", tmp_path / "out")

        expected = os.path.join(str(tmp_path), "out", "hello.txt")
        assert written == expected
        with open(written, "rb") as f:
            assert f.read() == b"hello world"
        assert not os.path.exists(expected + ".part")
        assert route.calls[0].request.headers["AccessKey"] == mock_config.read_password

    def test_download_error_body_is_not_inspected(self, storage_mock, mock_config, tmp_path):
        # File content is opaque, even when it looks like an error payload
        content = b'{"ErrorKey": "x", "Field": "y", "Message": "z"}'
        storage_mock.get("/test-zone/payload.json").mock(
            return_value=httpx.Response(200, content=content)
        )

        with BunnyCDNClient(mock_config) as client:
            written = client.files.download("payload.json", tmp_path / "payload.json")

        with open(written, "rb") as f:
            assert f.read() == content

    def test_failed_download_leaves_no_partial_file(self, storage_mock, mock_config, tmp_path):
        storage_mock.get("/test-zone/docs/missing.txt").mock(
            return_value=httpx.Response(
                404,
                json={"HttpCode": 404, "Message": "Object Not Found"},
            )
        )
        target = tmp_path / "missing.txt"

        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(TransportError) as exc_info:
                client.files.download("docs/missing.txt", target)

        assert exc_info.value.status_code == 404
        assert not target.exists()
        assert not (tmp_path / "missing.txt.part").exists()

    def test_connection_error_leaves_no_partial_file(self, storage_mock, mock_config, tmp_path):
        storage_mock.get("/test-zone/big.bin").mock(side_effect=httpx.ReadError("reset"))
        target = tmp_path / "big.bin"

        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(TransportError):
                client.files.download("big.bin", target)

        assert os.listdir(tmp_path) == []

    def test_download_refuses_to_overwrite(self, storage_mock, mock_config, tmp_path):
        target = tmp_path / "keep.txt"
        target.write_bytes(b"original")

        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(BunnyError, match="exists"):
                client.files.download("keep.txt", target, overwrite=False)

        assert target.read_bytes() == b"original"
        assert not storage_mock.calls

    def test_download_bytes(self, storage_mock, mock_config):
        storage_mock.get("/test-zone/a.txt").mock(
            return_value=httpx.Response(200, content=b"abc")
        )

        with BunnyCDNClient(mock_config) as client:
            assert client.files.download_bytes("/a.txt") == b"abc"

    @pytest.mark.asyncio
    async def test_download_async(self, storage_mock, mock_config, tmp_path):
        storage_mock.get("/test-zone/docs/hello.txt").mock(
            return_value=httpx.Response(200, content=b"hello async")
        )

        async with AsyncBunnyCDNClient(mock_config) as client:
            written = await client.files.download("docs/hello.txt", tmp_path)

        with open(written, "rb") as f:
            assert f.read() == b"hello async"

    @pytest.mark.asyncio
    async def test_failed_download_async_cleans_up(self, storage_mock, mock_config, tmp_path):
        storage_mock.get("/test-zone/gone.txt").mock(return_value=httpx.Response(500))

        async with AsyncBunnyCDNClient(mock_config) as client:
            with pytest.raises(TransportError):
                await client.files.download("gone.txt", tmp_path / "gone.txt")

        assert os.listdir(tmp_path) == []

    def test_unwritable_destination_directory(self, storage_mock, mock_config, tmp_path):
        storage_mock.get("/test-zone/a.txt").mock(return_value=httpx.Response(200, content=b"a"))
        (tmp_path / "blocker").write_bytes(b"")

        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(BunnyError) as exc_info:
                client.files.download("a.txt", tmp_path / "blocker" / "sub" / "a.txt")

        assert exc_info.value.error_key == "local.io_error"
        assert os.listdir(tmp_path) == ["blocker"]

    @pytest.mark.asyncio
    async def test_unwritable_destination_directory_async(
        self, storage_mock, mock_config, tmp_path
    ):
        storage_mock.get("/test-zone/a.txt").mock(return_value=httpx.Response(200, content=b"a"))
        (tmp_path / "blocker").write_bytes(b"")

        async with AsyncBunnyCDNClient(mock_config) as client:
            with pytest.raises(BunnyError):
                await client.files.download("a.txt", tmp_path / "blocker" / "sub" / "a.txt")

        assert os.listdir(tmp_path) == ["blocker"]

    def test_write_failure_removes_partial_file(
        self, storage_mock, mock_config, tmp_path, failing_writes
    ):
        storage_mock.get("/test-zone/big.bin").mock(
            return_value=httpx.Response(200, content=b"x" * 4096)
        )

        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(BunnyError) as exc_info:
                client.files.download("big.bin", tmp_path / "big.bin")

        assert exc_info.value.error_key == "local.io_error"
        assert isinstance(exc_info.value.__cause__, OSError)
        assert os.listdir(tmp_path) == []

    @pytest.mark.asyncio
    async def test_write_failure_removes_partial_file_async(
        self, storage_mock, mock_config, tmp_path, failing_writes
    ):
        storage_mock.get("/test-zone/big.bin").mock(
            return_value=httpx.Response(200, content=b"x" * 4096)
        )

        async with AsyncBunnyCDNClient(mock_config) as client:
            with pytest.raises(BunnyError):
                await client.files.download("big.bin", tmp_path / "big.bin")

        assert os.listdir(tmp_path) == []


class TestFilesDelete:
    def test_delete_file(self, storage_mock, mock_config):
        route = storage_mock.delete("/test-zone/a/b.txt").mock(
            return_value=httpx.Response(200, json={"HttpCode": 200, "Message": "File deleted."})
        )

        with BunnyCDNClient(mock_config) as client:
            assert client.files.delete_file("/a/b.txt") is None

        assert route.calls[0].request.headers["AccessKey"] == mock_config.write_password

    def test_delete_file_rejects_directory_path(self, storage_mock, mock_config):
        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(ValidationError) as exc_info:
                client.files.delete_file("/a/b/")

        assert exc_info.value.error_key == "path.is_directory"
        assert not storage_mock.calls

    def test_delete_directory_requires_trailing_separator(self, storage_mock, mock_config):
        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(ValidationError) as exc_info:
                client.files.delete_directory("/a/b")

        assert exc_info.value.error_key == "path.not_directory"
        assert not storage_mock.calls

    def test_delete_directory(self, storage_mock, mock_config):
        route = storage_mock.delete("/test-zone/a/b/").mock(return_value=httpx.Response(200))

        with BunnyCDNClient(mock_config) as client:
            client.files.delete_directory("/a/b/")

        assert route.called

    def test_delete_not_found(self, storage_mock, mock_config):
        storage_mock.delete("/test-zone/nope.txt").mock(
            return_value=httpx.Response(404, text="Object Not Found")
        )

        with BunnyCDNClient(mock_config) as client:
            with pytest.raises(TransportError, match="404"):
                client.files.delete_file("nope.txt")

    @pytest.mark.asyncio
    async def test_delete_directory_async(self, storage_mock, mock_config):
        route = storage_mock.delete("/test-zone/tmp/").mock(return_value=httpx.Response(200))

        async with AsyncBunnyCDNClient(mock_config) as client:
            await client.files.delete_directory("tmp/")

        assert route.called
