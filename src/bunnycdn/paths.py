"""Local and remote path derivation for storage zone file operations.

Remote keys are always relative to the storage zone root and use "/" as the
separator. A remote path without an extension, or one ending in "/", names a
directory.
"""

from __future__ import annotations

import os
import posixpath
import urllib.parse

from .errors import ValidationError

SEPARATOR = "/"


def normalize_path(path: str | os.PathLike[str] | None, field: str = "path") -> str:
    """Trim whitespace; reject empty paths."""
    text = os.fspath(path).strip() if path is not None else ""
    if not text:
        raise ValidationError(f"Invalid {field}. Must not be empty", field=field)
    return text


def strip_leading(path: str) -> str:
    """Drop a leading "./" and any leading "/" so the path reads as a zone-relative key."""
    if path.startswith("./"):
        path = path[2:]
    return path.lstrip(SEPARATOR)


def _local_extension(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[1]


def _remote_extension(path: str) -> str:
    return posixpath.splitext(posixpath.basename(path))[1]


def _is_remote_directory(path: str) -> bool:
    return path.endswith(SEPARATOR) or not _remote_extension(path)


def _is_local_directory(path: str) -> bool:
    return path.endswith((os.sep, SEPARATOR)) or not _local_extension(path)


def _check_extensions(source_ext: str, target_ext: str, target: str, field: str) -> None:
    if source_ext and target_ext and source_ext != target_ext:
        raise ValidationError(
            f"Extension mismatch: {target!r} ends with {target_ext!r} but the source "
            f"ends with {source_ext!r}. Renaming across extensions is not allowed",
            error_key="path.extension_mismatch",
            field=field,
        )


def resolve_upload_key(
    local_path: str | os.PathLike[str],
    remote_path: str | None = None,
) -> str:
    """Derive the storage key an upload of ``local_path`` is written to.

    >>> resolve_upload_key("./a/b/file.json")
    'a/b/file.json'
    >>> resolve_upload_key("./a/b/file.json", "/x/y")
    'x/y/file.json'
    >>> resolve_upload_key("./a/b/file.json", "/x/y/renamed.json")
    'x/y/renamed.json'
    """
    local = normalize_path(local_path, "local_path")
    if remote_path is None or not remote_path.strip():
        key = strip_leading(local)
    else:
        remote = normalize_path(remote_path, "remote_path")
        _check_extensions(
            _local_extension(local), _remote_extension(remote), remote, "remote_path"
        )
        if _is_remote_directory(remote):
            remote = remote.rstrip(SEPARATOR) + SEPARATOR + os.path.basename(local)
        key = strip_leading(remote)

    if not key or key.endswith(SEPARATOR):
        raise ValidationError(
            f"Cannot derive a file key from {os.fspath(local_path)!r}", field="local_path"
        )
    return key


def resolve_download_path(
    remote_path: str,
    local_path: str | os.PathLike[str] | None = None,
) -> str:
    """Derive the absolute local path a download of ``remote_path`` is written to.

    Without ``local_path`` the remote key is mirrored under the working
    directory. A ``local_path`` without an extension is treated as a directory
    that receives the remote file's name.
    """
    remote = normalize_path(remote_path, "remote_path")
    if remote.endswith(SEPARATOR):
        raise ValidationError(
            f"Remote path {remote!r} names a directory, not a file", field="remote_path"
        )
    remote_key = strip_leading(remote)
    if not remote_key:
        raise ValidationError("Invalid remote_path. Must name a file", field="remote_path")

    if local_path is None or not os.fspath(local_path).strip():
        target = remote_key
    else:
        local = normalize_path(local_path, "local_path")
        _check_extensions(
            _remote_extension(remote), _local_extension(local), local, "local_path"
        )
        if _is_local_directory(local):
            target = os.path.join(local, posixpath.basename(remote_key))
        else:
            target = local
    return os.path.abspath(target)


def quote_key(key: str) -> str:
    return urllib.parse.quote(key, safe=SEPARATOR)


def listing_url(storage_url: str, directory: str | None = None) -> str:
    """URL listing ``directory``; blank or "/" lists the zone root.

    Directory listings always end with exactly one "/".
    """
    trimmed = (directory or "").strip().strip(SEPARATOR)
    root = storage_url.rstrip(SEPARATOR) + SEPARATOR
    if not trimmed:
        return root
    return root + quote_key(trimmed) + SEPARATOR


def file_delete_key(path: str) -> str:
    """Validate a file path for deletion and return its key.

    Paths ending with a separator are rejected so that a directory is never
    deleted by accident.
    """
    normalized = normalize_path(path)
    if normalized.endswith(SEPARATOR):
        raise ValidationError(
            f"File path {normalized!r} must not end with {SEPARATOR!r}; "
            "use delete_directory to remove a directory",
            error_key="path.is_directory",
            field="path",
        )
    key = strip_leading(normalized)
    if not key:
        raise ValidationError("Invalid path. Must name a file", field="path")
    return key


def directory_delete_key(path: str) -> str:
    """Validate a directory path for deletion and return its key.

    The API only finds a directory when its path ends with a separator.
    """
    normalized = normalize_path(path)
    if not normalized.endswith(SEPARATOR):
        raise ValidationError(
            f"Directory path {normalized!r} must end with {SEPARATOR!r}",
            error_key="path.not_directory",
            field="path",
        )
    key = strip_leading(normalized)
    if not key:
        raise ValidationError("Refusing to delete the storage zone root", field="path")
    return key


__all__ = [
    "normalize_path",
    "strip_leading",
    "resolve_upload_key",
    "resolve_download_path",
    "quote_key",
    "listing_url",
    "file_delete_key",
    "directory_delete_key",
]
