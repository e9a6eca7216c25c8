"""
Promised Cache - Local Filesystem Driver

Storage driver backed by the real filesystem.

Blocking calls run in a worker thread via asyncio.to_thread so the event
loop only suspends at I/O boundaries. Writes go to a uniquely named
temporary file in the target directory and are moved into place with
os.replace, so a reader sees either the previous file or the new one.
"""

import asyncio
import logging
import os
import shutil
import uuid
from pathlib import Path

from ..errors import StorageError
from .interface import StorageDriver

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"


def _read(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def _write(path: Path, data: bytes) -> None:
    tmp = path.with_name(f".{path.name}.{uuid.uuid4().hex}{TEMP_SUFFIX}")
    try:
        with open(tmp, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def _delete(path: Path) -> bool:
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


def _remove_contents(path: Path) -> int:
    try:
        children = list(path.iterdir())
    except FileNotFoundError:
        return 0

    removed = 0
    for child in children:
        try:
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
        except FileNotFoundError:
            # Removed concurrently
            continue
        removed += 1
    return removed


def _list(directory: Path, suffix: str) -> list[Path]:
    try:
        entries = list(directory.iterdir())
    except FileNotFoundError:
        return []
    return sorted(p for p in entries if p.name.endswith(suffix) and p.is_file())


class LocalStorageDriver(StorageDriver):
    """Storage driver for the local filesystem."""

    async def read_file(self, path: Path) -> bytes | None:
        """Read a file, returning None when it does not exist."""
        try:
            return await asyncio.to_thread(_read, path)
        except OSError as e:
            logger.error(
                f"Failed to read {path}: {e}",
                extra={"path": str(path), "error": str(e)},
                exc_info=True,
            )
            raise StorageError("read", str(path), details={"error": str(e)}) from e

    async def write_file(self, path: Path, data: bytes) -> None:
        """Atomically replace a file's contents."""
        try:
            await asyncio.to_thread(_write, path, data)
        except OSError as e:
            logger.error(
                f"Failed to write {path}: {e}",
                extra={"path": str(path), "bytes": len(data), "error": str(e)},
                exc_info=True,
            )
            raise StorageError("write", str(path), details={"error": str(e)}) from e

    async def delete_file(self, path: Path) -> bool:
        """Delete a file if present."""
        try:
            return await asyncio.to_thread(_delete, path)
        except OSError as e:
            logger.error(
                f"Failed to delete {path}: {e}",
                extra={"path": str(path), "error": str(e)},
                exc_info=True,
            )
            raise StorageError("delete", str(path), details={"error": str(e)}) from e

    async def ensure_directory(self, path: Path) -> None:
        """Create a directory tree if missing."""
        try:
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            logger.error(
                f"Failed to create directory {path}: {e}",
                extra={"path": str(path), "error": str(e)},
                exc_info=True,
            )
            raise StorageError("mkdir", str(path), details={"error": str(e)}) from e

    async def remove_directory_contents(self, path: Path) -> int:
        """Remove all files and subdirectories under a directory."""
        try:
            return await asyncio.to_thread(_remove_contents, path)
        except OSError as e:
            logger.error(
                f"Failed to clear directory {path}: {e}",
                extra={"path": str(path), "error": str(e)},
                exc_info=True,
            )
            raise StorageError("clear", str(path), details={"error": str(e)}) from e

    async def list_files(self, directory: Path, suffix: str = "") -> list[Path]:
        """List files in a directory filtered by suffix."""
        try:
            return await asyncio.to_thread(_list, directory, suffix)
        except OSError as e:
            logger.error(
                f"Failed to list directory {directory}: {e}",
                extra={"path": str(directory), "error": str(e)},
                exc_info=True,
            )
            raise StorageError("list", str(directory), details={"error": str(e)}) from e
