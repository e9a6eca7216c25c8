"""
Promised Cache - Memory Storage Driver

In-process storage driver that keeps file contents in a dict keyed by path.
Suitable for tests and for single-process use where persistence is not
wanted. Share one driver between cache instances to model several
instances pointed at the same directory.
"""

import logging
from pathlib import Path

from ..errors import StorageError
from .interface import StorageDriver

logger = logging.getLogger(__name__)


class MemoryStorageDriver(StorageDriver):
    """
    Dict-backed storage driver.

    Mirrors the local driver's observable behavior: writing into a
    directory that was never created fails, reads of unknown paths
    return None, deletes of unknown paths return False.
    """

    def __init__(self) -> None:
        self._files: dict[Path, bytes] = {}
        self._directories: set[Path] = set()

    @staticmethod
    def _normalize(path: Path) -> Path:
        return Path(path)

    def _is_under(self, path: Path, directory: Path) -> bool:
        return directory in path.parents

    async def read_file(self, path: Path) -> bytes | None:
        """Return stored bytes or None."""
        return self._files.get(self._normalize(path))

    async def write_file(self, path: Path, data: bytes) -> None:
        """Store bytes at a path whose parent directory exists."""
        path = self._normalize(path)
        if path.parent not in self._directories:
            raise StorageError(
                "write",
                str(path),
                details={"error": f"No such directory: {path.parent}"},
            )
        self._files[path] = bytes(data)

    async def delete_file(self, path: Path) -> bool:
        """Remove a stored file if present."""
        return self._files.pop(self._normalize(path), None) is not None

    async def ensure_directory(self, path: Path) -> None:
        """Record a directory and all of its parents."""
        path = self._normalize(path)
        self._directories.add(path)
        self._directories.update(path.parents)

    async def remove_directory_contents(self, path: Path) -> int:
        """Drop every file and subdirectory below a directory."""
        path = self._normalize(path)
        files = [p for p in self._files if self._is_under(p, path)]
        subdirs = [d for d in self._directories if self._is_under(d, path)]

        top_level = {p for p in files + subdirs if p.parent == path}
        for p in files:
            del self._files[p]
        self._directories.difference_update(subdirs)

        logger.debug(f"Removed {len(files)} file(s) under {path} from memory storage")
        return len(top_level)

    async def list_files(self, directory: Path, suffix: str = "") -> list[Path]:
        """List stored files directly inside a directory."""
        directory = self._normalize(directory)
        return sorted(p for p in self._files if p.parent == directory and p.name.endswith(suffix))
