"""
Promised Cache - Storage Driver Interface

Defines the narrow filesystem contract the cache engine consumes.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class StorageDriver(ABC):
    """
    Abstract base class for storage drivers.

    Drivers move bytes to and from paths. They know nothing about keys,
    envelopes or expiry. Failures other than "not found" must surface as
    StorageError.
    """

    @abstractmethod
    async def read_file(self, path: Path) -> bytes | None:
        """
        Read a whole file.

        Args:
            path: File to read

        Returns:
            File contents, or None if the file does not exist
        """
        pass

    @abstractmethod
    async def write_file(self, path: Path, data: bytes) -> None:
        """
        Write a whole file, replacing any existing one.

        Args:
            path: Destination file (parent directory must exist)
            data: Bytes to write
        """
        pass

    @abstractmethod
    async def delete_file(self, path: Path) -> bool:
        """
        Delete a file.

        Args:
            path: File to delete

        Returns:
            True if a file was removed, False if it did not exist
        """
        pass

    @abstractmethod
    async def ensure_directory(self, path: Path) -> None:
        """Create a directory and any missing parents."""
        pass

    @abstractmethod
    async def remove_directory_contents(self, path: Path) -> int:
        """
        Remove everything inside a directory, keeping the directory itself.

        A missing directory is not an error.

        Returns:
            Number of top-level items removed
        """
        pass

    @abstractmethod
    async def list_files(self, directory: Path, suffix: str = "") -> list[Path]:
        """
        List regular files directly inside a directory.

        Args:
            directory: Directory to list (missing directory -> empty list)
            suffix: Only return names ending with this suffix

        Returns:
            Sorted list of file paths
        """
        pass
