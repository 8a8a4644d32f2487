"""Async storage adapter abstraction.

Same three primitives as the blocking StorageAdapter, as coroutines. The
concurrent engine schedules each call as its own task, so adapters are
free to run them in parallel (threads, native async I/O, remote calls).
"""

from abc import ABC, abstractmethod
from typing import List

from ..._common.entry import EntryMetadata


class AsyncStorageAdapter(ABC):
    """Abstract non-blocking storage collaborator.

    Implementations raise ``OSError`` (or a subclass) on failure. Results
    must be delivered back on the event loop that awaits them; the engine
    relies on that to mutate its session without a lock.
    """

    @abstractmethod
    async def stat(self, path: str) -> EntryMetadata:
        """Read metadata for a path.

        Args:
            path: Path to inspect

        Returns:
            EntryMetadata for the path
        """
        pass

    @abstractmethod
    async def list_directory(self, path: str) -> List[str]:
        """List the immediate children of a directory.

        Args:
            path: Directory path

        Returns:
            Child names (not full paths) in storage order
        """
        pass

    @abstractmethod
    async def read_file(self, path: str) -> bytes:
        """Read the full raw contents of a file.

        Args:
            path: File path

        Returns:
            File contents as bytes
        """
        pass

    async def close(self):
        """Clean up adapter resources.

        Override if adapter needs cleanup (close connections, etc.)
        """
        pass

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
