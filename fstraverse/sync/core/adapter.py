"""StorageAdapter abstraction for fstraverse.

The StorageAdapter is the only place the traversal core touches storage.
It exposes exactly three blocking primitives; the core never calls
anything else, so any tree-shaped store can be traversed by implementing
them.
"""

from abc import ABC, abstractmethod
from typing import List

from ..._common.entry import EntryMetadata


class StorageAdapter(ABC):
    """Abstract blocking storage collaborator.

    Implementations raise ``OSError`` (or a subclass) on failure. The core
    wraps those into ``TraversalIOError`` with the failing path attached,
    so adapters don't need to.
    """

    @abstractmethod
    def stat(self, path: str) -> EntryMetadata:
        """Read metadata for a path.

        Args:
            path: Path to inspect

        Returns:
            EntryMetadata for the path
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> List[str]:
        """List the immediate children of a directory.

        Args:
            path: Directory path

        Returns:
            Child names (not full paths), in whatever order the store
            provides them
        """
        pass

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """Read the full raw contents of a file.

        Args:
            path: File path

        Returns:
            File contents as bytes
        """
        pass

    def close(self):
        """Release adapter resources. Override if needed."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
