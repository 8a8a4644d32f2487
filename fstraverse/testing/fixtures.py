"""Test fixtures for fstraverse consumers.

In-memory storage collaborators built from nested dicts. They record every
call, can be told to fail specific operations on specific paths, and the
async one can hold individual paths back to shuffle completion order.

Example:
    storage = InMemoryStorage({'a.txt': b'A', 'sub': {'b.txt': b'B'}})
    storage.fail('read', 'root/sub/b.txt')

    entries = each_file_or_directory('root', storage=storage)
    assert ('stat', 'root/a.txt') in storage.calls
"""

import asyncio
import errno
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .._common.config import DEFAULT_SEPARATOR
from .._common.entry import EntryMetadata
from .._common.errors import TraversalIOError
from .._common.paths import join_path
from ..aio.core.adapter import AsyncStorageAdapter
from ..sync.core.adapter import StorageAdapter

_DIRECTORY = object()


def _os_error(cls, code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class InMemoryStorage(StorageAdapter):
    """Blocking storage over a nested dict.

    Dict values are subdirectories; ``bytes`` (or ``str``, encoded as UTF-8)
    values are file contents. Listing order is dict insertion order, so
    traversal order is deterministic.

    Attributes:
        root: Path of the top-level directory
        calls: ``(operation, path)`` for every call, in call order
    """

    def __init__(self, tree: Mapping[str, Any], root: str = 'root', *,
                 separator: str = DEFAULT_SEPARATOR, modified_time: float = 0.0):
        """Initialize storage.

        Args:
            tree: Nested dict describing the contents of ``root``
            root: Path of the top-level directory
            separator: Separator used to build child paths
            modified_time: Modification time reported for every entry
        """
        self.root = root
        self.separator = separator
        self.modified_time = modified_time
        self.calls: List[Tuple[str, str]] = []
        self._nodes: Dict[str, Any] = {}
        self._children: Dict[str, List[str]] = {}
        self._failures: Dict[Tuple[str, str], OSError] = {}
        self._load(self._key(root), tree)

    def _load(self, path: str, tree: Mapping[str, Any]):
        self._nodes[path] = _DIRECTORY
        self._children[path] = list(tree)
        for name, value in tree.items():
            child = join_path(path, name, self.separator)
            if isinstance(value, Mapping):
                self._load(child, value)
            elif isinstance(value, str):
                self._nodes[child] = value.encode('utf-8')
            else:
                self._nodes[child] = bytes(value)

    def _key(self, path: str) -> str:
        if path != self.separator and path.endswith(self.separator):
            return path[:-len(self.separator)]
        return path

    def fail(self, operation: str, path: str, error: Optional[OSError] = None):
        """Make ``operation`` on ``path`` raise ``error`` (EACCES by default).

        Args:
            operation: ``"stat"``, ``"list"`` or ``"read"``
            path: Path to fail on
            error: Exception to raise
        """
        if operation not in TraversalIOError.OPERATIONS:
            raise ValueError(f"Unknown storage operation: {operation!r}")
        self._failures[(operation, self._key(path))] = (
            error or _os_error(PermissionError, errno.EACCES, path)
        )

    def _begin(self, operation: str, path: str) -> str:
        self.calls.append((operation, path))
        key = self._key(path)
        failure = self._failures.get((operation, key))
        if failure is not None:
            raise failure
        if key not in self._nodes:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)
        return key

    def stat(self, path: str) -> EntryMetadata:
        key = self._begin('stat', path)
        node = self._nodes[key]
        if node is _DIRECTORY:
            return EntryMetadata.for_directory(self.modified_time)
        return EntryMetadata.for_file(len(node), self.modified_time)

    def list_directory(self, path: str) -> List[str]:
        key = self._begin('list', path)
        if self._nodes[key] is not _DIRECTORY:
            raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
        return list(self._children[key])

    def read_file(self, path: str) -> bytes:
        key = self._begin('read', path)
        node = self._nodes[key]
        if node is _DIRECTORY:
            raise _os_error(IsADirectoryError, errno.EISDIR, path)
        return node

    def paths(self) -> List[str]:
        """Every path in the tree, root included."""
        return list(self._nodes)

    def calls_for(self, operation: str) -> List[str]:
        """Paths passed to ``operation``, in call order."""
        return [path for op, path in self.calls if op == operation]


class AsyncInMemoryStorage(AsyncStorageAdapter):
    """Async wrapper around InMemoryStorage with per-path delays.

    Every call sleeps before touching the tree (``asyncio.sleep(0)`` by
    default), so results always arrive on a later loop iteration than the
    one that issued them.

    Attributes:
        backend: The wrapped InMemoryStorage
        delays: Seconds to hold back calls for a given path
        in_flight: Calls currently sleeping
        max_in_flight: Highest ``in_flight`` seen
    """

    def __init__(self, tree: Mapping[str, Any], root: str = 'root', *,
                 delays: Optional[Mapping[str, float]] = None,
                 default_delay: float = 0.0, **kwargs):
        self.backend = InMemoryStorage(tree, root, **kwargs)
        self.delays: Dict[str, float] = dict(delays or {})
        self.default_delay = default_delay
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def root(self) -> str:
        return self.backend.root

    @property
    def calls(self) -> List[Tuple[str, str]]:
        return self.backend.calls

    def fail(self, operation: str, path: str, error: Optional[OSError] = None):
        self.backend.fail(operation, path, error)

    def paths(self) -> List[str]:
        return self.backend.paths()

    def calls_for(self, operation: str) -> List[str]:
        return self.backend.calls_for(operation)

    async def _call(self, method, path: str):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(path, self.default_delay))
            return method(path)
        finally:
            self.in_flight -= 1

    async def stat(self, path: str) -> EntryMetadata:
        return await self._call(self.backend.stat, path)

    async def list_directory(self, path: str) -> List[str]:
        return await self._call(self.backend.list_directory, path)

    async def read_file(self, path: str) -> bytes:
        return await self._call(self.backend.read_file, path)
