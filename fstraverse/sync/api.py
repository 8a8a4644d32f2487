"""High-level blocking API for fstraverse.

Four layers, each built on the one before it by wrapping its per-entry
handler:

    each_file_or_directory -> each_file -> each_file_matching
        -> read_each_file_matching

Every function returns only after the whole tree has been visited and
gives back what it accumulated. Errors are raised, not passed to handlers:
the first failed stat, listing or read aborts the entire call, and no
further siblings are visited.
"""

from typing import Iterator, List, Optional, Pattern, Union

from .._common.callbacks import NOOP, EntryHandler, ReadHandler
from .._common.config import TraversalConfig
from .._common.entry import Entry, ReadEntry
from .._common.paths import compile_pattern, path_matches
from .adapters.filesystem import FileSystemStorage
from .core.adapter import StorageAdapter
from .core.expansion import read
from .core.traverser import SequentialTraverser


def iter_file_or_directory(
    directory: Optional[str] = None,
    *,
    storage: Optional[StorageAdapter] = None,
    config: Optional[TraversalConfig] = None
) -> Iterator[Entry]:
    """Lazily walk every file and directory under ``directory``.

    Args:
        directory: Root path (defaults to ``./``)
        storage: Storage collaborator (local filesystem if None)
        config: Traversal settings

    Yields:
        Entry objects, each directory before its children
    """
    traverser = SequentialTraverser(storage or FileSystemStorage(), config)
    return traverser.traverse(directory)


def each_file_or_directory(
    directory: Optional[str] = None,
    file_handler: Optional[EntryHandler] = None,
    *,
    storage: Optional[StorageAdapter] = None,
    config: Optional[TraversalConfig] = None
) -> List[Entry]:
    """Call ``file_handler(None, path, metadata)`` for every file and directory.

    Args:
        directory: Root path (defaults to ``./``)
        file_handler: Per-entry handler
        storage: Storage collaborator (local filesystem if None)
        config: Traversal settings

    Returns:
        Every visited entry, in visiting order

    Raises:
        TraversalIOError: On the first failed stat or listing

    Example:
        >>> def show(err, path, metadata):
        ...     if not metadata.is_dir:
        ...         print('>> Found file: ' + path)
        >>> each_file_or_directory('test/', show)
    """
    file_handler = file_handler or NOOP
    checked: List[Entry] = []

    for entry in iter_file_or_directory(directory, storage=storage, config=config):
        checked.append(entry)
        file_handler(None, entry.path, entry.metadata)

    return checked


def each_file(
    path: Optional[str] = None,
    callback: Optional[EntryHandler] = None,
    *,
    storage: Optional[StorageAdapter] = None,
    config: Optional[TraversalConfig] = None
) -> List[Entry]:
    """Like each_file_or_directory, but only non-directories are reported.

    Returns:
        Every visited file, in visiting order
    """
    callback = callback or NOOP
    files: List[Entry] = []

    def on_entry(error, file, metadata):
        if not metadata.is_dir:
            files.append(Entry(file, metadata))
            return callback(None, file, metadata)

    each_file_or_directory(path, on_entry, storage=storage, config=config)
    return files


def each_file_matching(
    expression: Union[str, Pattern],
    path: Optional[str] = None,
    callback: Optional[EntryHandler] = None,
    *,
    storage: Optional[StorageAdapter] = None,
    config: Optional[TraversalConfig] = None
) -> List[Entry]:
    """Like each_file, but only files whose full path matches ``expression``.

    The pattern is searched for anywhere in the joined path, so
    ``r'_test\\.py$'`` matches ``src/sub/a_test.py``.

    Args:
        expression: Regular expression text or compiled pattern
        path: Root path (defaults to ``./``)
        callback: Per-entry handler for matched files
        storage: Storage collaborator (local filesystem if None)
        config: Traversal settings (``pattern_flags`` applies to text patterns)

    Returns:
        Matched files, in visiting order
    """
    config = config or TraversalConfig()
    pattern = compile_pattern(expression, config.pattern_flags)
    callback = callback or NOOP
    files: List[Entry] = []

    def on_file(error, file, metadata):
        if path_matches(pattern, file):
            files.append(Entry(file, metadata))
            return callback(None, file, metadata)

    each_file(path, on_file, storage=storage, config=config)
    return files


def read_each_file_matching(
    expression: Union[str, Pattern],
    path: Optional[str] = None,
    callback: Optional[ReadHandler] = None,
    *,
    storage: Optional[StorageAdapter] = None,
    config: Optional[TraversalConfig] = None
) -> List[ReadEntry]:
    """Read every file matching ``expression`` under ``path``.

    ``callback(None, path, metadata, content)`` is called once per matched
    file, right after it is read.

    Returns:
        ReadEntry for each matched file, in visiting order

    Raises:
        TraversalIOError: On the first failed stat, listing or read
    """
    storage = storage or FileSystemStorage()
    callback = callback or NOOP
    results: List[ReadEntry] = []

    def on_match(error, file, metadata):
        content = read(storage, file)
        results.append(ReadEntry(file, metadata, content))
        return callback(None, file, metadata, content)

    each_file_matching(expression, path, on_match, storage=storage, config=config)
    return results
