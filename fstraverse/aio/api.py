"""High-level async API for fstraverse.

Same four layers as ``fstraverse.sync``, each wrapping the per-entry and
completion handlers of the one below:

    each_file_or_directory -> each_file -> each_file_matching
        -> read_each_file_matching

Every function must be called from a running event loop. It schedules the
walk and returns a session straight away; results arrive through the
handlers, and the session can also be awaited:

    >>> files = await each_file_matching(r'\\.py$', 'src')

Errors stay inside the branch they happened in. Handlers see each error
as it occurs; completion (and ``await``) reports the first one instead of
any results.
"""

import functools
from typing import Optional, Pattern, Union

from .._common.callbacks import (
    NOOP,
    CompleteHandler,
    EntryHandler,
    ReadCompleteHandler,
    ReadHandler,
)
from .._common.config import TraversalConfig
from .._common.entry import Entry, ReadEntry
from .._common.paths import compile_pattern, path_matches
from .adapters.filesystem import AsyncFileSystemStorage
from .core.adapter import AsyncStorageAdapter
from .core.expansion import read
from .core.session import FilterSession, ReadSession, TraversalSession
from .core.traverser import ConcurrentTraverser


def each_file_or_directory(
    directory: Optional[str] = None,
    file_handler: Optional[EntryHandler] = None,
    complete_handler: CompleteHandler = NOOP,
    *,
    storage: Optional[AsyncStorageAdapter] = None,
    config: Optional[TraversalConfig] = None,
    session: Optional[TraversalSession] = None
) -> TraversalSession:
    """Visit every file and directory under ``directory``.

    Args:
        directory: Root path (defaults to ``./``)
        file_handler: ``(error, path, metadata)`` per entry or failure
        complete_handler: ``(error, paths, metadata_list)`` once at the end
        storage: Storage collaborator (local filesystem if None)
        config: Traversal settings
        session: Existing session to run on (see ConcurrentTraverser.start)

    Returns:
        TraversalSession; awaiting it gives every visited Entry

    Example:
        >>> def done(err, paths, stats):
        ...     if err:
        ...         raise err
        ...     for path, stat in zip(paths, stats):
        ...         if not stat.is_dir:
        ...             print('>> Found file: ' + path)
        >>> each_file_or_directory('test/', None, done)
    """
    traverser = ConcurrentTraverser(storage or AsyncFileSystemStorage(), config)
    return traverser.start(
        directory,
        file_handler or NOOP,
        complete_handler or NOOP,
        session=session,
    )


def each_file(
    path: Optional[str] = None,
    callback: Optional[EntryHandler] = None,
    complete_handler: CompleteHandler = NOOP,
    *,
    storage: Optional[AsyncStorageAdapter] = None,
    config: Optional[TraversalConfig] = None,
    session: Optional[TraversalSession] = None
) -> FilterSession:
    """Like each_file_or_directory, but directories are never reported.

    Returns:
        FilterSession; awaiting it gives the visited files
    """
    callback = callback or NOOP
    complete_handler = complete_handler or NOOP
    traversal = session if session is not None else TraversalSession()
    files = FilterSession(traversal)

    def on_entry(error, file, metadata):
        if error is not None:
            return callback(error, file, metadata)

        if not metadata.is_dir:
            files.record(Entry(file, metadata))
            return callback(None, file, metadata)

    def on_complete(error, paths, stats):
        files.settle(error)
        if error is not None:
            return complete_handler(error, None, None)
        return complete_handler(None, files.paths, files.metadata)

    each_file_or_directory(
        path, on_entry, on_complete,
        storage=storage, config=config, session=traversal,
    )
    return files


def each_file_matching(
    expression: Union[str, Pattern],
    path: Optional[str] = None,
    callback: Optional[EntryHandler] = None,
    complete_handler: CompleteHandler = NOOP,
    *,
    storage: Optional[AsyncStorageAdapter] = None,
    config: Optional[TraversalConfig] = None,
    session: Optional[TraversalSession] = None
) -> FilterSession:
    """Like each_file, but only files whose full path matches ``expression``.

    Args:
        expression: Regular expression text or compiled pattern, searched
            for anywhere in the joined path
        path: Root path (defaults to ``./``)
        callback: ``(error, path, metadata)`` per match or failure
        complete_handler: ``(error, paths, metadata_list)`` once at the end
        storage: Storage collaborator (local filesystem if None)
        config: Traversal settings (``pattern_flags`` applies to text patterns)
        session: Existing session to run on

    Returns:
        FilterSession; awaiting it gives the matched files

    Raises:
        re.error: If ``expression`` does not compile (raised immediately)
    """
    config = config or TraversalConfig()
    pattern = compile_pattern(expression, config.pattern_flags)
    callback = callback or NOOP
    complete_handler = complete_handler or NOOP
    traversal = session if session is not None else TraversalSession()
    files = FilterSession(traversal)

    def on_file(error, file, metadata):
        if error is not None:
            return callback(error, file, metadata)

        if path_matches(pattern, file):
            files.record(Entry(file, metadata))
            return callback(None, file, metadata)

    def on_complete(error, paths, stats):
        files.settle(error)
        if error is not None:
            return complete_handler(error, None, None)
        return complete_handler(None, files.paths, files.metadata)

    each_file(
        path, on_file, on_complete,
        storage=storage, config=config, session=traversal,
    )
    return files


def read_each_file_matching(
    expression: Union[str, Pattern],
    path: Optional[str] = None,
    callback: Optional[ReadHandler] = None,
    complete_handler: ReadCompleteHandler = NOOP,
    *,
    storage: Optional[AsyncStorageAdapter] = None,
    config: Optional[TraversalConfig] = None,
    session: Optional[TraversalSession] = None
) -> ReadSession:
    """Read every file matching ``expression`` under ``path``.

    Reads are dispatched on the traversal's own session, so completion
    waits for them as well. A failed read is reported to ``callback`` as
    ``(error, path, metadata, None)`` and becomes the completion error if
    nothing failed before it.

    Args:
        expression: Regular expression text or compiled pattern
        path: Root path (defaults to ``./``)
        callback: ``(error, path, metadata, content)`` per read or failure
        complete_handler: ``(error, paths, metadata_list, contents)`` once
        storage: Storage collaborator (local filesystem if None)
        config: Traversal settings
        session: Existing session to run on

    Returns:
        ReadSession; awaiting it gives ReadEntry objects

    Example:
        >>> def show(err, file, stat, content):
        ...     if err:
        ...         raise err
        ...     print(f'>> Found file: {file} with: {len(content)} bytes')
        >>> read_each_file_matching(r'_test\\.py$', 'test', show)
    """
    storage = storage or AsyncFileSystemStorage()
    callback = callback or NOOP
    complete_handler = complete_handler or NOOP
    traversal = session if session is not None else TraversalSession()
    results = ReadSession(traversal)

    def on_read(file, metadata, error, content):
        if error is not None:
            traversal.fail(error)
            return callback(error, file, metadata, None)

        results.record(ReadEntry(file, metadata, content))
        return callback(None, file, metadata, content)

    def on_match(error, file, metadata):
        if error is not None:
            return callback(error, file, metadata, None)

        traversal.dispatch(
            read(storage, file),
            functools.partial(on_read, file, metadata)
        )

    def on_complete(error, paths, stats):
        results.settle(error)
        if error is not None:
            return complete_handler(error, None, None, None)
        return complete_handler(None, results.paths, results.metadata, results.contents)

    each_file_matching(
        expression, path, on_match, on_complete,
        storage=storage, config=config, session=traversal,
    )
    return results
