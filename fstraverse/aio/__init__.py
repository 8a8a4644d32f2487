"""Asynchronous implementation of fstraverse.

Traversals are scheduled on the running event loop and return at once.
Every stat and listing is its own task; a session counts them and fires
the completion handler when the last one has been handled.
"""

# Core abstractions
from .core import (
    AsyncStorageAdapter,
    BaseSession,
    TraversalSession,
    FilterSession,
    ReadSession,
    ConcurrentTraverser,
)

# Adapters
from .adapters import AsyncFileSystemStorage

# Shared data structures
from .._common.config import TraversalConfig
from .._common.entry import Entry, EntryMetadata, ReadEntry
from .._common.errors import TraversalIOError

# High-level API
from .api import (
    each_file_or_directory,
    each_file,
    each_file_matching,
    read_each_file_matching,
)

__all__ = [
    # Core abstractions
    'AsyncStorageAdapter',
    'ConcurrentTraverser',
    # Sessions
    'BaseSession',
    'TraversalSession',
    'FilterSession',
    'ReadSession',
    # Adapters
    'AsyncFileSystemStorage',
    # Data
    'TraversalConfig',
    'Entry',
    'EntryMetadata',
    'ReadEntry',
    'TraversalIOError',
    # High-level API
    'each_file_or_directory',
    'each_file',
    'each_file_matching',
    'read_each_file_matching',
]
