"""Synchronous implementation of fstraverse.

Every call blocks until the whole tree has been visited. Errors abort the
entire call; see ``fstraverse.aio`` for the non-blocking variant with
per-branch error isolation.
"""

# Core components
from .core.adapter import StorageAdapter
from .core.expansion import probe, expand, read
from .core.traverser import SequentialTraverser

# Adapters
from .adapters.filesystem import FileSystemStorage

# Shared data structures
from .._common.config import TraversalConfig
from .._common.entry import Entry, EntryMetadata, ReadEntry
from .._common.errors import TraversalIOError

# High-level API
from .api import (
    iter_file_or_directory,
    each_file_or_directory,
    each_file,
    each_file_matching,
    read_each_file_matching,
)

__all__ = [
    # Core
    'StorageAdapter',
    'SequentialTraverser',
    'probe',
    'expand',
    'read',
    # Adapters
    'FileSystemStorage',
    # Data
    'TraversalConfig',
    'Entry',
    'EntryMetadata',
    'ReadEntry',
    'TraversalIOError',
    # API
    'iter_file_or_directory',
    'each_file_or_directory',
    'each_file',
    'each_file_matching',
    'read_each_file_matching',
]
