"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration (TraversalConfig)
- Entry data structures and the error type
- Path joining and pattern matching (pure computation, no I/O)

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import TraversalConfig, DEFAULT_ROOT, DEFAULT_SEPARATOR
from .entry import Entry, EntryMetadata, ReadEntry
from .errors import TraversalIOError
from .paths import join_path, compile_pattern, path_matches
from .callbacks import NOOP

__all__ = [
    'TraversalConfig',
    'DEFAULT_ROOT',
    'DEFAULT_SEPARATOR',
    'Entry',
    'EntryMetadata',
    'ReadEntry',
    'TraversalIOError',
    'join_path',
    'compile_pattern',
    'path_matches',
    'NOOP',
]
