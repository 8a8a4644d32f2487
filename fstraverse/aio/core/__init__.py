"""Core async components: storage abstraction, prober/expander, sessions, engine.

All components use async/await and task callbacks for non-blocking I/O.
"""

from .adapter import AsyncStorageAdapter
from .expansion import probe, expand, read
from .session import BaseSession, TraversalSession, FilterSession, ReadSession
from .traverser import ConcurrentTraverser

__all__ = [
    # Adapter
    'AsyncStorageAdapter',
    # Prober / expander
    'probe',
    'expand',
    'read',
    # Sessions
    'BaseSession',
    'TraversalSession',
    'FilterSession',
    'ReadSession',
    # Engine
    'ConcurrentTraverser',
]
