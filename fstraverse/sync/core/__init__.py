"""Core blocking components: storage abstraction, prober/expander, traverser."""

from .adapter import StorageAdapter
from .expansion import probe, expand, read
from .traverser import SequentialTraverser

__all__ = [
    'StorageAdapter',
    'probe',
    'expand',
    'read',
    'SequentialTraverser',
]
