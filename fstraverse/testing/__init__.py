"""Testing utilities for fstraverse consumers."""

from .fixtures import InMemoryStorage, AsyncInMemoryStorage

__all__ = ['InMemoryStorage', 'AsyncInMemoryStorage']
