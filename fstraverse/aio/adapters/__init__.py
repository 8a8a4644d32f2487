"""Async storage adapters."""

from .filesystem import AsyncFileSystemStorage

__all__ = [
    'AsyncFileSystemStorage',
]
