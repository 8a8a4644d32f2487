"""Blocking storage adapters."""

from .filesystem import FileSystemStorage

__all__ = [
    'FileSystemStorage',
]
