"""Callback contracts shared by every traversal layer.

Per-entry handlers are called as ``handler(error, path, metadata)``; the
content reader adds a fourth ``content`` argument. Completion handlers are
called as ``complete_handler(error, paths, metadata_list)``, again with a
trailing ``contents`` list for the reader. On failure every argument after
``error`` is None.
"""

from typing import Any, Callable, List, Optional

from .entry import EntryMetadata

EntryHandler = Callable[[Optional[BaseException], Optional[str], Optional[EntryMetadata]], Any]
ReadHandler = Callable[
    [Optional[BaseException], Optional[str], Optional[EntryMetadata], Optional[bytes]], Any
]
CompleteHandler = Callable[
    [Optional[BaseException], Optional[List[str]], Optional[List[EntryMetadata]]], Any
]
ReadCompleteHandler = Callable[
    [Optional[BaseException], Optional[List[str]], Optional[List[EntryMetadata]],
     Optional[List[bytes]]], Any
]


def NOOP(*args, **kwargs):
    """Handler that ignores everything; the default for optional handlers."""
    return None
