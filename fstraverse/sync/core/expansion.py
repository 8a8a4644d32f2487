"""Entry prober and directory expander, blocking flavour.

Both are thin: one storage call each, with storage errors converted into
TraversalIOError. Nothing is retried.
"""

import logging
from typing import List

from ..._common.config import DEFAULT_SEPARATOR
from ..._common.entry import Entry
from ..._common.errors import TraversalIOError
from ..._common.paths import join_path
from .adapter import StorageAdapter

logger = logging.getLogger(__name__)


def probe(storage: StorageAdapter, path: str) -> Entry:
    """Fetch metadata for ``path``.

    Raises:
        TraversalIOError: If the stat call fails
    """
    try:
        metadata = storage.stat(path)
    except OSError as e:
        logger.debug("stat failed for %s: %s", path, e)
        raise TraversalIOError.wrap('stat', path, e)
    return Entry(path, metadata)


def expand(storage: StorageAdapter, directory: str,
           separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """List a directory and return full child paths.

    Raises:
        TraversalIOError: If the listing fails
    """
    try:
        names = storage.list_directory(directory)
    except OSError as e:
        logger.debug("listing failed for %s: %s", directory, e)
        raise TraversalIOError.wrap('list', directory, e)
    return [join_path(directory, name, separator) for name in names]


def read(storage: StorageAdapter, path: str) -> bytes:
    """Read the full contents of ``path``.

    Raises:
        TraversalIOError: If the read fails
    """
    try:
        return storage.read_file(path)
    except OSError as e:
        logger.debug("read failed for %s: %s", path, e)
        raise TraversalIOError.wrap('read', path, e)
