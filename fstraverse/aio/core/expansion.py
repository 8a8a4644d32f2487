"""Entry prober and directory expander, async flavour.

Each coroutine performs one storage call and converts storage errors into
TraversalIOError. The engine wraps every call in its own task.
"""

import logging
from typing import List

from ..._common.config import DEFAULT_SEPARATOR
from ..._common.entry import Entry
from ..._common.errors import TraversalIOError
from ..._common.paths import join_path
from .adapter import AsyncStorageAdapter

logger = logging.getLogger(__name__)


async def probe(storage: AsyncStorageAdapter, path: str) -> Entry:
    """Fetch metadata for ``path``.

    Raises:
        TraversalIOError: If the stat call fails
    """
    try:
        metadata = await storage.stat(path)
    except OSError as e:
        logger.debug("stat failed for %s: %s", path, e)
        raise TraversalIOError.wrap('stat', path, e)
    return Entry(path, metadata)


async def expand(storage: AsyncStorageAdapter, directory: str,
                 separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """List a directory and return full child paths.

    Raises:
        TraversalIOError: If the listing fails
    """
    try:
        names = await storage.list_directory(directory)
    except OSError as e:
        logger.debug("listing failed for %s: %s", directory, e)
        raise TraversalIOError.wrap('list', directory, e)
    return [join_path(directory, name, separator) for name in names]


async def read(storage: AsyncStorageAdapter, path: str) -> bytes:
    """Read the full contents of ``path``.

    Raises:
        TraversalIOError: If the read fails
    """
    try:
        return await storage.read_file(path)
    except OSError as e:
        logger.debug("read failed for %s: %s", path, e)
        raise TraversalIOError.wrap('read', path, e)
