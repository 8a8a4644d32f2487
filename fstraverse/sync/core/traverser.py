"""Sequential traversal engine.

Plain recursion over the prober and expander. Each call blocks, so no
bookkeeping is needed to know when the walk is over: it is over when
the outermost call returns.
"""

import logging
from typing import Iterator, Optional

from ..._common.config import TraversalConfig
from ..._common.entry import Entry
from .adapter import StorageAdapter
from .expansion import probe, expand

logger = logging.getLogger(__name__)


class SequentialTraverser:
    """Blocking, pre-order traversal of every entry under a root.

    The root itself is visited first, then each child in listing order,
    recursing into directories as they are met. Any storage error aborts
    the whole walk; there is no per-branch isolation in this mode.
    """

    def __init__(self, storage: StorageAdapter,
                 config: Optional[TraversalConfig] = None):
        """Initialize traverser.

        Args:
            storage: Blocking storage collaborator
            config: Traversal settings (defaults used if None)
        """
        self.storage = storage
        self.config = config or TraversalConfig()

    def traverse(self, directory: Optional[str] = None) -> Iterator[Entry]:
        """Walk the tree rooted at ``directory``.

        Each entry is yielded before its children are listed, so a consumer
        sees a directory before anything inside it.

        Args:
            directory: Root path (config default if empty)

        Yields:
            Entry for every file and directory, root included

        Raises:
            TraversalIOError: On the first failed stat or listing
        """
        root = self.config.resolve_root(directory)
        logger.debug("sequential traversal of %s", root)
        yield from self._visit(root)

    def _visit(self, path: str) -> Iterator[Entry]:
        entry = probe(self.storage, path)
        yield entry

        if entry.is_dir:
            for child in expand(self.storage, path, self.config.separator):
                yield from self._visit(child)
