"""Concurrent traversal engine.

Every probe and every directory listing runs as its own task on the
event loop. Results are handled in task callbacks: a probed directory
gets listed, a listed directory gets each child probed. The session's
outstanding-work counter tells when the last branch has finished.
"""

import functools
import logging
from typing import Optional

from ..._common.callbacks import NOOP, CompleteHandler, EntryHandler
from ..._common.config import TraversalConfig
from .adapter import AsyncStorageAdapter
from .expansion import probe, expand
from .session import TraversalSession

logger = logging.getLogger(__name__)


class ConcurrentTraverser:
    """Non-blocking traversal of every entry under a root.

    Branches are independent: a failed stat or listing stops only the
    branch it happened in. The first failure is what the completion
    handler receives; the other branches still run to the end.
    """

    def __init__(self, storage: AsyncStorageAdapter,
                 config: Optional[TraversalConfig] = None):
        """Initialize traverser.

        Args:
            storage: Async storage collaborator
            config: Traversal settings (defaults used if None)
        """
        self.storage = storage
        self.config = config or TraversalConfig()

    def start(
        self,
        directory: Optional[str] = None,
        file_handler: EntryHandler = NOOP,
        complete_handler: CompleteHandler = NOOP,
        session: Optional[TraversalSession] = None
    ) -> TraversalSession:
        """Start walking the tree rooted at ``directory`` and return immediately.

        ``file_handler(None, path, metadata)`` runs for every probed entry
        before it is expanded; ``file_handler(error, path, None)`` runs for
        every failed stat or listing. ``complete_handler`` runs exactly once
        when no operation is left in flight.

        Args:
            directory: Root path (config default if empty)
            file_handler: Per-entry handler
            complete_handler: Completion handler
            session: Session to count work on; a new one if None. Upper
                layers pass their own to track extra work on the same counter.

        Returns:
            The session, awaitable for the visited entries
        """
        session = session if session is not None else TraversalSession()
        root = self.config.resolve_root(directory)
        separator = self.config.separator

        def on_complete(error):
            if error is not None:
                return complete_handler(error, None, None)
            return complete_handler(None, session.paths, session.metadata)

        def on_probed(path, error, entry):
            if error is not None:
                session.fail(error)
                return file_handler(error, path, None)

            session.record(entry)
            file_handler(None, entry.path, entry.metadata)

            if entry.is_dir:
                issue_expand(entry.path)

        def on_expanded(directory, error, children):
            if error is not None:
                session.fail(error)
                return file_handler(error, directory, None)

            for child in children:
                issue_probe(child)

        def issue_probe(path):
            session.dispatch(
                probe(self.storage, path),
                functools.partial(on_probed, path)
            )

        def issue_expand(directory):
            session.dispatch(
                expand(self.storage, directory, separator),
                functools.partial(on_expanded, directory)
            )

        session.begin(on_complete)
        logger.debug("concurrent traversal of %s", root)
        issue_probe(root)
        return session
