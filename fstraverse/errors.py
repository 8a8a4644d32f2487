"""Error re-export; see ``fstraverse._common.errors``."""

from ._common.errors import TraversalIOError

__all__ = ['TraversalIOError']
