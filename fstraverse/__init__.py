"""fstraverse - Recursive filesystem traversal.

Walks every file and directory under a root, calling a handler per entry,
optionally keeping only files whose path matches a regular expression and
optionally reading their contents.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from fstraverse.sync import each_file

Asynchronous:
    from fstraverse.aio import each_file
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both share the same handler contracts. They differ in error handling:
sync aborts the whole call on the first error, aio keeps the other
branches going and reports the first error on completion.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export submodules for convenient access
from . import sync
from . import aio
from ._common.config import TraversalConfig
from ._common.errors import TraversalIOError

# Users must explicitly choose their implementation
__all__ = [
    "__version__",
    "sync",
    "aio",
    "TraversalConfig",
    "TraversalIOError",
]
