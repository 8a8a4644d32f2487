"""Configuration re-export.

Keeps ``fstraverse.config`` as the public import location while the
implementation lives in the shared ``_common`` package.
"""

from ._common.config import (
    TraversalConfig,
    DEFAULT_ROOT,
    DEFAULT_SEPARATOR,
)

__all__ = [
    'TraversalConfig',
    'DEFAULT_ROOT',
    'DEFAULT_SEPARATOR',
]
