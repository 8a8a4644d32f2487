"""Configuration for fstraverse.

Defines the few knobs a traversal has: where it starts when no root is
given, how child paths are joined, and how textual patterns are compiled.
"""

from dataclasses import dataclass
from typing import Optional


DEFAULT_ROOT = './'
DEFAULT_SEPARATOR = '/'


@dataclass
class TraversalConfig:
    """Settings shared by every traversal variant.

    Attributes:
        root: Root used when a traversal is started without a path
        separator: Separator placed between a directory and a child name
        pattern_flags: ``re`` flags applied when a pattern is given as text
    """

    root: str = DEFAULT_ROOT
    separator: str = DEFAULT_SEPARATOR
    pattern_flags: int = 0

    def __post_init__(self):
        if not self.root:
            raise ValueError("root must be a non-empty path")
        if not self.separator:
            raise ValueError("separator must be a non-empty string")

    def resolve_root(self, path: Optional[str]) -> str:
        """Return ``path``, or the configured default root when it is empty.

        Args:
            path: Path requested by the caller (may be None or "")

        Returns:
            Path the traversal should start from
        """
        return str(path) if path else self.root
