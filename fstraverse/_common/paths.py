"""Path joining and pattern matching helpers."""

import re
from typing import Pattern, Union

from .config import DEFAULT_SEPARATOR


def join_path(directory: str, name: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Join a directory path and a child name with a single separator.

    One trailing separator on the directory is dropped first, so
    ``join_path('root/', 'a')`` and ``join_path('root', 'a')`` agree.
    No other normalization happens.
    """
    if directory.endswith(separator):
        directory = directory[:-len(separator)]
    return f"{directory}{separator}{name}"


def compile_pattern(expression: Union[str, Pattern], flags: int = 0) -> Pattern:
    """Compile a textual regular expression.

    Compiled patterns pass through unchanged and keep their own flags.

    Raises:
        re.error: If the expression is not a valid regular expression
    """
    if isinstance(expression, re.Pattern):
        return expression
    return re.compile(expression, flags)


def path_matches(pattern: Pattern, path: str) -> bool:
    """Test the full joined path against the pattern (search semantics)."""
    return pattern.search(path) is not None
