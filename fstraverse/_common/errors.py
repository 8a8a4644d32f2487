"""Error type raised by the traversal core.

Every stat, list or read failure surfaces as a single exception type that
remembers which path failed and which storage operation was running.
"""

from typing import Optional


class TraversalIOError(OSError):
    """A storage operation failed for a specific path.

    Subclasses OSError so existing ``except OSError`` handlers keep working.
    ``errno`` and ``strerror`` are copied from the underlying error when it
    has them.

    Attributes:
        path: Path the failed operation was issued for
        operation: One of ``"stat"``, ``"list"`` or ``"read"``
    """

    OPERATIONS = ('stat', 'list', 'read')

    def __init__(self, operation: str, path: str, message: Optional[str] = None,
                 errno: Optional[int] = None):
        if operation not in self.OPERATIONS:
            raise ValueError(f"Unknown storage operation: {operation!r}")
        message = message or 'I/O error'
        if errno is not None:
            super().__init__(errno, message)
        else:
            super().__init__(message)
        self.path = path
        self.operation = operation
        self.filename = path

    @classmethod
    def wrap(cls, operation: str, path: str, error: OSError) -> 'TraversalIOError':
        """Convert a storage error into a TraversalIOError.

        An error that already is a TraversalIOError is returned unchanged,
        so stacked layers never double-wrap.

        Args:
            operation: Storage operation that failed
            path: Path the operation was issued for
            error: Original exception

        Returns:
            TraversalIOError with the original attached as ``__cause__``
        """
        if isinstance(error, TraversalIOError):
            return error
        wrapped = cls(operation, path, error.strerror or str(error), error.errno)
        wrapped.__cause__ = error
        return wrapped

    def __str__(self) -> str:
        return f"{self.operation} failed for '{self.path}': {self.strerror or self.args[0]}"

    def __reduce__(self):
        return (self.__class__, (self.operation, self.path, self.strerror, self.errno))
