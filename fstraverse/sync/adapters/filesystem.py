"""Local filesystem storage adapter.

Maps the three storage primitives straight onto ``os`` calls. Errors are
left as the OSError subclasses the OS raises; the core attaches the path.
"""

import os
from typing import List

from ..._common.entry import EntryMetadata
from ..core.adapter import StorageAdapter


class FileSystemStorage(StorageAdapter):
    """Blocking access to the local filesystem.

    ``stat`` follows symbolic links, so a link to a directory is reported
    (and traversed) as a directory.
    """

    def stat(self, path: str) -> EntryMetadata:
        return EntryMetadata.from_stat(os.stat(path))

    def list_directory(self, path: str) -> List[str]:
        return os.listdir(path)

    def read_file(self, path: str) -> bytes:
        with open(path, 'rb') as f:
            return f.read()

    def __repr__(self) -> str:
        return "FileSystemStorage()"
