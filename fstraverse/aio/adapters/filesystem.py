"""Async local filesystem adapter.

The blocking syscalls run on the default executor through
``asyncio.to_thread``; their results come back to the awaiting task on
the event loop thread.
"""

import asyncio
import os
from pathlib import Path
from typing import List

from ..._common.entry import EntryMetadata
from ..core.adapter import AsyncStorageAdapter


class AsyncFileSystemStorage(AsyncStorageAdapter):
    """Non-blocking access to the local filesystem.

    ``stat`` follows symbolic links, matching the blocking adapter.
    """

    async def stat(self, path: str) -> EntryMetadata:
        st = await asyncio.to_thread(os.stat, path)
        return EntryMetadata.from_stat(st)

    async def list_directory(self, path: str) -> List[str]:
        return await asyncio.to_thread(os.listdir, path)

    async def read_file(self, path: str) -> bytes:
        return await asyncio.to_thread(Path(path).read_bytes)

    def __repr__(self) -> str:
        return "AsyncFileSystemStorage()"
