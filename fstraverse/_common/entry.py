"""Entry data structures.

Entries are produced once per probed path and never updated afterwards,
so all of them are frozen dataclasses.
"""

import stat as stat_module  # To avoid name collision with stat results
from dataclasses import dataclass


@dataclass(frozen=True)
class EntryMetadata:
    """Metadata record returned by a storage ``stat`` call.

    Attributes:
        size: Size in bytes as reported by the storage
        modified_time: Modification time as a Unix timestamp
        mode: Raw ``st_mode`` bits (file type and permissions)
    """

    size: int
    modified_time: float
    mode: int

    @property
    def is_dir(self) -> bool:
        """True if the mode bits describe a directory."""
        return stat_module.S_ISDIR(self.mode)

    @classmethod
    def from_stat(cls, st) -> 'EntryMetadata':
        """Build metadata from an ``os.stat_result`` (or anything shaped like one)."""
        return cls(size=st.st_size, modified_time=st.st_mtime, mode=st.st_mode)

    @classmethod
    def for_file(cls, size: int = 0, modified_time: float = 0.0,
                 permissions: int = 0o644) -> 'EntryMetadata':
        return cls(size=size, modified_time=modified_time,
                   mode=stat_module.S_IFREG | permissions)

    @classmethod
    def for_directory(cls, modified_time: float = 0.0,
                      permissions: int = 0o755) -> 'EntryMetadata':
        return cls(size=0, modified_time=modified_time,
                   mode=stat_module.S_IFDIR | permissions)


@dataclass(frozen=True)
class Entry:
    """A visited path plus its metadata."""

    path: str
    metadata: EntryMetadata

    @property
    def is_dir(self) -> bool:
        return self.metadata.is_dir


@dataclass(frozen=True)
class ReadEntry:
    """A matched file together with its full raw contents."""

    path: str
    metadata: EntryMetadata
    content: bytes

    @property
    def entry(self) -> Entry:
        return Entry(self.path, self.metadata)
