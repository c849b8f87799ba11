"""File entries and the ordered buckets that hold them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class FileEntry:
    """A file known to the deduplicator, identified by its path."""

    path: str


class Bucket:
    """An ordered collection of file entries that share a bucket slot."""

    def __init__(self) -> None:
        self._entries: list[FileEntry] = []

    def append(self, entry: FileEntry) -> None:
        """Add an entry at the end of the bucket."""
        if not isinstance(entry, FileEntry):
            raise TypeError(f"expected FileEntry, got {type(entry).__name__}")
        self._entries.append(entry)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def paths(self) -> list[str]:
        """Return the paths of all entries in insertion order."""
        return [entry.path for entry in self._entries]

    def __str__(self) -> str:
        return "".join(f"{path} " for path in self.paths())

    def __repr__(self) -> str:
        return f"Bucket({self.paths()!r})"