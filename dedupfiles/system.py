"""Scanning a directory and grouping its files by content digest."""

from __future__ import annotations

import os
import sys
from typing import Callable, TextIO

from .bucket import FileEntry
from .hashmap import HashMap, hash_file
from .recycle import RecycleBin


class DeduplicationSystem:
    """Finds files with identical contents in one directory."""

    def __init__(
        self,
        directory: str | os.PathLike[str],
        num_buckets: int = 1000,
        out: TextIO | None = None,
    ) -> None:
        self.directory = os.fspath(directory)
        self.hash_table = HashMap(num_buckets)
        self.out = sys.stdout if out is None else out

    def process_files(self) -> list[FileEntry]:
        """Hash every regular file directly inside the directory.

        Subdirectories are skipped. Files that cannot be read are
        reported on stderr and left out. Raises OSError when the
        directory itself cannot be listed.
        """
        with os.scandir(self.directory) as listing:
            names = sorted(entry.name for entry in listing if not entry.is_dir())
        processed = []
        for name in names:
            path = os.path.join(self.directory, name)
            try:
                digest = hash_file(path)
            except OSError:
                print(f"Error opening file: {path}", file=sys.stderr)
                continue
            entry = FileEntry(path)
            self.hash_table.insert(digest, entry)
            print(f"\nFile Path : {path}\nHash Value: {digest}", file=self.out)
            processed.append(entry)
        return processed

    def handle_duplicates(
        self, confirm: Callable[[str], str | bool], recycle_bin: RecycleBin
    ) -> list[os.PathLike[str]]:
        """Report duplicate groups and recycle the extras the user agrees to."""
        return self.hash_table.handle_duplicates(confirm, recycle_bin, self.out)