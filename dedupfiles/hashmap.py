"""Content hashing and the bucketed table that groups files by digest."""

from __future__ import annotations

import hashlib
import os
import sys
from typing import Callable, Iterator, TextIO

from .bucket import Bucket, FileEntry
from .recycle import RecycleBin, RecycleError

_CHUNK_SIZE = 4096

PROMPT = "Do you want to send duplicates to the Recycle Bin? (y/n): "


def hash_file(file_path: str | os.PathLike[str]) -> str:
    """Return the SHA-256 digest of a file's contents as lower-case hex.

    Raises OSError when the file cannot be read.
    """
    digest = hashlib.sha256()
    with open(file_path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def compare_files(
    path1: str | os.PathLike[str], path2: str | os.PathLike[str]
) -> bool:
    """Return True when both files have identical contents.

    The digests are compared first; only when they match are the
    contents compared byte for byte to rule out a collision.
    """
    if hash_file(path1) != hash_file(path2):
        return False
    with open(path1, "rb") as first, open(path2, "rb") as second:
        while True:
            block1 = first.read(_CHUNK_SIZE)
            block2 = second.read(_CHUNK_SIZE)
            if block1 != block2:
                return False
            if not block1:
                return True


def _is_yes(answer: str | bool) -> bool:
    if isinstance(answer, bool):
        return answer
    stripped = answer.strip()
    return bool(stripped) and stripped[0] in "yY"


class HashMap:
    """A fixed number of buckets into which file entries are placed by key."""

    def __init__(self, num_buckets: int) -> None:
        if num_buckets <= 0:
            raise ValueError("num_buckets must be a positive integer")
        self.num_buckets = num_buckets
        self._buckets = [Bucket() for _ in range(num_buckets)]

    def bucket_index(self, key: str) -> int:
        """Map a key to a bucket index in the range of the table."""
        raw = hashlib.sha256(key.encode("utf-8")).digest()[:8]
        return int.from_bytes(raw, "big") % self.num_buckets

    def insert(self, key: str, entry: FileEntry) -> None:
        """Place an entry in the bucket its key maps to."""
        self._buckets[self.bucket_index(key)].append(entry)

    def duplicate_groups(self) -> Iterator[tuple[int, list[str]]]:
        """Yield (bucket index, paths) for every bucket holding more than one file."""
        for index, bucket in enumerate(self._buckets):
            if len(bucket) > 1:
                yield index, bucket.paths()

    def handle_duplicates(
        self,
        confirm: Callable[[str], str | bool],
        recycle_bin: RecycleBin,
        out: TextIO | None = None,
    ) -> list[os.PathLike[str]]:
        """Report each group of possible duplicates and recycle the extras.

        ``confirm`` is called with the prompt for every group; when the
        answer starts with "y" or "Y", every file but the first of the
        group is sent to ``recycle_bin``. Returns where the moved files
        now live.
        """
        if out is None:
            out = sys.stdout
        moved = []
        for index, paths in self.duplicate_groups():
            print(f"\nPossible duplicates found in Bucket {index}:", file=out)
            for path in paths:
                print(f"- {path}", file=out)
            if not _is_yes(confirm(PROMPT)):
                continue
            for path in paths[1:]:
                try:
                    target = recycle_bin.send(path)
                except RecycleError as exc:
                    print(exc, file=sys.stderr)
                    continue
                print(f"Moved file to Recycle Bin: {path}", file=out)
                moved.append(target)
        return moved