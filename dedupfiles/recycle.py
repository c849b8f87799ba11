"""Moving files aside into a recoverable recycle-bin directory."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


class RecycleError(OSError):
    """Raised when a file cannot be moved to the recycle bin."""


class RecycleBin:
    """A directory into which unwanted files are moved rather than deleted.

    Files keep their names; when a name is already taken in the bin, a
    numbered suffix is added so nothing already there is overwritten.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)

    def _free_target(self, name: str) -> Path:
        target = self.directory / name
        if not target.exists():
            return target
        stem, suffix = Path(name).stem, Path(name).suffix
        counter = 1
        while True:
            candidate = self.directory / f"{stem} ({counter}){suffix}"
            if not candidate.exists():
                return candidate
            counter += 1

    def send(self, file_path: str | os.PathLike[str]) -> Path:
        """Move a file into the bin and return where it now lives."""
        source = Path(file_path)
        if not source.is_file():
            raise RecycleError(f"Failed to move file to Recycle Bin: {source}")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            target = self._free_target(source.name)
            shutil.move(str(source), str(target))
        except OSError as exc:
            raise RecycleError(
                f"Failed to move file to Recycle Bin: {source}"
            ) from exc
        return target