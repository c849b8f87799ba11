"""Find files with identical contents and move extra copies into a recycle-bin directory."""

__version__ = "0.1.0"
__all__ = ["bucket", "recycle", "hashmap", "system", "cli"]