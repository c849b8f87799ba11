# dedupfiles

`dedupfiles` looks for files with identical contents in one directory. It can
move the extra copies into a recycle-bin directory.

It hashes the contents of each regular file directly inside the directory with
SHA-256. It does not scan subdirectories. Files are processed in order of name.
Each digest goes into one of a fixed number of hash buckets. For each bucket
that holds more than one file, the files are listed and you are asked whether
to recycle the duplicates. The first file listed in a group is kept. The others
are moved.

## Installation

```
pip install .
```

## Command line

```
dedupfiles [DIRECTORY] [--buckets N] [--recycle-bin DIR] [-y]
```

- `DIRECTORY`: the directory to scan. The default is the current directory.
- `--buckets N`: the number of hash buckets. The default is 1000, and N must be positive.
- `--recycle-bin DIR`: where recycled files are moved. The default is `DIRECTORY/.recycle-bin`.
- `-y`, `--yes`: recycle duplicates without asking.

The command prints each file with its hash. For every group of possible
duplicates it asks:

```
Do you want to send duplicates to the Recycle Bin? (y/n):
```

An answer that starts with `y` or `Y` moves every file in the group except the
first into the recycle-bin directory. Any other answer leaves the files in
place, and so does end of input.

The command exits with one of these statuses:

- 0 on success.
- 1 if the directory cannot be listed.
- 2 for invalid arguments.

## Library use

```python
from dedupfiles.system import DeduplicationSystem
from dedupfiles.recycle import RecycleBin

system = DeduplicationSystem("photos", 1000, None)
system.process_files()
moved = system.handle_duplicates(lambda prompt: True, RecycleBin("photos-recycled"))
```

`DeduplicationSystem(directory, num_buckets, out)` writes its report to `out`,
or to standard output when `out` is `None`. It has two methods:

- `process_files()` returns the `FileEntry` records it hashed. It raises `OSError` if the directory cannot be listed. Files that cannot be read are reported on standard error and skipped.
- `handle_duplicates(confirm, recycle_bin)` calls `confirm` with the prompt text for each group. It accepts either a boolean or a string answer. It returns the new locations of the moved files.

The lower-level parts can also be used on their own:

- `dedupfiles.hashmap.hash_file(path)` returns the lower-case hex SHA-256 digest of a file. It raises `OSError` if the file cannot be read.
- `dedupfiles.hashmap.compare_files(a, b)` returns `True` when the two files have the same contents. It compares the digests first and then the bytes.
- `dedupfiles.hashmap.HashMap(num_buckets)` places `FileEntry` records into `Bucket`s by key:
  - `insert(key, entry)` adds an entry.
  - `bucket_index(key)` gives the bucket a key maps to.
  - `duplicate_groups()` yields `(index, paths)` for every bucket that holds more than one file.
- `dedupfiles.bucket.Bucket` is an ordered collection of `FileEntry` objects. It supports iteration and `len()`, and `paths()` returns the paths it holds.
- `dedupfiles.recycle.RecycleBin(directory).send(path)` moves a file into the directory and returns its new path. The directory is created if needed. If the name is already taken, a numbered suffix such as `name (1).txt` is added. It raises `RecycleError` on failure.

## Limitations

- Grouping is by bucket, not by exact digest. Two different files whose digests land in the same bucket are reported together as possible duplicates. Nothing checks a group with `compare_files` before files are moved.
- Recycled files go into an ordinary directory of your choice, not the operating system's trash. Recovering a file means moving it back by hand.
- Only the top level of the directory is scanned.