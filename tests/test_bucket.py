import pytest

from dedupfiles.bucket import Bucket, FileEntry


def test_new_bucket_is_empty():
    bucket = Bucket()
    assert len(bucket) == 0
    assert bucket.paths() == []
    assert list(bucket) == []


def test_append_preserves_order():
    bucket = Bucket()
    names = ["one.txt", "two.txt", "three.txt"]
    for name in names:
        bucket.append(FileEntry(name))
    assert len(bucket) == 3
    assert bucket.paths() == names


def test_iteration_yields_entries():
    bucket = Bucket()
    first, second = FileEntry("a"), FileEntry("b")
    bucket.append(first)
    bucket.append(second)
    assert list(bucket) == [first, second]


def test_duplicate_paths_are_kept():
    bucket = Bucket()
    bucket.append(FileEntry("same"))
    bucket.append(FileEntry("same"))
    assert bucket.paths() == ["same", "same"]


def test_str_lists_each_path_followed_by_space():
    bucket = Bucket()
    bucket.append(FileEntry("x.bin"))
    bucket.append(FileEntry("y.bin"))
    assert str(bucket) == "x.bin y.bin "


def test_str_of_empty_bucket():
    assert str(Bucket()) == ""


def test_append_rejects_non_entries():
    bucket = Bucket()
    with pytest.raises(TypeError):
        bucket.append("plain-string")
    assert len(bucket) == 0


def test_file_entry_equality():
    assert FileEntry("p") == FileEntry("p")
    assert FileEntry("p").path == "p"