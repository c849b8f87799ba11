import io

import pytest

from dedupfiles.recycle import RecycleBin
from dedupfiles.system import DeduplicationSystem


@pytest.fixture
def sample_dir(tmp_path):
    root = tmp_path / "files"
    root.mkdir()
    (root / "a.txt").write_bytes(b"duplicate content")
    (root / "b.txt").write_bytes(b"duplicate content")
    (root / "c.txt").write_bytes(b"something else entirely")
    (root / "nested").mkdir()
    (root / "nested" / "d.txt").write_bytes(b"duplicate content")
    return root


def test_process_files_skips_directories(sample_dir):
    out = io.StringIO()
    system = DeduplicationSystem(sample_dir, 1000, out)
    entries = system.process_files()
    names = [entry.path.rsplit("/", 1)[-1].rsplit("\\", 1)[-1] for entry in entries]
    assert names == ["a.txt", "b.txt", "c.txt"]
    assert out.getvalue().count("File Path : ") == 3
    assert out.getvalue().count("Hash Value: ") == 3


def test_duplicates_grouped_together(sample_dir):
    system = DeduplicationSystem(sample_dir, 1000, io.StringIO())
    system.process_files()
    groups = [paths for _, paths in system.hash_table.duplicate_groups()]
    assert any(
        str(sample_dir / "a.txt") in paths and str(sample_dir / "b.txt") in paths
        for paths in groups
    )


def test_missing_directory_raises(tmp_path):
    system = DeduplicationSystem(tmp_path / "absent", 10, io.StringIO())
    with pytest.raises(FileNotFoundError):
        system.process_files()


def test_invalid_bucket_count(tmp_path):
    with pytest.raises(ValueError):
        DeduplicationSystem(tmp_path, 0)


def test_handle_duplicates_moves_later_copy(sample_dir, tmp_path):
    out = io.StringIO()
    system = DeduplicationSystem(sample_dir, 1000, out)
    system.process_files()
    moved = system.handle_duplicates(lambda prompt: "y", RecycleBin(tmp_path / "bin"))
    assert (sample_dir / "a.txt").exists()
    assert not (sample_dir / "b.txt").exists()
    assert "b.txt" in [path.name for path in moved]
    assert (tmp_path / "bin" / "b.txt").read_bytes() == b"duplicate content"


def test_handle_duplicates_declined(sample_dir, tmp_path):
    system = DeduplicationSystem(sample_dir, 1000, io.StringIO())
    system.process_files()
    moved = system.handle_duplicates(lambda prompt: "n", RecycleBin(tmp_path / "bin"))
    assert moved == []
    assert (sample_dir / "b.txt").exists()