"""Tests for destination directory helpers."""

from playsync.platform.storage.local import empty_dir


def test_empty_dir_removes_all_contents(tmp_path):
    """Files, nested directories and symlinks are removed; the directory stays."""
    target = tmp_path / "lib"
    (target / "nested" / "deeper").mkdir(parents=True)
    (target / "stale.aar").write_bytes(b"old")
    (target / "nested" / "deeper" / "x.aar").write_bytes(b"old")
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")
    (target / "link").symlink_to(outside)

    assert empty_dir(target) == target
    assert target.is_dir()
    assert list(target.iterdir()) == []
    assert outside.read_text() == "keep"


def test_empty_dir_creates_missing_directory(tmp_path):
    """A missing directory is created."""
    target = tmp_path / "android" / "lib"
    empty_dir(str(target))
    assert target.is_dir()
