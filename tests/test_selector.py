"""Tests for render directory selection."""

import os
from pathlib import Path
from types import SimpleNamespace

import pytest
import pipeline.selector as selector
from pipeline.errors import RenderDirectoryNotFoundError
from pipeline.selector import find_latest_render_dir, read_dir_timestamp


@pytest.fixture
def renders_root(tmp_path):
    """Create an image_renders directory inside tmp_path."""
    root = tmp_path / "image_renders"
    root.mkdir()
    return root


def _fake_timestamps(monkeypatch, timestamps):
    """Make read_dir_timestamp return a fixed value per directory name."""
    monkeypatch.setattr(selector, "read_dir_timestamp", lambda path: timestamps.get(path.name))


def test_returns_newest_directory(renders_root, monkeypatch):
    """Test the directory with the greatest timestamp is selected."""
    for name in ("render_a", "render_b", "render_c"):
        (renders_root / name).mkdir()
    _fake_timestamps(monkeypatch, {"render_a": 100.0, "render_b": 300.0, "render_c": 200.0})

    assert find_latest_render_dir(renders_root) == renders_root / "render_b"


def test_ignores_directories_without_prefix(renders_root, monkeypatch):
    """Test non-matching directories are never chosen, whatever their timestamp."""
    (renders_root / "render_old").mkdir()
    (renders_root / "snapshots").mkdir()
    (renders_root / "Render_upper").mkdir()
    _fake_timestamps(monkeypatch, {"render_old": 1.0, "snapshots": 999.0, "Render_upper": 999.0})

    assert find_latest_render_dir(renders_root) == renders_root / "render_old"


def test_ignores_files_with_prefix(renders_root, monkeypatch):
    """Test plain files named render* are not candidates."""
    (renders_root / "render_dir").mkdir()
    (renders_root / "render_notes.txt").write_text("not a directory")
    _fake_timestamps(monkeypatch, {"render_dir": 1.0, "render_notes.txt": 999.0})

    assert find_latest_render_dir(renders_root) == renders_root / "render_dir"


def test_tie_keeps_first_enumerated(renders_root, monkeypatch):
    """Test equal timestamps resolve to the first directory in scan order."""
    for name in ("render_x", "render_y", "render_z"):
        (renders_root / name).mkdir()
    _fake_timestamps(monkeypatch, {"render_x": 50.0, "render_y": 50.0, "render_z": 50.0})

    with os.scandir(renders_root) as entries:
        first = next(Path(e.path) for e in entries if e.name.startswith("render"))

    assert find_latest_render_dir(renders_root) == first


def test_skips_unreadable_candidates(renders_root, monkeypatch):
    """Test a directory whose metadata cannot be read is skipped silently."""
    (renders_root / "render_broken").mkdir()
    (renders_root / "render_ok").mkdir()
    _fake_timestamps(monkeypatch, {"render_broken": None, "render_ok": 10.0})

    assert find_latest_render_dir(renders_root) == renders_root / "render_ok"


def test_missing_root_raises(tmp_path):
    """Test a missing root raises and creates nothing."""
    root = tmp_path / "does_not_exist"

    with pytest.raises(RenderDirectoryNotFoundError, match="Directory not found"):
        find_latest_render_dir(root)

    assert not root.exists()
    assert list(tmp_path.iterdir()) == []


def test_no_matching_directories_raises(renders_root):
    """Test a root without render directories raises."""
    (renders_root / "other").mkdir()

    with pytest.raises(RenderDirectoryNotFoundError, match="No render directories found"):
        find_latest_render_dir(renders_root)


def test_not_found_is_an_oserror(renders_root):
    """Test the not-found error can be handled as a regular OSError."""
    with pytest.raises(OSError):
        find_latest_render_dir(renders_root)


def test_real_timestamps(renders_root):
    """Test selection works end to end with real filesystem metadata."""
    (renders_root / "render_only").mkdir()

    assert find_latest_render_dir(renders_root) == renders_root / "render_only"


class _FakePath:
    def __init__(self, stat_result=None, error=None):
        self._stat_result = stat_result
        self._error = error

    def stat(self):
        if self._error:
            raise self._error
        return self._stat_result


def test_timestamp_prefers_creation_time():
    """Test st_birthtime is used when the platform reports it."""
    path = _FakePath(SimpleNamespace(st_birthtime=10.0, st_mtime=20.0))
    assert read_dir_timestamp(path) == 10.0


def test_timestamp_falls_back_to_mtime():
    """Test st_mtime is used when no creation time is available."""
    path = _FakePath(SimpleNamespace(st_mtime=20.0))
    assert read_dir_timestamp(path) == 20.0


def test_timestamp_unreadable_returns_none():
    """Test a metadata read failure yields None instead of raising."""
    path = _FakePath(error=PermissionError("denied"))
    assert read_dir_timestamp(path) is None
