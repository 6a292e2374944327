"""Tests for filesystem probing."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from findup.lib.fs import Entry, FileType, aprobe, probe


def test_probe_file(tmp_path: Path):
    (tmp_path / "config.json").write_text("{}")
    assert probe(str(tmp_path / "config.json")) is Entry.FILE


def test_probe_directory(tmp_path: Path):
    assert probe(str(tmp_path)) is Entry.DIRECTORY


def test_probe_missing(tmp_path: Path):
    assert probe(str(tmp_path / "nope")) is Entry.MISSING


def test_probe_through_a_file_is_missing(tmp_path: Path):
    (tmp_path / "file").write_text("")
    assert probe(str(tmp_path / "file" / "child")) is Entry.MISSING


def test_probe_follows_symlinks(tmp_path: Path):
    (tmp_path / "real").mkdir()
    (tmp_path / "link").symlink_to(tmp_path / "real")
    (tmp_path / "dangling").symlink_to(tmp_path / "gone")

    assert probe(str(tmp_path / "link")) is Entry.DIRECTORY
    assert probe(str(tmp_path / "dangling")) is Entry.MISSING


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires mkfifo")
def test_probe_other(tmp_path: Path):
    os.mkfifo(tmp_path / "pipe")
    assert probe(str(tmp_path / "pipe")) is Entry.OTHER


def test_probe_permission_error_is_reported_not_raised(tmp_path: Path):
    with patch("findup.lib.fs.os.stat", side_effect=PermissionError("denied")):
        assert probe(str(tmp_path)) is Entry.ERROR


def test_probe_invalid_path_is_reported_not_raised():
    assert probe("bad\0path") is Entry.ERROR


def test_entry_matches_type_strictly():
    assert Entry.FILE.matches(FileType.FILE)
    assert Entry.DIRECTORY.matches(FileType.DIRECTORY)
    assert not Entry.FILE.matches(FileType.DIRECTORY)
    assert not Entry.DIRECTORY.matches(FileType.FILE)
    for entry in (Entry.MISSING, Entry.OTHER, Entry.ERROR):
        assert not entry.matches(FileType.FILE)
        assert not entry.matches(FileType.DIRECTORY)


def test_file_type_parse():
    assert FileType.parse("file") is FileType.FILE
    assert FileType.parse(FileType.DIRECTORY) is FileType.DIRECTORY
    with pytest.raises(ValueError, match="'file' or 'directory'"):
        FileType.parse("link")


@pytest.mark.asyncio
async def test_aprobe_matches_probe(tmp_path: Path):
    (tmp_path / "config.json").write_text("{}")
    for name in ("config.json", "missing"):
        path = str(tmp_path / name)
        assert await aprobe(path) is probe(path)
