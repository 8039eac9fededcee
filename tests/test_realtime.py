import os
from unittest import mock

import pytest

from sentinelscan.realtime import (
    DirectoryEvent,
    EventKind,
    diff_snapshots,
    monitor_directory,
    snapshot,
)
from sentinelscan.scanner import sha256_file


def test_identical_snapshots_have_no_events(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    assert diff_snapshots(snapshot(tmp_path), snapshot(tmp_path)) == []


def test_created_file(tmp_path):
    before = snapshot(tmp_path)
    (tmp_path / "a.txt").write_text("a")
    assert diff_snapshots(before, snapshot(tmp_path)) == [
        DirectoryEvent(EventKind.CREATED, "a.txt", False)
    ]


def test_created_directory(tmp_path):
    before = snapshot(tmp_path)
    (tmp_path / "sub").mkdir()
    assert diff_snapshots(before, snapshot(tmp_path)) == [
        DirectoryEvent(EventKind.CREATED, "sub", True)
    ]


def test_modified_file(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("a")
    os.utime(path, ns=(1_000_000_000, 1_000_000_000))
    before = snapshot(tmp_path)
    path.write_text("changed")
    os.utime(path, ns=(2_000_000_000, 2_000_000_000))
    assert diff_snapshots(before, snapshot(tmp_path)) == [
        DirectoryEvent(EventKind.MODIFIED, "a.txt", False)
    ]


def test_deleted_file(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("a")
    before = snapshot(tmp_path)
    path.unlink()
    assert diff_snapshots(before, snapshot(tmp_path)) == [
        DirectoryEvent(EventKind.DELETED, "a.txt", False)
    ]


def test_events_sorted_by_name(tmp_path):
    before = snapshot(tmp_path)
    for name in ("c", "a", "b"):
        (tmp_path / name).write_text(name)
    names = [e.name for e in diff_snapshots(before, snapshot(tmp_path))]
    assert names == sorted(names)


def test_snapshot_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        snapshot(tmp_path / "missing")


def test_monitor_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        monitor_directory(tmp_path / "missing", set(), tmp_path / "q")


def test_monitor_idle_returns_no_events(tmp_path):
    with mock.patch("time.sleep") as sleep:
        events = monitor_directory(tmp_path, set(), tmp_path / "q", max_idle_cycles=3)
    assert events == []
    assert sleep.call_count == 3


def test_monitor_scans_and_quarantines(tmp_path):
    watched = tmp_path / "watched"
    watched.mkdir()
    qdir = tmp_path / "q"
    reference = tmp_path / "reference.txt"
    reference.write_bytes(b"known sample contents")
    signatures = {sha256_file(reference)}
    random_payload = os.urandom(4096)

    def create_files(_interval):
        if not (watched / "clean.txt").exists() and not qdir.exists():
            (watched / "clean.txt").write_text("plain text that is fine\n")
            (watched / "packed.bin").write_bytes(random_payload)
            (watched / "known.txt").write_bytes(b"known sample contents")

    with mock.patch("time.sleep", side_effect=create_files):
        events = monitor_directory(watched, signatures, qdir, interval=0)

    created = {e.name for e in events if e.kind is EventKind.CREATED}
    deleted = {e.name for e in events if e.kind is EventKind.DELETED}
    assert created == {"clean.txt", "packed.bin", "known.txt"}
    assert deleted == {"packed.bin", "known.txt"}
    assert sorted(os.listdir(qdir)) == ["known.txt", "packed.bin"]
    assert os.listdir(watched) == ["clean.txt"]