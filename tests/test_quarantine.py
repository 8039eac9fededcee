import stat

import pytest

from sentinelscan.quarantine import DEFAULT_QUARANTINE_DIR, quarantine_file


def test_file_is_moved_into_new_directory(tmp_path):
    source = tmp_path / "sample.bin"
    source.write_bytes(b"payload")
    qdir = tmp_path / "quarantine"

    target = quarantine_file(source, qdir)

    assert target == qdir / "sample.bin"
    assert target.read_bytes() == b"payload"
    assert not source.exists()
    assert stat.S_IMODE(qdir.stat().st_mode) == 0o700


def test_existing_directory_is_reused(tmp_path):
    qdir = tmp_path / "quarantine"
    qdir.mkdir()
    (qdir / "older").write_text("old")
    source = tmp_path / "new.txt"
    source.write_text("new")

    target = quarantine_file(str(source), str(qdir))

    assert sorted(p.name for p in qdir.iterdir()) == ["new.txt", "older"]
    assert target.read_text() == "new"


def test_nested_source_keeps_only_basename(tmp_path):
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    source = nested / "deep.dat"
    source.write_text("x")
    qdir = tmp_path / "q"

    target = quarantine_file(source, qdir)

    assert target.name == source.name
    assert target.parent == qdir


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        quarantine_file(tmp_path / "absent", tmp_path / "q")


def test_unreachable_quarantine_dir_raises(tmp_path):
    source = tmp_path / "f"
    source.write_text("x")
    with pytest.raises(FileNotFoundError):
        quarantine_file(source, tmp_path / "missing" / "q")
    assert source.exists()


def test_default_directory_is_quarantine_under_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "suspect.bin"
    source.write_bytes(b"data")

    quarantine_file(source, DEFAULT_QUARANTINE_DIR)

    moved = tmp_path / "quarantine" / "suspect.bin"
    assert moved.read_bytes() == b"data"
    assert not source.exists()