import pytest

from sentinelscan.scanner import scan_file_signature, sha256_file
from sentinelscan.update import SignatureDatabase


def test_sha256_of_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert (
        sha256_file(path)
        == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha256_of_abc(tmp_path):
    path = tmp_path / "abc.txt"
    path.write_bytes(b"abc")
    assert (
        sha256_file(path)
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha256_is_stable_for_large_file(tmp_path):
    first = tmp_path / "one.bin"
    second = tmp_path / "two.bin"
    payload = bytes(range(256)) * 1000
    first.write_bytes(payload)
    second.write_bytes(payload)
    digest = sha256_file(first)
    assert digest == sha256_file(second)
    assert len(digest) == 64
    assert digest == digest.lower()


def test_sha256_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        sha256_file(tmp_path / "missing")


def test_scan_matches_known_digest(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"known sample")
    assert scan_file_signature(path, {sha256_file(path)}) is True


def test_scan_clean_with_empty_database(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"known sample")
    assert scan_file_signature(path, set()) is False


def test_scan_against_loaded_database(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"feed sample")
    db = SignatureDatabase()
    db.load_text(f"{sha256_file(path).upper()};test entry\n")
    assert scan_file_signature(path, db) is True


def test_scan_does_not_match_other_file(tmp_path):
    infected = tmp_path / "bad.bin"
    clean = tmp_path / "good.bin"
    infected.write_bytes(b"bad")
    clean.write_bytes(b"good")
    assert scan_file_signature(clean, [sha256_file(infected)]) is False


def test_scan_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_file_signature(tmp_path / "missing", set())