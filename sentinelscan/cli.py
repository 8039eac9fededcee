"""Command-line entry point: scan a file and run the monitors."""

from __future__ import annotations

import logging
import os
import sys
import threading
import time
from collections.abc import Container
from pathlib import Path

from .heuristic import analyze_file_entropy
from .network_monitor import start_network_monitor
from .process_monitor import check_suspicious_process, list_processes
from .quarantine import DEFAULT_QUARANTINE_DIR, quarantine_file
from .realtime import monitor_directory
from .scanner import scan_file_signature
from .update import SignatureDatabase

PROG = "sentinelscan"
FEED_URL_ENV = "SENTINELSCAN_FEED_URL"
DUMMY_FILE = "dummy_test.txt"
WATCHED_DIR = "./"
SUSPECT_PROCESS = "malicious_process"
NETWORK_DEVICE = "lo"
RANDOM_FILE_SIZE = 1024


def write_random_file(path: str | os.PathLike = "malware.bin", size: int = RANDOM_FILE_SIZE) -> Path:
    """Write *size* random bytes to *path* and return the path."""
    target = Path(path)
    target.write_bytes(os.urandom(size))
    return target


def _load_signatures() -> SignatureDatabase:
    db = SignatureDatabase(os.environ.get(FEED_URL_ENV) or None)
    db.update()
    return db


def _signature_check(path: str | os.PathLike, signatures: Container[str]) -> bool:
    try:
        return scan_file_signature(path, signatures)
    except OSError as exc:
        print(f"[Scanner] Cannot read {path}: {exc}", file=sys.stderr)
        return False


def _entropy_check(path: str | os.PathLike) -> bool:
    try:
        return analyze_file_entropy(path)
    except OSError as exc:
        print(f"[Heuristic] Cannot read {path}: {exc}", file=sys.stderr)
        return False


def _quarantine(path: str | os.PathLike) -> None:
    try:
        quarantine_file(path, DEFAULT_QUARANTINE_DIR)
    except OSError as exc:
        print(f"[Quarantine] rename: {exc}", file=sys.stderr)


def _watch(directory: str, signatures: Container[str]) -> None:
    try:
        monitor_directory(directory, signatures, DEFAULT_QUARANTINE_DIR)
    except OSError as exc:
        print(f"[Realtime] Cannot watch {directory}: {exc}", file=sys.stderr)


def _start_realtime(signatures: Container[str]) -> threading.Thread:
    thread = threading.Thread(target=_watch, args=(WATCHED_DIR, signatures), daemon=True)
    thread.start()
    return thread


def _check_processes() -> None:
    try:
        list_processes()
        check_suspicious_process(SUSPECT_PROCESS)
    except OSError as exc:
        print(f"[Process Monitor] Cannot read processes: {exc}", file=sys.stderr)


def _monitor_network() -> None:
    try:
        start_network_monitor(NETWORK_DEVICE)
    except OSError as exc:
        print(
            f"[Network Monitor] Unable to open device {NETWORK_DEVICE}: {exc}",
            file=sys.stderr,
        )


def run_tests() -> None:
    """Exercise every component once against a dummy file and the host."""
    print("Running dummy test cases...")
    signatures = _load_signatures()

    dummy = Path(DUMMY_FILE)
    try:
        dummy.write_text("This is a dummy file for testing antivirus functionalities.\n")
    except OSError as exc:
        print(f"Cannot create {dummy}: {exc}", file=sys.stderr)
        return

    print(f"\n[Test] Running signature-based scanning on {dummy}...")
    scan_result = _signature_check(dummy, signatures)
    print(f"\n[Test] Running heuristic analysis on {dummy}...")
    heuristic_result = _entropy_check(dummy)

    if scan_result or heuristic_result:
        print(f"\n[Test] Quarantining {dummy}...")
        _quarantine(dummy)
        quarantined = Path(DEFAULT_QUARANTINE_DIR) / dummy.name
        if quarantined.exists():
            print(f"[Test] Quarantine success: {quarantined} exists.")
            quarantined.unlink()
        else:
            print(f"[Test] Quarantine failed: {quarantined} not found.")
    else:
        print(f"\n[Test] {dummy} is clean. No quarantine needed.")
        dummy.unlink()

    print("\n[Test] Starting realtime directory monitoring on current directory...")
    thread = _start_realtime(signatures)
    time.sleep(3)

    print("\n[Test] Listing processes and checking for a suspicious process...")
    _check_processes()

    print(f"\n[Test] Starting network monitoring on device '{NETWORK_DEVICE}'...")
    _monitor_network()

    thread.join()
    print("\nAll tests completed.")


def main(argv: list[str] | None = None) -> int:
    """Scan one file, quarantine it if infected, then run the monitors."""
    args = sys.argv[1:] if argv is None else list(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args == ["test"]:
        run_tests()
        return 0

    signatures = _load_signatures()
    if not args:
        print(f"Usage: {PROG} <file_to_scan> OR {PROG} test")
        return 1

    filepath = args[0]
    sig_result = _signature_check(filepath, signatures)
    heur_result = _entropy_check(filepath)
    if sig_result or heur_result:
        _quarantine(filepath)
        print(f"[Main] Malware detected in {filepath}! File quarantined.")
    else:
        print(f"[Main] File {filepath} appears to be clean.")

    thread = _start_realtime(signatures)
    _check_processes()
    _monitor_network()
    thread.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())