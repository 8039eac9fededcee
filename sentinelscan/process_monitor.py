"""Inspect running processes through a /proc file system."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

PROC_ROOT = "/proc"
SUSPICIOUS_PREFIXES = ("/tmp", "/var/tmp", "/dev/shm")
_LINE_LIMIT = 255


@dataclass(frozen=True)
class ProcessInfo:
    """A running process: its id and command name."""

    pid: int
    name: str


def _is_pid(name: str) -> bool:
    return name.isascii() and name.isdigit()


def _read_first_line(path: Path) -> str | None:
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            line = handle.readline(_LINE_LIMIT)
    except OSError:
        return None
    if not line:
        return None
    return line.split("\n", 1)[0]


def _process_dirs(root: Path) -> Iterator[tuple[str, str]]:
    with os.scandir(root) as entries:
        names = sorted((e.name for e in entries if _is_pid(e.name)), key=int)
    for name in names:
        comm = _read_first_line(root / name / "comm")
        if comm is not None:
            yield name, comm


def iter_processes(proc_root: str | os.PathLike = PROC_ROOT) -> Iterator[ProcessInfo]:
    """Yield every process whose command name can be read, by ascending pid.

    Raises OSError if *proc_root* cannot be listed.
    """
    for name, comm in _process_dirs(Path(proc_root)):
        yield ProcessInfo(int(name), comm)


def list_processes(proc_root: str | os.PathLike = PROC_ROOT) -> list[ProcessInfo]:
    """Return and log the running processes."""
    processes = list(iter_processes(proc_root))
    log.info("[Process Monitor] Listing processes:")
    for proc in processes:
        log.info("  PID: %d  Name: %s", proc.pid, proc.name)
    return processes


def check_suspicious_process(
    process_name: str, proc_root: str | os.PathLike = PROC_ROOT
) -> bool:
    """Return True if a process named *process_name* looks suspicious.

    A process is suspicious when its executable lies in a temporary
    directory or cannot be resolved at all.
    """
    root = Path(proc_root)
    suspicious = False
    for pid, name in _process_dirs(root):
        if name != process_name:
            continue
        try:
            target = os.readlink(root / pid / "exe")
        except OSError:
            log.info("[Process Monitor] Unable to resolve executable for PID %s.", pid)
            suspicious = True
            continue
        if target.startswith(SUSPICIOUS_PREFIXES):
            log.info(
                "[Process Monitor] Process %s (PID %s) running from suspicious "
                "directory: %s",
                name,
                pid,
                target,
            )
            suspicious = True
    if suspicious:
        log.info("[Process Monitor] Suspicious process detected: %s", process_name)
    else:
        log.info("[Process Monitor] No suspicious instances of %s found.", process_name)
    return suspicious