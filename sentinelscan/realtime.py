"""Watch a directory for changes and scan new or modified files."""

from __future__ import annotations

import enum
import logging
import os
import stat
import time
from collections.abc import Container
from dataclasses import dataclass
from typing import NamedTuple

from .heuristic import analyze_file_entropy
from .quarantine import DEFAULT_QUARANTINE_DIR, quarantine_file
from .scanner import scan_file_signature

log = logging.getLogger(__name__)


class EventKind(enum.Enum):
    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True)
class DirectoryEvent:
    """A change to one entry of a watched directory."""

    kind: EventKind
    name: str
    is_dir: bool = False


class _EntryState(NamedTuple):
    is_dir: bool
    mtime_ns: int
    size: int


def snapshot(directory: str | os.PathLike) -> dict[str, _EntryState]:
    """Record the state of every entry directly inside *directory*."""
    state: dict[str, _EntryState] = {}
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                info = entry.stat(follow_symlinks=False)
            except FileNotFoundError:
                continue
            state[entry.name] = _EntryState(
                stat.S_ISDIR(info.st_mode), info.st_mtime_ns, info.st_size
            )
    return state


def diff_snapshots(
    before: dict[str, _EntryState], after: dict[str, _EntryState]
) -> list[DirectoryEvent]:
    """Return the events that turn *before* into *after*, ordered by name."""
    events: list[DirectoryEvent] = []
    for name in sorted(before.keys() | after.keys()):
        old = before.get(name)
        new = after.get(name)
        if old is None:
            events.append(DirectoryEvent(EventKind.CREATED, name, new.is_dir))
        elif new is None:
            events.append(DirectoryEvent(EventKind.DELETED, name, old.is_dir))
        elif old.is_dir != new.is_dir:
            events.append(DirectoryEvent(EventKind.DELETED, name, old.is_dir))
            events.append(DirectoryEvent(EventKind.CREATED, name, new.is_dir))
        elif not new.is_dir and old != new:
            events.append(DirectoryEvent(EventKind.MODIFIED, name, False))
    return events


def _inspect(
    filepath: str, signatures: Container[str], quarantine_dir: str | os.PathLike
) -> None:
    try:
        infected = scan_file_signature(filepath, signatures)
        heuristic = analyze_file_entropy(filepath)
    except OSError as exc:
        log.warning("[Realtime] Cannot scan %s: %s", filepath, exc)
        return
    if infected or heuristic:
        try:
            quarantine_file(filepath, quarantine_dir)
        except OSError as exc:
            log.warning("[Realtime] Cannot quarantine %s: %s", filepath, exc)


def monitor_directory(
    directory: str | os.PathLike,
    signatures: Container[str],
    quarantine_dir: str | os.PathLike = DEFAULT_QUARANTINE_DIR,
    max_events: int = 10,
    max_idle_cycles: int = 5,
    interval: float = 1.0,
) -> list[DirectoryEvent]:
    """Watch *directory*, scanning created and modified files.

    Infected files are moved to *quarantine_dir*. Watching ends once
    *max_events* events have been handled or after *max_idle_cycles*
    polls without change. Returns the handled events. Raises OSError if
    the directory cannot be watched.
    """
    previous = snapshot(directory)
    log.info("[Realtime] Monitoring directory: %s", directory)
    handled: list[DirectoryEvent] = []
    idle_cycles = 0
    while len(handled) < max_events and idle_cycles < max_idle_cycles:
        try:
            current = snapshot(directory)
        except OSError as exc:
            log.warning("[Realtime] Watch ended: %s", exc)
            break
        events = diff_snapshots(previous, current)
        previous = current
        if not events:
            idle_cycles += 1
            time.sleep(interval)
            continue
        for event in events:
            log.info("[Realtime] File %s %s.", event.name, event.kind.value)
            if not event.is_dir and event.kind in (EventKind.CREATED, EventKind.MODIFIED):
                _inspect(os.path.join(directory, event.name), signatures, quarantine_dir)
            handled.append(event)
    return handled