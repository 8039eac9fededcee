"""Move suspicious files out of the way."""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

DEFAULT_QUARANTINE_DIR = "./quarantine"


def quarantine_file(
    filepath: str | os.PathLike,
    quarantine_dir: str | os.PathLike = DEFAULT_QUARANTINE_DIR,
) -> Path:
    """Move *filepath* into *quarantine_dir* and return its new path.

    The directory is created with mode 0700 if missing. Raises OSError if
    the file cannot be moved.
    """
    directory = Path(quarantine_dir)
    with contextlib.suppress(OSError):
        directory.mkdir(mode=0o700)
    target = directory / Path(filepath).name
    os.rename(filepath, target)
    log.info("[Quarantine] Moved %s to quarantine directory (%s).", filepath, target)
    return target