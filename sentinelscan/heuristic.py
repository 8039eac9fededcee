"""Entropy-based detection of packed or encrypted files."""

from __future__ import annotations

import logging
import math
import os
from collections import Counter
from pathlib import Path

log = logging.getLogger(__name__)

ENTROPY_THRESHOLD = 7.5


def shannon_entropy(data: bytes) -> float:
    """Return the Shannon entropy of *data* in bits per byte."""
    size = len(data)
    if size == 0:
        return 0.0
    return 0.0 - sum(
        (count / size) * math.log2(count / size) for count in Counter(data).values()
    )


def analyze_file_entropy(
    filepath: str | os.PathLike, threshold: float = ENTROPY_THRESHOLD
) -> bool:
    """Return True if the file's entropy is above *threshold*.

    Empty files are never flagged. Raises OSError if the file cannot be read.
    """
    data = Path(filepath).read_bytes()
    if not data:
        return False
    entropy = shannon_entropy(data)
    log.info("[Heuristic] Entropy for %s: %.2f", filepath, entropy)
    if entropy > threshold:
        log.info(
            "[Heuristic] File %s flagged as suspicious due to high entropy.", filepath
        )
        return True
    return False