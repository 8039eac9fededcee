"""Signature-based detection using SHA-256 digests."""

from __future__ import annotations

import hashlib
import logging
import os
from collections.abc import Container
from functools import partial

log = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def sha256_file(filepath: str | os.PathLike) -> str:
    """Return the lower-case hex SHA-256 digest of the file's contents.

    Raises OSError if the file cannot be read.
    """
    digest = hashlib.sha256()
    with open(filepath, "rb") as handle:
        for chunk in iter(partial(handle.read, _CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def scan_file_signature(
    filepath: str | os.PathLike, signatures: Container[str]
) -> bool:
    """Return True if the file's SHA-256 digest is among *signatures*.

    Raises OSError if the file cannot be read.
    """
    digest = sha256_file(filepath)
    log.info("[Scanner] Computed SHA-256 for %s: %s", filepath, digest)
    if digest in signatures:
        log.info(
            "[Scanner] File %s is infected! Matched signature: %s", filepath, digest
        )
        return True
    log.info("[Scanner] File %s appears clean.", filepath)
    return False