"""Download and hold the SHA-256 signature database."""

from __future__ import annotations

import logging
import string
import urllib.request
from collections.abc import Callable, Iterator

log = logging.getLogger(__name__)

SIGNATURE_LENGTH = 64
FALLBACK_FEED = "d41d8cd98f00b204e9800998ecf8427e;dummy"
DEFAULT_TIMEOUT = 30.0

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def parse_signature_feed(text: str) -> list[str]:
    """Extract signatures from a feed of ``HASH;description`` lines.

    Only fields exactly 64 characters long are kept, lower-cased.
    """
    signatures = []
    for line in text.split("\n"):
        if not line:
            continue
        digest = line.split(";", 1)[0]
        if len(digest) == SIGNATURE_LENGTH:
            signatures.append(digest.translate(_ASCII_LOWER))
    return signatures


def fetch_feed(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download the feed at *url* and return it as text."""
    with urllib.request.urlopen(url, timeout=timeout) as response:
        return response.read().decode("latin-1")


class SignatureDatabase:
    """A set of known-malware SHA-256 digests, kept in load order."""

    def __init__(self, feed_url: str | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.feed_url = feed_url
        self.timeout = timeout
        self._signatures: list[str] = []
        self._lookup: frozenset[str] = frozenset()

    def load_text(self, text: str) -> int:
        """Replace the database with the signatures in *text*; return the count."""
        self._signatures = parse_signature_feed(text)
        self._lookup = frozenset(self._signatures)
        for signature in self._signatures:
            log.debug("[Update] Loaded signature: %s", signature)
        if not self._signatures:
            log.warning("[Update] No valid signatures loaded.")
        return len(self._signatures)

    def update(self, fetch: Callable[[], str] | None = None) -> int:
        """Refresh the database from *fetch* or the configured feed URL.

        If the download fails, a minimal built-in feed is used instead.
        Returns the number of signatures loaded.
        """
        try:
            if fetch is not None:
                text = fetch()
            elif self.feed_url is None:
                raise ValueError("no signature feed configured")
            else:
                text = fetch_feed(self.feed_url, self.timeout)
        except (OSError, ValueError) as exc:
            log.warning("[Update] Signature download failed: %s", exc)
            text = FALLBACK_FEED
        log.info("[Update] Received signature data (%d bytes)", len(text))
        return self.load_text(text)

    def __contains__(self, digest: object) -> bool:
        return digest in self._lookup

    def __len__(self) -> int:
        return len(self._signatures)

    def __iter__(self) -> Iterator[str]:
        return iter(self._signatures)