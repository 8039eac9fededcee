"""Capture a handful of packets from a network interface."""

from __future__ import annotations

import contextlib
import logging
import socket

log = logging.getLogger(__name__)

ETH_P_ALL = 0x0003
SNAPLEN = 65535


def start_network_monitor(
    device: str = "lo",
    max_packets: int = 5,
    max_timeouts: int = 5,
    timeout_seconds: float = 1.0,
) -> list[int]:
    """Capture packets on *device* and return their lengths.

    Capture stops after *max_packets* packets, after *max_timeouts* reads
    that time out, or at the first read error. Raises OSError if the
    device cannot be opened.
    """
    family = getattr(socket, "AF_PACKET", None)
    if family is None:
        raise OSError("packet capture is not supported on this platform")
    sock = socket.socket(family, socket.SOCK_RAW, socket.htons(ETH_P_ALL))
    with contextlib.closing(sock):
        sock.settimeout(timeout_seconds)
        sock.bind((device, 0))
        log.info("[Network Monitor] Monitoring device: %s", device)
        lengths: list[int] = []
        timeouts = 0
        while len(lengths) < max_packets and timeouts < max_timeouts:
            try:
                packet = sock.recv(SNAPLEN)
            except socket.timeout:
                timeouts += 1
                continue
            except OSError as exc:
                log.warning("[Network Monitor] Capture stopped: %s", exc)
                break
            log.info("[Network Monitor] Captured packet of length: %d", len(packet))
            lengths.append(len(packet))
    return lengths