"""Signature and entropy based file scanning, quarantine and simple system monitors."""

__version__ = "0.1.0"