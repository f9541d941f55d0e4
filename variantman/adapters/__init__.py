"""Variantman adapters."""

from variantman.adapters.noop import NoopCartBackend
from variantman.adapters.signal import SignalCartBackend

__all__ = [
    "NoopCartBackend",
    "SignalCartBackend",
]
