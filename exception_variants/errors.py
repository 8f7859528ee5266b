"""Synthetic error types raised by the benchmark variants."""
from __future__ import annotations


class IntentionalError(Exception):
    """Failure signal injected on every failure-case iteration."""


class WrappedError(Exception):
    """Raised by the rethrow variant, chained to the original IntentionalError."""
