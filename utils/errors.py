"""Tracker exceptions.

Both failure kinds are recovered where they are caught: a missing quote turns
the cycle into an error display, a corrupt ledger loads as empty.
"""


class TrackerError(Exception):
    """Base exception for all tracker errors."""


class DataUnavailable(TrackerError):
    """Raised when a quote or historical fetch fails or returns an unexpected shape."""


class PersistenceCorrupt(TrackerError):
    """Raised when the stored highs ledger cannot be parsed."""
