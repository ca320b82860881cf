"""
Error types raised by the brand matching engine.
"""


class InvalidInputError(ValueError):
    """Connection records are missing, empty or malformed.

    Raised while building the brand graph. Without a graph nothing can be
    matched, so the whole session is aborted.
    """


class InvalidRecordError(ValueError):
    """A single product record lacks a required field (e.g. title)."""
