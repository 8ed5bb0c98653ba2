"""treefind — find-like file walker with metadata filters and per-match exec."""

__version__ = "0.1.0"


class TreefindError(Exception):
    """User-facing CLI error.

    Raised for malformed flag values, unknown flags, and flags missing
    their value. Always raised before traversal starts; the message
    is printed to stderr and the process exits with code 1.
    """
