"""Character-level building blocks for the DID grammar."""

from . import chars

__all__ = ["chars"]
