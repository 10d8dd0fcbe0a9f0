"""Parsing and serialization of DIDs and DID URLs."""

from .did import MalformedInput, ParsedDID, parse

__all__ = ["MalformedInput", "ParsedDID", "parse"]
