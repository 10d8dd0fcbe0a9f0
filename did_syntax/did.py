"""DID and DID URL parsing and serialization."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .const import (
    FRAGMENT_DELIMITER,
    ID_SEPARATOR,
    METHOD_SEPARATOR,
    MIN_LENGTH,
    PATH_SEPARATOR,
    PCT_ENCODED_COLON,
    QUERY_DELIMITER,
    SCHEME_PREFIX,
)
from .core import chars

logger = logging.getLogger(__name__)


class MalformedInput(ValueError):
    """A string which does not follow the DID URL syntax."""

    section: str
    input: str
    index: int

    def __init__(self, message: str, *, section: str, input: str, index: int):
        super().__init__(message)
        self.message = message
        self.section = section
        self.input = input
        self.index = index

    @property
    def snippet(self) -> str:
        """Access the input text starting at the failure position."""
        return self.input[self.index :]

    def __str__(self) -> str:
        return (
            f"Invalid DID URL {self.section}: {self.message} (at index {self.index})"
        )


@dataclass
class ParsedDID:
    """A DID or DID URL as defined by Decentralized Identifiers 1.0.

    `id` and `path` are authoritative. `id_strings` and `path_segments` are
    only used to derive them when they are empty.
    """

    method: str = ""
    id: str = ""
    id_strings: list[str] = field(default_factory=list)
    path: str = ""
    path_segments: list[str] = field(default_factory=list)
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, url: str) -> "ParsedDID":
        """Parse a string as a DID or DID URL.

        Raises:
            MalformedInput: on invalid inputs
            TypeError: if the input is not a string

        """
        if not isinstance(url, str):
            raise TypeError(f"Expected a DID URL string, got {type(url).__name__}")
        return cls(**_Scanner(url).scan())

    @property
    def identifier(self) -> str:
        """Access the method-specific ID, derived from `id_strings` if necessary."""
        if self.id:
            return self.id
        return PCT_ENCODED_COLON.join(self.id_strings)

    @property
    def resolved_path(self) -> str:
        """Access the path, derived from `path_segments` if necessary."""
        if self.path:
            return self.path
        return PATH_SEPARATOR.join(self.path_segments)

    @property
    def root(self) -> "ParsedDID":
        """Access this DID URL without any path, fragment, or query."""
        return ParsedDID(method=self.method, id=self.identifier)

    @property
    def did(self) -> str:
        """Access the root DID string for this DID URL."""
        return str(self.root)

    def is_url(self) -> bool:
        """Check whether any DID URL component beyond the bare DID is set."""
        return bool(self.path or self.path_segments or self.query or self.fragment)

    def __str__(self) -> str:
        """Assemble the canonical string, or an empty string if incomplete."""
        if not self.method:
            return ""
        identifier = self.identifier
        if not identifier:
            return ""
        result = f"{SCHEME_PREFIX}{self.method}{METHOD_SEPARATOR}{identifier}"
        if path := self.resolved_path:
            result += PATH_SEPARATOR + path
        if self.query:
            result += QUERY_DELIMITER + self.query
        if self.fragment:
            result += FRAGMENT_DELIMITER + self.fragment
        return result


class _Scanner:
    """Single-pass cursor over a DID URL string."""

    ID_ALLOWED = chars.ID_CHARS | {ID_SEPARATOR}
    ID_STOPS = PATH_SEPARATOR + QUERY_DELIMITER + FRAGMENT_DELIMITER
    PATH_STOPS = QUERY_DELIMITER + FRAGMENT_DELIMITER
    QUERY_STOPS = FRAGMENT_DELIMITER

    def __init__(self, url: str):
        self.url = url
        self.index = 0

    def error(
        self, section: str, message: str, index: Optional[int] = None
    ) -> MalformedInput:
        if index is None:
            index = self.index
        logger.debug("Rejected DID URL %r: %s at index %d", self.url, section, index)
        return MalformedInput(message, section=section, input=self.url, index=index)

    def peek(self) -> Optional[str]:
        if self.index < len(self.url):
            return self.url[self.index]
        return None

    def scan(self) -> dict:
        url = self.url
        if len(url) < MIN_LENGTH:
            raise self.error("did", f"input is shorter than {MIN_LENGTH} characters")
        if not url.startswith(SCHEME_PREFIX):
            raise self.error("did", f"input does not begin with '{SCHEME_PREFIX}'")
        self.index = len(SCHEME_PREFIX)

        result = {"method": self.scan_method()}

        start = self.index
        ident = self.scan_section("id", self.ID_ALLOWED, self.ID_STOPS)
        id_strings = ident.split(ID_SEPARATOR)
        offset = start
        for part in id_strings:
            if not part:
                raise self.error(
                    "id", "idstring must be at least one character", offset
                )
            offset += len(part) + 1
        result["id"] = ident
        result["id_strings"] = id_strings

        if self.peek() == PATH_SEPARATOR:
            self.index += 1
            start = self.index
            path = self.scan_section("path", chars.PATH_CHARS, self.PATH_STOPS)
            segments = path.split(PATH_SEPARATOR)
            if not segments[0]:
                raise self.error(
                    "path", "first path segment must not be empty", start
                )
            result["path"] = path
            result["path_segments"] = segments

        if self.peek() == QUERY_DELIMITER:
            self.index += 1
            query = self.scan_section("query", chars.QUERY_CHARS, self.QUERY_STOPS)
            if not query:
                raise self.error("query", "query must not be empty")
            result["query"] = query

        if self.peek() == FRAGMENT_DELIMITER:
            self.index += 1
            fragment = self.scan_section("fragment", chars.FRAGMENT_CHARS, "")
            if not fragment:
                raise self.error("fragment", "fragment must not be empty")
            result["fragment"] = fragment

        return result

    def scan_method(self) -> str:
        start = self.index
        while (char := self.peek()) != METHOD_SEPARATOR:
            if char is None:
                raise self.error("method", "missing ':' after the method name")
            if not chars.is_method_char(char):
                raise self.error("method", f"character {char!r} is not a-z or 0-9")
            self.index += 1
        if self.index == start:
            raise self.error("method", "method name is empty")
        method = self.url[start : self.index]
        self.index += 1
        return method

    def scan_section(self, section: str, allowed: frozenset, stops: str) -> str:
        start = self.index
        while (char := self.peek()) is not None and char not in stops:
            if char == "%":
                if not chars.is_pct_encoded(self.url, self.index):
                    raise self.error(section, "'%' must be followed by two hex digits")
                self.index += 3
                continue
            if char not in allowed:
                raise self.error(section, f"character {char!r} is not allowed")
            self.index += 1
        return self.url[start : self.index]


def parse(url: str) -> ParsedDID:
    """Parse a string as a DID or DID URL.

    Raises:
        MalformedInput: on invalid inputs

    """
    return ParsedDID.parse(url)
