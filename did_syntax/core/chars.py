"""Character classes used by the DID grammar.

Alphabets follow RFC 3986 and the DID syntax ABNF:

    method-char = %x61-7A / DIGIT
    idchar      = ALPHA / DIGIT / "." / "-" / "_" / pct-encoded
    pchar       = unreserved / pct-encoded / sub-delims / ":" / "@"
    query       = *( pchar / "/" / "?" )
    fragment    = *( pchar / "/" / "?" )

Percent signs are not members of any alphabet here; callers check them
with `is_pct_encoded` so that the following two characters are validated.
"""

DIGITS = frozenset("0123456789")
LOWER_ALPHA = frozenset("abcdefghijklmnopqrstuvwxyz")
ALPHA = LOWER_ALPHA | frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
HEX_DIGITS = DIGITS | frozenset("abcdefABCDEF")

UNRESERVED = ALPHA | DIGITS | frozenset("-._~")
SUB_DELIMS = frozenset("!$&'()*+,;=")

METHOD_CHARS = DIGITS | LOWER_ALPHA
ID_CHARS = ALPHA | DIGITS | frozenset(".-_")
PCHARS = UNRESERVED | SUB_DELIMS | frozenset(":@")
PATH_CHARS = PCHARS | frozenset("/")
QUERY_CHARS = PCHARS | frozenset("/?")
FRAGMENT_CHARS = QUERY_CHARS


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_lower_alpha(char: str) -> bool:
    return char in LOWER_ALPHA


def is_alpha(char: str) -> bool:
    return char in ALPHA


def is_hex_digit(char: str) -> bool:
    return char in HEX_DIGITS


def is_method_char(char: str) -> bool:
    """Check for a character allowed in a method name (0-9, a-z)."""
    return char in METHOD_CHARS


def is_id_char(char: str) -> bool:
    """Check for a character allowed in a single idstring."""
    return char in ID_CHARS


def is_path_char(char: str) -> bool:
    return char in PATH_CHARS


def is_query_char(char: str) -> bool:
    """Check for a character allowed in a query or fragment."""
    return char in QUERY_CHARS


def is_pct_encoded(text: str, index: int) -> bool:
    """Check for a percent-encoding triple starting at `index`.

    The character at `index` must be `%`, followed by exactly two hex digits.
    """
    return (
        text[index : index + 1] == "%"
        and len(text) >= index + 3
        and is_hex_digit(text[index + 1])
        and is_hex_digit(text[index + 2])
    )
