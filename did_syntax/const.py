"""Grammar constants for DID and DID URL strings."""

SCHEME_PREFIX = "did:"

# did:x:y
MIN_LENGTH = 7

METHOD_SEPARATOR = ":"
ID_SEPARATOR = ":"
PATH_SEPARATOR = "/"
QUERY_DELIMITER = "?"
FRAGMENT_DELIMITER = "#"

PCT_ENCODED_COLON = "%3A"
