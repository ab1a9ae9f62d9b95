"""Exceptions raised by the search server."""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class InvalidArgument(SearchServerError, ValueError):
    """Bad document id, malformed word or query token, zero page size."""


class OutOfRange(SearchServerError, IndexError):
    """Positional or id lookup outside of the indexed documents."""
