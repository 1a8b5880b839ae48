"""Utilities for working with CURIE strings."""

from __future__ import annotations

__all__ = [
    "ExtraCURIEDelimiterError",
    "MalformedCURIEError",
    "NoCURIEDelimiterError",
    "split_curie",
]


class MalformedCURIEError(ValueError):
    """An error thrown on a string that can't be split into a prefix and identifier."""

    def __init__(self, curie: str, sep: str = ":"):
        """Initialize the error."""
        self.curie = curie
        self.sep = sep


class NoCURIEDelimiterError(MalformedCURIEError):
    """An error thrown on a string with no delimiter."""

    def __str__(self) -> str:
        return f"{self.curie} does not appear to be a CURIE - missing a delimiter"


class ExtraCURIEDelimiterError(MalformedCURIEError):
    """An error thrown on a string with more than one delimiter."""

    def __str__(self) -> str:
        return (
            f"{self.curie} does not appear to be a CURIE - "
            f"contains {self.curie.count(self.sep)} delimiters, expected 1"
        )


def split_curie(curie: str, *, sep: str = ":") -> tuple[str, str]:
    """Split a CURIE string into a prefix and local unique identifier.

    :param curie: A string representation of a compact URI (CURIE)
    :param sep: The delimiter between the prefix and identifier
    :returns: A pair of the prefix and identifier
    :raises NoCURIEDelimiterError: if the delimiter doesn't appear
    :raises ExtraCURIEDelimiterError: if the delimiter appears more than once,
        since local unique identifiers containing the delimiter can't be
        distinguished from a malformed prefix

    >>> split_curie("doid:1234")
    ('doid', '1234')
    >>> split_curie("doid:")
    ('doid', '')
    """
    parts = curie.split(sep)
    if len(parts) == 1:
        raise NoCURIEDelimiterError(curie, sep)
    if len(parts) > 2:
        raise ExtraCURIEDelimiterError(curie, sep)
    prefix, identifier = parts
    return prefix, identifier
