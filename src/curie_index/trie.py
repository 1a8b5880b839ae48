"""A byte-level prefix trie over URI prefixes, built on :mod:`pytrie`."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytrie

__all__ = ["URIPrefixTrie", "encode_key"]

logger = logging.getLogger(__name__)


def encode_key(key: str | bytes) -> bytes:
    """Encode a string as UTF-8 trie key bytes.

    Lone surrogates are passed through, so encoding never fails. Keys containing
    them can't be decoded again and are treated as no match on lookup.
    """
    if isinstance(key, str):
        return key.encode("utf-8", errors="surrogatepass")
    return key


class URIPrefixTrie(pytrie.Trie):
    """A trie whose keys are the UTF-8 encoded bytes of URI prefixes.

    It answers the question "which registered URI prefixes are a prefix of
    this URI?" by walking the URI once, so the cost is bounded by the length
    of the URI rather than the number of registered URI prefixes.

    >>> trie = URIPrefixTrie()
    >>> trie.add("http://purl.obolibrary.org/obo/")
    >>> trie.add("http://purl.obolibrary.org/obo/DOID_")
    >>> list(trie.iter_matches("http://purl.obolibrary.org/obo/DOID_1234"))
    ['http://purl.obolibrary.org/obo/', 'http://purl.obolibrary.org/obo/DOID_']
    >>> trie.longest_match("http://purl.obolibrary.org/obo/DOID_1234")
    'http://purl.obolibrary.org/obo/DOID_'
    >>> trie.longest_match("ftp://unrelated")
    """

    KeyFactory = bytes

    def add(self, uri_prefix: str | bytes) -> None:
        """Register a URI prefix. Adding the same URI prefix twice is a no-op."""
        self[encode_key(uri_prefix)] = None

    def iter_matches(self, uri: str) -> Iterator[str]:
        """Iterate over the registered URI prefixes that are a prefix of the URI, shortest first.

        Entries that can't be decoded as UTF-8 are skipped.
        """
        for key in self.iter_prefixes(encode_key(uri)):
            try:
                yield key.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("skipping undecodable trie entry: %r", key)

    def longest_match(self, uri: str) -> str | None:
        """Get the longest registered URI prefix that is a prefix of the URI.

        :param uri: A URI
        :returns: The longest matching URI prefix, or none if no registered
            URI prefix matches or if the longest match can't be decoded.
        """
        longest: bytes | None = None
        # prefixes come out of the trie in order of increasing length
        for key in self.iter_prefixes(encode_key(uri)):
            longest = key
        if longest is None:
            return None
        try:
            return longest.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("longest trie match is undecodable: %r", longest)
            return None

    def __contains__(self, key: Any) -> bool:
        if not isinstance(key, (str, bytes)):
            return False
        return super().__contains__(encode_key(key))
