"""Bidirectional conversion between URIs and compact URIs (CURIEs) using a prefix trie."""

from .api import (
    CompressionError,
    ConversionError,
    Converter,
    DuplicateRecordError,
    ExpansionError,
    Record,
    Records,
    ReferenceTuple,
)
from .trie import URIPrefixTrie
from .utils import (
    ExtraCURIEDelimiterError,
    MalformedCURIEError,
    NoCURIEDelimiterError,
    split_curie,
)
from .version import get_version

__all__ = [
    "Converter",
    "Record",
    "Records",
    "ReferenceTuple",
    "URIPrefixTrie",
    "get_version",
    "split_curie",
    # errors
    "DuplicateRecordError",
    "ConversionError",
    "CompressionError",
    "ExpansionError",
    "MalformedCURIEError",
    "NoCURIEDelimiterError",
    "ExtraCURIEDelimiterError",
]
