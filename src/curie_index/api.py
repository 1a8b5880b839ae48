"""Data structures and algorithms for :mod:`curie_index`."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Collection, Iterable, Iterator, Mapping
from typing import Any, Literal, NamedTuple, overload

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationInfo,
    field_validator,
)
from typing_extensions import Self

from .trie import URIPrefixTrie, encode_key
from .utils import MalformedCURIEError, split_curie

__all__ = [
    "CompressionError",
    "ConversionError",
    "Converter",
    "DuplicateRecordError",
    "ExpansionError",
    "Record",
    "Records",
    "ReferenceTuple",
]

logger = logging.getLogger(__name__)


class ReferenceTuple(NamedTuple):
    """A pair of a prefix and a local unique identifier in that prefix's semantic space.

    >>> ReferenceTuple("doid", "1234")
    ReferenceTuple(prefix='doid', identifier='1234')
    >>> ReferenceTuple.from_curie("doid:1234")
    ReferenceTuple(prefix='doid', identifier='1234')
    >>> ReferenceTuple("doid", "1234").curie
    'doid:1234'
    """

    prefix: str
    identifier: str

    @property
    def curie(self) -> str:
        """Get the reference as a CURIE string."""
        return f"{self.prefix}:{self.identifier}"

    @classmethod
    def from_curie(cls, curie: str, *, sep: str = ":") -> Self:
        """Parse a CURIE string and populate a reference tuple.

        :param curie: A string representation of a compact URI (CURIE)
        :param sep: The separator
        :return: A reference tuple
        :raises MalformedCURIEError: if the CURIE doesn't contain exactly one separator
        """
        prefix, identifier = split_curie(curie, sep=sep)
        return cls(prefix, identifier)


def _check_utf8(uri_prefix: str) -> None:
    try:
        uri_prefix.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError(f"URI prefix {uri_prefix!r} can't be encoded as UTF-8") from None

class Record(BaseModel):
    """A record of a prefix, its URI prefix, and the synonyms of each.

    Records are frozen: their synonym sets are fixed at construction and
    they can be shared by every index entry of a :class:`Converter`.

    >>> record = Record(
    ...     prefix="doid",
    ...     uri_prefix="http://purl.obolibrary.org/obo/DOID_",
    ...     prefix_synonyms={"DOID"},
    ...     uri_prefix_synonyms={"https://identifiers.org/DOID/"},
    ... )
    >>> record.all_prefixes
    ['doid', 'DOID']
    """

    prefix: str = Field(
        ...,
        title="CURIE prefix",
        description="The canonical CURIE prefix, used when compressing",
    )
    uri_prefix: str = Field(
        ...,
        title="URI prefix",
        description="The canonical URI prefix, used when expanding",
    )
    prefix_synonyms: frozenset[str] = Field(
        default_factory=frozenset, title="CURIE prefix synonyms"
    )
    uri_prefix_synonyms: frozenset[str] = Field(
        default_factory=frozenset, title="URI prefix synonyms"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("uri_prefix")
    @classmethod
    def uri_prefix_is_utf8(cls, v: str) -> str:
        """Check that the canonical URI prefix can be encoded as UTF-8."""
        _check_utf8(v)
        return v

    @field_validator("prefix_synonyms")
    @classmethod
    def prefix_not_in_synonyms(cls, v: frozenset[str], info: ValidationInfo) -> frozenset[str]:
        """Check that the canonical prefix does not appear in the prefix synonyms."""
        prefix = info.data.get("prefix")
        if prefix in v:
            raise ValueError(f"Duplicate of canonical prefix `{prefix}` in prefix synonyms")
        return v

    @field_validator("uri_prefix_synonyms")
    @classmethod
    def uri_prefix_not_in_synonyms(
        cls, v: frozenset[str], info: ValidationInfo
    ) -> frozenset[str]:
        """Check that the canonical URI prefix does not appear in the URI prefix synonyms."""
        uri_prefix = info.data.get("uri_prefix")
        if uri_prefix in v:
            raise ValueError(
                f"Duplicate of canonical URI prefix `{uri_prefix}` in URI prefix synonyms"
            )
        for uri_prefix_synonym in v:
            _check_utf8(uri_prefix_synonym)
        return v

    @property
    def all_prefixes(self) -> list[str]:
        """Get the canonical prefix followed by the sorted prefix synonyms."""
        return [self.prefix, *sorted(self.prefix_synonyms)]

    @property
    def all_uri_prefixes(self) -> list[str]:
        """Get the canonical URI prefix followed by the sorted URI prefix synonyms."""
        return [self.uri_prefix, *sorted(self.uri_prefix_synonyms)]


# An explanation of RootModels in Pydantic V2 can be found on
# https://docs.pydantic.dev/latest/concepts/models/#rootmodel-and-custom-root-types
class Records(RootModel[list[Record]]):
    """A list of records."""

    def __iter__(self) -> Iterator[Record]:  # type:ignore[override]
        """Iterate over records."""
        return iter(self.root)


class DuplicateRecordError(ValueError):
    """An error raised when adding a record whose prefix or URI prefix is already registered."""

    def __init__(self, key: str) -> None:
        """Initialize the error.

        :param key: The prefix or URI prefix that is already registered
        """
        self.key = key

    def __str__(self) -> str:
        return f"duplicate record key: {self.key}"


class ConversionError(ValueError):
    """An error raised on conversion."""


class ExpansionError(ConversionError):
    """An error raised on expansion if the prefix can't be looked up."""


class CompressionError(ConversionError):
    """An error raised on compression if the URI prefix can't be matched."""


class Converter:
    """A registry of records supporting expansion and compression.

    .. code-block::

        >>> converter = Converter()
        >>> converter.add_record(
        ...     Record(
        ...         prefix="doid",
        ...         uri_prefix="http://purl.obolibrary.org/obo/DOID_",
        ...         prefix_synonyms={"DOID"},
        ...         uri_prefix_synonyms={"https://identifiers.org/DOID/"},
        ...     )
        ... )
        >>> converter.add_prefix("obo", "http://purl.obolibrary.org/obo/")

        # Compression and Expansion:
        >>> converter.expand("DOID:1234")
        'http://purl.obolibrary.org/obo/DOID_1234'
        >>> converter.compress("https://identifiers.org/DOID/1234")
        'doid:1234'

        # The longest URI prefix wins:
        >>> converter.compress("http://purl.obolibrary.org/obo/DOID_1234")
        'doid:1234'
        >>> converter.compress("http://purl.obolibrary.org/obo/go.owl")
        'obo:go.owl'

        # Example with unparsable URI:
        >>> converter.compress("http://example.com/missing:0000000")

        # Example with missing prefix:
        >>> converter.expand("missing:0000000")
    """

    #: Records in the order they were added
    records: list[Record]
    #: A mapping from prefixes and prefix synonyms to their records
    prefix_index: dict[str, Record]
    #: A mapping from URI prefixes and URI prefix synonyms to their records
    uri_index: dict[str, Record]
    #: A prefix trie for efficient parsing of URIs
    trie: URIPrefixTrie

    def __init__(
        self,
        records: Iterable[Record] | None = None,
        *,
        delimiter: str = ":",
        strict: bool = False,
    ) -> None:
        """Instantiate a converter.

        :param records:
            An optional iterable of records, added in order with :meth:`add_record`.
            If you plan to build a converter incrementally, leave this empty.
        :param delimiter:
            The delimiter used for CURIEs. Defaults to a colon. Must not be empty.
        :param strict:
            If true, adding a record whose prefix synonyms or URI prefix synonyms
            are already registered raises a :class:`DuplicateRecordError`. If false
            (the default), the synonym is reassigned to the new record and a
            warning is logged.
        :raises DuplicateRecordError: if any records share a canonical prefix
            or canonical URI prefix
        :raises ValueError: if the delimiter is empty
        """
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self.delimiter = delimiter
        self.strict = strict
        self.records = []
        self.prefix_index = {}
        self.uri_index = {}
        self.trie = URIPrefixTrie()
        for record in records or []:
            self.add_record(record)

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, prefix: Any) -> bool:
        return prefix in self.prefix_index

    @property
    def prefix_map(self) -> Mapping[str, str]:
        """Get the mapping from prefixes and prefix synonyms to canonical URI prefixes."""
        return {prefix: record.uri_prefix for prefix, record in self.prefix_index.items()}

    @property
    def reverse_prefix_map(self) -> Mapping[str, str]:
        """Get the mapping from URI prefixes and URI prefix synonyms to canonical prefixes."""
        return {uri_prefix: record.prefix for uri_prefix, record in self.uri_index.items()}

    def _check_keys(self, record: Record) -> None:
        if record.prefix in self.prefix_index:
            raise DuplicateRecordError(record.prefix)
        if record.uri_prefix in self.uri_index:
            raise DuplicateRecordError(record.uri_prefix)
        if not self.strict:
            return
        for prefix_synonym in sorted(record.prefix_synonyms):
            if prefix_synonym in self.prefix_index:
                raise DuplicateRecordError(prefix_synonym)
        for uri_prefix_synonym in sorted(record.uri_prefix_synonyms):
            if uri_prefix_synonym in self.uri_index:
                raise DuplicateRecordError(uri_prefix_synonym)

    def _index(self, index: dict[str, Record], key: str, record: Record) -> None:
        existing = index.get(key)
        if existing is not None and existing is not record:
            logger.warning(
                "synonym %s reassigned from record %s to record %s",
                key,
                existing.prefix,
                record.prefix,
            )
        index[key] = record

    def add_record(self, record: Record) -> None:
        """Append a record to the converter.

        :param record: The record to add
        :raises DuplicateRecordError:
            If the record's prefix or URI prefix is already registered. In strict
            mode, also if any of its synonyms are already registered. The converter
            is left unchanged when this is raised.

        .. warning::

            When the converter is not strict, prefix synonyms and URI prefix synonyms
            aren't checked against existing keys. A colliding synonym is reassigned to
            the new record, so looking it up no longer returns the earlier record.
        """
        self._check_keys(record)
        trie_keys = [encode_key(uri_prefix) for uri_prefix in record.all_uri_prefixes]
        logger.debug("adding record %s -> %s", record.prefix, record.uri_prefix)

        self.records.append(record)
        self.prefix_index[record.prefix] = record
        self.uri_index[record.uri_prefix] = record
        for prefix_synonym in sorted(record.prefix_synonyms):
            self._index(self.prefix_index, prefix_synonym, record)
        for uri_prefix_synonym in sorted(record.uri_prefix_synonyms):
            self._index(self.uri_index, uri_prefix_synonym, record)
        for trie_key in trie_keys:
            self.trie.add(trie_key)

    def add_prefix(
        self,
        prefix: str,
        uri_prefix: str,
        prefix_synonyms: Collection[str] | None = None,
        uri_prefix_synonyms: Collection[str] | None = None,
    ) -> None:
        """Append a prefix to the converter.

        :param prefix:
            The prefix to append, e.g., ``doid``
        :param uri_prefix:
            The URI prefix to append, e.g., ``http://purl.obolibrary.org/obo/DOID_``
        :param prefix_synonyms:
            An optional collection of synonyms for the prefix such as ``DOID``
        :param uri_prefix_synonyms:
            An optional collections of synonyms for the URI prefix such as
            ``https://identifiers.org/DOID/``

        >>> converter = Converter()
        >>> converter.add_prefix("hgnc", "https://bioregistry.io/hgnc:")
        >>> converter.expand("hgnc:1234")
        'https://bioregistry.io/hgnc:1234'
        """
        record = Record(
            prefix=prefix,
            uri_prefix=uri_prefix,
            prefix_synonyms=frozenset(prefix_synonyms or ()),
            uri_prefix_synonyms=frozenset(uri_prefix_synonyms or ()),
        )
        self.add_record(record)

    @classmethod
    def from_extended_prefix_map(
        cls, records: Iterable[Record | dict[str, Any]], **kwargs: Any
    ) -> Converter:
        """Get a converter from records or dictionaries that can be parsed as records.

        :param records: An iterable of :class:`Record` objects or dictionaries
            with the keys ``prefix``, ``uri_prefix``, and optionally
            ``prefix_synonyms`` and ``uri_prefix_synonyms``
        :param kwargs: Keyword arguments to pass to :meth:`Converter.__init__`
        :returns: A converter

        >>> converter = Converter.from_extended_prefix_map(
        ...     [
        ...         {
        ...             "prefix": "CHEBI",
        ...             "prefix_synonyms": ["chebi"],
        ...             "uri_prefix": "http://purl.obolibrary.org/obo/CHEBI_",
        ...         },
        ...     ]
        ... )
        >>> converter.expand("chebi:138488")
        'http://purl.obolibrary.org/obo/CHEBI_138488'
        """
        return cls(
            [
                record if isinstance(record, Record) else Record.model_validate(record)
                for record in records
            ],
            **kwargs,
        )

    @classmethod
    def from_prefix_map(cls, prefix_map: Mapping[str, str], **kwargs: Any) -> Converter:
        """Get a converter from a simple prefix map.

        :param prefix_map: A mapping whose keys are prefixes and values are URI prefixes
        :param kwargs: Keyword arguments to pass to :meth:`Converter.__init__`
        :returns: A converter
        :raises DuplicateRecordError: if two prefixes share a URI prefix

        >>> converter = Converter.from_prefix_map(
        ...     {
        ...         "GO": "http://purl.obolibrary.org/obo/GO_",
        ...         "OBO": "http://purl.obolibrary.org/obo/",
        ...     }
        ... )
        >>> converter.compress("http://purl.obolibrary.org/obo/GO_0032571")
        'GO:0032571'
        """
        return cls(
            [
                Record(prefix=prefix, uri_prefix=uri_prefix)
                for prefix, uri_prefix in prefix_map.items()
            ],
            **kwargs,
        )

    @classmethod
    def from_reverse_prefix_map(
        cls, reverse_prefix_map: Mapping[str, str], **kwargs: Any
    ) -> Converter:
        """Get a converter from a reverse prefix map.

        :param reverse_prefix_map:
            A mapping whose keys are URI prefixes and whose values are the corresponding prefixes.
            Several URI prefixes can point to the same prefix; the shortest one
            becomes the canonical URI prefix.
        :param kwargs: Keyword arguments to pass to :meth:`Converter.__init__`
        :return: A converter

        >>> converter = Converter.from_reverse_prefix_map(
        ...     {
        ...         "http://purl.obolibrary.org/obo/CHEBI_": "CHEBI",
        ...         "https://www.ebi.ac.uk/chebi/searchId.do?chebiId=": "CHEBI",
        ...     }
        ... )
        >>> converter.compress("https://www.ebi.ac.uk/chebi/searchId.do?chebiId=138488")
        'CHEBI:138488'
        """
        dd: defaultdict[str, list[str]] = defaultdict(list)
        for uri_prefix, prefix in reverse_prefix_map.items():
            dd[prefix].append(uri_prefix)
        records = []
        for prefix, uri_prefixes in dd.items():
            uri_prefix, *uri_prefix_synonyms = sorted(uri_prefixes, key=lambda s: (len(s), s))
            records.append(
                Record(
                    prefix=prefix,
                    uri_prefix=uri_prefix,
                    uri_prefix_synonyms=frozenset(uri_prefix_synonyms),
                )
            )
        return cls(records, **kwargs)

    def get_prefixes(self, *, include_synonyms: bool = False) -> set[str]:
        """Get the set of prefixes covered by this converter.

        :param include_synonyms: If true, include secondary prefixes.
        :return: A set of canonical prefixes, plus prefix synonyms if requested
        """
        if include_synonyms:
            return set(self.prefix_index)
        return {record.prefix for record in self.records}

    def get_uri_prefixes(self, *, include_synonyms: bool = False) -> set[str]:
        """Get the set of URI prefixes covered by this converter.

        :param include_synonyms: If true, include secondary URI prefixes.
        :return: A set of canonical URI prefixes, plus URI prefix synonyms if requested
        """
        if include_synonyms:
            return set(self.uri_index)
        return {record.uri_prefix for record in self.records}

    def format_curie(self, prefix: str, identifier: str) -> str:
        """Format a prefix and identifier into a CURIE string."""
        return f"{prefix}{self.delimiter}{identifier}"

    def find_by_prefix(self, prefix: str) -> Record | None:
        """Find the record for a prefix or prefix synonym."""
        return self.prefix_index.get(prefix)

    def find_by_uri_prefix(self, uri_prefix: str) -> Record | None:
        """Find the record for a URI prefix or URI prefix synonym."""
        return self.uri_index.get(uri_prefix)

    def find_by_uri(self, uri: str) -> Record | None:
        """Find the record whose URI prefix (or URI prefix synonym) is the longest prefix of the URI.

        :param uri: A string representing a valid uniform resource identifier (URI)
        :returns: The matching record, if one could be found

        >>> converter = Converter.from_prefix_map(
        ...     {
        ...         "GO": "http://purl.obolibrary.org/obo/GO_",
        ...         "OBO": "http://purl.obolibrary.org/obo/",
        ...     }
        ... )
        >>> converter.find_by_uri("http://purl.obolibrary.org/obo/GO_0032571").prefix
        'GO'
        >>> converter.find_by_uri("http://purl.obolibrary.org/obo/go.owl").prefix
        'OBO'
        """
        uri_prefix = self.trie.longest_match(uri)
        if uri_prefix is None:
            return None
        return self.find_by_uri_prefix(uri_prefix)

    def get_record(self, prefix: str) -> Record | None:
        """Get the record for the given prefix, if it exists."""
        return self.find_by_prefix(prefix)

    def parse_uri(self, uri: str) -> ReferenceTuple | None:
        """Compress a URI to a CURIE pair.

        :param uri:
            A string representing a valid uniform resource identifier (URI)
        :returns:
            A CURIE pair if the URI could be parsed, otherwise none

        >>> converter = Converter.from_prefix_map({"CHEBI": "http://purl.obolibrary.org/obo/CHEBI_"})
        >>> converter.parse_uri("http://purl.obolibrary.org/obo/CHEBI_138488")
        ReferenceTuple(prefix='CHEBI', identifier='138488')
        >>> converter.parse_uri("http://example.org/missing:0000000")
        """
        match = self._match_uri(uri)
        if match is None:
            return None
        record, identifier = match
        return ReferenceTuple(record.prefix, identifier)

    def _match_uri(self, uri: str) -> tuple[Record, str] | None:
        record = self.find_by_uri(uri)
        if record is None:
            return None
        for uri_prefix in record.all_uri_prefixes:
            if uri.startswith(uri_prefix):
                return record, uri[len(uri_prefix) :]
        # unreachable while the trie and the URI index agree
        return None

    def _match_curie(self, curie: str) -> tuple[Record, str] | None:
        try:
            prefix, identifier = split_curie(curie, sep=self.delimiter)
        except MalformedCURIEError:
            return None
        record = self.find_by_prefix(prefix)
        if record is None:
            return None
        return record, identifier

    def is_uri(self, s: str) -> bool:
        """Check if the string can be parsed as a URI by this converter."""
        return self.parse_uri(s) is not None

    def is_curie(self, s: str) -> bool:
        """Check if the string can be parsed as a CURIE by this converter."""
        return self.parse_curie(s) is not None

    def compress_strict(self, uri: str) -> str:
        """Compress a URI to a CURIE, and raise an error of not possible."""
        return self.compress(uri, strict=True)

    # docstr-coverage:excused `overload`
    @overload
    def compress(
        self, uri: str, *, strict: Literal[True] = True, passthrough: bool = ...
    ) -> str: ...

    # docstr-coverage:excused `overload`
    @overload
    def compress(
        self, uri: str, *, strict: Literal[False] = False, passthrough: Literal[True] = True
    ) -> str: ...

    # docstr-coverage:excused `overload`
    @overload
    def compress(
        self, uri: str, *, strict: Literal[False] = False, passthrough: Literal[False] = False
    ) -> str | None: ...

    def compress(self, uri: str, *, strict: bool = False, passthrough: bool = False) -> str | None:
        """Compress a URI to a CURIE, if possible.

        :param uri:
            A string representing a valid uniform resource identifier (URI)
        :param strict: If true and the URI can't be compressed, returns an error. Defaults to false.
        :param passthrough: If true, strict is false, and the URI can't be compressed, return the input.
            Defaults to false.
        :returns:
            A compact URI if this converter could find an appropriate URI prefix, otherwise none.
        :raises CompressionError:
            If strict is set to true and the URI can't be compressed

        .. note::

            If there are partially overlapping *URI prefixes* in this converter
            (e.g., ``http://purl.obolibrary.org/obo/GO_`` for the prefix ``GO`` and
            ``http://purl.obolibrary.org/obo/`` for the prefix ``OBO``), the longest
            URI prefix will always be matched. For example, parsing
            ``http://purl.obolibrary.org/obo/GO_0032571`` will return ``GO:0032571``
            instead of ``OBO:GO_0032571``.
        """
        reference = self.parse_uri(uri)
        if reference is not None:
            return self.format_curie(reference.prefix, reference.identifier)
        if strict:
            raise CompressionError(uri)
        if passthrough:
            return uri
        return None

    def parse_curie(self, curie: str) -> ReferenceTuple | None:
        """Parse a CURIE and standardize its prefix.

        :param curie: A string representing a compact URI (CURIE)
        :returns: A pair of the canonical prefix and the local unique identifier,
            or none if the CURIE is malformed or its prefix isn't registered

        >>> converter = Converter.from_extended_prefix_map(
        ...     [
        ...         {
        ...             "prefix": "CHEBI",
        ...             "prefix_synonyms": ["chebi"],
        ...             "uri_prefix": "http://purl.obolibrary.org/obo/CHEBI_",
        ...         }
        ...     ]
        ... )
        >>> converter.parse_curie("chebi:138488")
        ReferenceTuple(prefix='CHEBI', identifier='138488')
        >>> converter.parse_curie("chebi:138488:1")
        """
        match = self._match_curie(curie)
        if match is None:
            return None
        record, identifier = match
        return ReferenceTuple(record.prefix, identifier)

    def expand_strict(self, curie: str) -> str:
        """Expand a CURIE to a URI, and raise an error of not possible."""
        return self.expand(curie, strict=True)

    # docstr-coverage:excused `overload`
    @overload
    def expand(
        self, curie: str, *, strict: Literal[True] = True, passthrough: bool = ...
    ) -> str: ...

    # docstr-coverage:excused `overload`
    @overload
    def expand(
        self, curie: str, *, strict: Literal[False] = False, passthrough: Literal[True] = True
    ) -> str: ...

    # docstr-coverage:excused `overload`
    @overload
    def expand(
        self, curie: str, *, strict: Literal[False] = False, passthrough: Literal[False] = False
    ) -> str | None: ...

    def expand(self, curie: str, *, strict: bool = False, passthrough: bool = False) -> str | None:
        """Expand a CURIE to a URI, if possible.

        :param curie:
            A string representing a compact URI (CURIE). It must contain exactly one delimiter.
        :param strict: If true and the CURIE can't be expanded, returns an error. Defaults to false.
        :param passthrough: If true, strict is false, and the CURIE can't be expanded, return the input.
            Defaults to false.
        :returns:
            A URI if this converter contains a URI prefix for the prefix in this CURIE
        :raises ExpansionError:
            If strict is true and the CURIE can't be expanded

        >>> converter = Converter.from_prefix_map({"CHEBI": "http://purl.obolibrary.org/obo/CHEBI_"})
        >>> converter.expand("CHEBI:138488")
        'http://purl.obolibrary.org/obo/CHEBI_138488'
        >>> converter.expand("missing:0000000")
        >>> converter.expand("CHEBI:138488:1")
        """
        match = self._match_curie(curie)
        if match is not None:
            record, identifier = match
            return record.uri_prefix + identifier
        if strict:
            raise ExpansionError(curie)
        if passthrough:
            return curie
        return None

    def expand_all(self, curie: str) -> list[str] | None:
        """Expand a CURIE to all possible URIs.

        :param curie: A string representing a compact URI (CURIE)
        :returns: A list of URIs, starting with the one built from the canonical URI prefix,
            or none if the CURIE can't be expanded

        >>> converter = Converter.from_extended_prefix_map(
        ...     [
        ...         {
        ...             "prefix": "CHEBI",
        ...             "uri_prefix": "http://purl.obolibrary.org/obo/CHEBI_",
        ...             "uri_prefix_synonyms": ["https://identifiers.org/chebi:"],
        ...         }
        ...     ]
        ... )
        >>> converter.expand_all("CHEBI:138488")
        ['http://purl.obolibrary.org/obo/CHEBI_138488', 'https://identifiers.org/chebi:138488']
        """
        match = self._match_curie(curie)
        if match is None:
            return None
        record, identifier = match
        return [uri_prefix + identifier for uri_prefix in record.all_uri_prefixes]

    def standardize_curie(self, curie: str) -> str | None:
        """Standardize a CURIE so it uses the canonical prefix.

        >>> converter = Converter.from_extended_prefix_map(
        ...     [
        ...         {
        ...             "prefix": "CHEBI",
        ...             "prefix_synonyms": ["chebi"],
        ...             "uri_prefix": "http://purl.obolibrary.org/obo/CHEBI_",
        ...         }
        ...     ]
        ... )
        >>> converter.standardize_curie("chebi:138488")
        'CHEBI:138488'
        """
        reference = self.parse_curie(curie)
        if reference is None:
            return None
        return self.format_curie(reference.prefix, reference.identifier)

    def standardize_uri(self, uri: str) -> str | None:
        """Standardize a URI so it uses the canonical URI prefix.

        >>> converter = Converter.from_extended_prefix_map(
        ...     [
        ...         {
        ...             "prefix": "CHEBI",
        ...             "uri_prefix": "http://purl.obolibrary.org/obo/CHEBI_",
        ...             "uri_prefix_synonyms": ["https://identifiers.org/chebi:"],
        ...         }
        ...     ]
        ... )
        >>> converter.standardize_uri("https://identifiers.org/chebi:138488")
        'http://purl.obolibrary.org/obo/CHEBI_138488'
        """
        match = self._match_uri(uri)
        if match is None:
            return None
        record, identifier = match
        return record.uri_prefix + identifier
