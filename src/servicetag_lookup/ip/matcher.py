"""Static table of network ranges with all-matches lookup."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from servicetag_lookup.ip.cidr import (
    AddressFamily,
    CidrParseError,
    NetworkRange,
    RangeMetadata,
    parse_cidr,
)
from servicetag_lookup.ip.classifier import parse_address
from servicetag_lookup.ip.utils import masked_equal

Entry = Union[str, Tuple[str, Optional[RangeMetadata]]]


@dataclass(frozen=True)
class QueryResult:
    """Metadata of every range that matched a query, in table order."""
    matches: Tuple[Optional[RangeMetadata], ...] = ()

    @property
    def matched(self) -> bool:
        return len(self.matches) > 0

    @classmethod
    def empty(cls) -> "QueryResult":
        return cls(())


@dataclass(frozen=True)
class SkippedEntry:
    """An input entry left out of the table, with the reason."""
    text: object
    error: CidrParseError

    def __str__(self) -> str:
        return f"{self.text} ({self.error.reason})"


class RangeTable:
    """
    Ordered, read-only collection of network ranges.

    Built once with ``build_table`` and queried many times. The table is
    never mutated after construction, so concurrent queries need no lock.
    """

    __slots__ = ("_ranges",)

    def __init__(self, ranges: Iterable[NetworkRange] = ()):
        self._ranges: Tuple[NetworkRange, ...] = tuple(ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[NetworkRange]:
        return iter(self._ranges)

    def __repr__(self) -> str:
        return f"RangeTable({len(self._ranges)} ranges)"

    @property
    def ranges(self) -> Tuple[NetworkRange, ...]:
        return self._ranges

    def query(self, ip_text: str) -> QueryResult:
        """
        Find every range containing an address.

        Args:
            ip_text: IPv4 or IPv6 literal

        Returns:
            QueryResult with the metadata of all matching ranges in load
            order. Unparseable input yields an empty result.
        """
        if not isinstance(ip_text, str):
            return QueryResult.empty()
        parsed = parse_address(ip_text.strip())
        if parsed is None:
            return QueryResult.empty()

        family = AddressFamily.from_version(parsed.version)
        matches = []
        for network in self._ranges:
            # No v4-mapped normalization: families never cross-match
            if network.family is not family:
                continue
            if masked_equal(network.network_address, parsed.packed, network.mask):
                matches.append(network.metadata)
        return QueryResult(tuple(matches))

    def contains(self, ip_text: str) -> bool:
        """Check whether any range contains the address."""
        return self.query(ip_text).matched


def _split_entry(entry: Entry) -> Tuple[object, Optional[RangeMetadata]]:
    if isinstance(entry, tuple):
        if len(entry) == 2:
            return entry[0], entry[1]
        if len(entry) == 1:
            return entry[0], None
    return entry, None


def build_table(entries: Iterable[Entry]) -> Tuple[RangeTable, List[SkippedEntry]]:
    """
    Parse entries into a RangeTable.

    Args:
        entries: CIDR strings or (cidr, metadata) pairs

    Returns:
        Tuple of (table, skipped). Entries that fail to parse are left out
        of the table and reported in ``skipped``; they never abort the build.
    """
    ranges: List[NetworkRange] = []
    skipped: List[SkippedEntry] = []

    for entry in entries:
        text, metadata = _split_entry(entry)
        result = parse_cidr(text, metadata)
        if isinstance(result, CidrParseError):
            skipped.append(SkippedEntry(text, result))
        else:
            ranges.append(result)

    return RangeTable(ranges), skipped
