"""CIDR parsing and range matching."""

from servicetag_lookup.ip.cidr import (
    AddressFamily,
    CidrParseError,
    InvalidAddress,
    InvalidPrefixLength,
    MalformedInput,
    NetworkRange,
    PrefixOutOfRange,
    RangeMetadata,
    parse_cidr,
)
from servicetag_lookup.ip.classifier import parse_address
from servicetag_lookup.ip.matcher import QueryResult, RangeTable, SkippedEntry, build_table

__all__ = [
    "AddressFamily",
    "CidrParseError",
    "InvalidAddress",
    "InvalidPrefixLength",
    "MalformedInput",
    "NetworkRange",
    "PrefixOutOfRange",
    "RangeMetadata",
    "parse_cidr",
    "parse_address",
    "QueryResult",
    "RangeTable",
    "SkippedEntry",
    "build_table",
]
