"""CIDR parsing into validated network ranges.

``parse_cidr`` never raises for bad input: it returns one of the
``CidrParseError`` subclasses so that loaders can collect failures
per entry and keep going.
"""

import enum
import ipaddress
import re
from dataclasses import dataclass
from functools import cached_property
from typing import Optional, Union

from servicetag_lookup.ip.classifier import parse_address
from servicetag_lookup.ip.utils import apply_mask, prefix_mask

_PREFIX_RE = re.compile(r"[+-]?[0-9]+")


class AddressFamily(enum.Enum):
    """IP address family with its byte width."""

    IPV4 = 4
    IPV6 = 6

    @property
    def width(self) -> int:
        return 4 if self is AddressFamily.IPV4 else 16

    @property
    def max_prefix(self) -> int:
        return self.width * 8

    @classmethod
    def from_version(cls, version: int) -> "AddressFamily":
        return cls(version)


class CidrParseError(Exception):
    """Base class for CIDR parse failures."""

    def __init__(self, text: object, reason: str):
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        return (
            type(self) is type(other)
            and self.text == other.text
            and self.reason == other.reason
        )

    def __hash__(self) -> int:
        return hash((type(self), self.text, self.reason))


class MalformedInput(CidrParseError):
    """Input is not of the form ``address/prefix``."""


class InvalidAddress(CidrParseError):
    """Address part is not an IPv4 or IPv6 literal."""


class InvalidPrefixLength(CidrParseError):
    """Prefix part is not an integer."""


class PrefixOutOfRange(InvalidPrefixLength):
    """Prefix is an integer outside the family's range."""


@dataclass(frozen=True)
class RangeMetadata:
    """Service information attached to a network range."""
    service_name: str = ""
    region: str = ""
    tag_name: str = ""

    @property
    def display_region(self) -> str:
        return self.region or "Global"


@dataclass(frozen=True)
class NetworkRange:
    """A parsed CIDR block with optional metadata."""
    network_address: bytes
    prefix_length: int
    family: AddressFamily
    metadata: Optional[RangeMetadata] = None

    def __post_init__(self):
        if len(self.network_address) != self.family.width:
            raise ValueError(
                f"{self.family.name} address must be {self.family.width} bytes, "
                f"got {len(self.network_address)}"
            )
        if not 0 <= self.prefix_length <= self.family.max_prefix:
            raise ValueError(
                f"Prefix length {self.prefix_length} out of range for {self.family.name}"
            )

    @cached_property
    def mask(self) -> bytes:
        return prefix_mask(self.prefix_length, self.family.width)

    @property
    def masked_address(self) -> bytes:
        return apply_mask(self.network_address, self.mask)

    @property
    def cidr(self) -> str:
        """Canonical ``network/prefix`` text."""
        address = ipaddress.ip_address(self.masked_address)
        return f"{address}/{self.prefix_length}"


ParseResult = Union[NetworkRange, CidrParseError]


def parse_cidr(text: str, metadata: Optional[RangeMetadata] = None) -> ParseResult:
    """
    Parse ``address/prefix`` text into a NetworkRange.

    Args:
        text: CIDR string, e.g. "10.0.0.0/8" or "2001:db8::/32"
        metadata: Optional metadata to attach to the range

    Returns:
        NetworkRange on success, otherwise a CidrParseError instance
        (MalformedInput, InvalidAddress, InvalidPrefixLength or
        PrefixOutOfRange). Errors are returned, not raised.
    """
    if not isinstance(text, str):
        return MalformedInput(text, "CIDR must be a string")

    parts = text.strip().split('/')
    if len(parts) != 2:
        return MalformedInput(text, "Expected exactly one '/' separator")
    address_text, prefix_text = parts

    parsed = parse_address(address_text)
    if parsed is None:
        return InvalidAddress(text, f"Invalid IP address {address_text!r}")
    family = AddressFamily.from_version(parsed.version)

    if not _PREFIX_RE.fullmatch(prefix_text):
        return InvalidPrefixLength(text, f"Prefix length {prefix_text!r} is not an integer")
    prefix_length = int(prefix_text)
    if prefix_length < 0 or prefix_length > family.max_prefix:
        return PrefixOutOfRange(
            text,
            f"Prefix length {prefix_length} outside 0..{family.max_prefix} for {family.name}",
        )

    return NetworkRange(parsed.packed, prefix_length, family, metadata)
