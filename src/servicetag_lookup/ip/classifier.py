"""IP address classification utilities."""

import ipaddress
import logging
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)


class ParsedAddress(NamedTuple):
    """An IP literal reduced to its version and network-order bytes."""
    version: int
    packed: bytes


def parse_address(ip_address: str) -> Optional[ParsedAddress]:
    """
    Parse an IPv4 or IPv6 literal.

    Args:
        ip_address: IP address string (no CIDR suffix)

    Returns:
        ParsedAddress, or None if the text is not a valid IP literal
    """
    try:
        ip_obj = ipaddress.ip_address(ip_address)
    except (ValueError, TypeError) as e:
        logger.debug(f"Could not parse IP {ip_address!r}: {e}")
        return None
    return ParsedAddress(ip_obj.version, ip_obj.packed)

