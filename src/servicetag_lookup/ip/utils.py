"""IP address utility functions — prefix masks."""


def prefix_mask(prefix_length: int, width: int) -> bytes:
    """
    Build a prefix bitmask.

    Args:
        prefix_length: Number of leading one-bits
        width: Mask width in bytes (4 for IPv4, 16 for IPv6)

    Returns:
        Mask bytes, e.g. prefix 20 over 4 bytes -> FF FF F0 00
    """
    if prefix_length < 0 or prefix_length > width * 8:
        raise ValueError(f"Prefix length {prefix_length} out of range for {width}-byte address")

    mask = bytearray(width)
    remaining = prefix_length
    for i in range(width):
        if remaining >= 8:
            mask[i] = 0xFF
            remaining -= 8
        else:
            mask[i] = (0xFF << (8 - remaining)) & 0xFF
            remaining = 0
    return bytes(mask)


def apply_mask(address: bytes, mask: bytes) -> bytes:
    """AND each address byte with the matching mask byte."""
    if len(address) != len(mask):
        raise ValueError(f"Address width {len(address)} does not match mask width {len(mask)}")
    return bytes(a & m for a, m in zip(address, mask))


def masked_equal(left: bytes, right: bytes, mask: bytes) -> bool:
    """
    Compare two addresses under a mask.

    Both sides are masked before comparison, so host bits on either
    address never affect the result.
    """
    if not (len(left) == len(right) == len(mask)):
        return False
    for a, b, m in zip(left, right, mask):
        if (a & m) != (b & m):
            return False
    return True
