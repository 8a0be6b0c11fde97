"""Check IP addresses against service-tag CIDR ranges."""

__version__ = "1.0.0"
