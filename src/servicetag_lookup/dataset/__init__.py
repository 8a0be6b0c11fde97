"""Service-tag dataset model and loading."""

from servicetag_lookup.dataset.loader import DatasetError, iter_range_entries, load_file, parse_json
from servicetag_lookup.dataset.models import ServiceTag, ServiceTagData, ServiceTagProperties

__all__ = [
    "DatasetError",
    "iter_range_entries",
    "load_file",
    "parse_json",
    "ServiceTag",
    "ServiceTagData",
    "ServiceTagProperties",
]
