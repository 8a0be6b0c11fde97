"""Load service-tag datasets and flatten them into range entries."""

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Tuple, Union

from servicetag_lookup.dataset.models import ServiceTag, ServiceTagData
from servicetag_lookup.ip.cidr import RangeMetadata

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """The dataset is missing, unreadable or structurally invalid."""


def parse_json(content: str, source: str = "<string>") -> ServiceTagData:
    """
    Deserialize and validate a service-tag JSON document.

    Raises:
        DatasetError: If the content is empty, not valid JSON, or has no service tags.
    """
    if not content or not content.strip():
        raise DatasetError(f"The file '{source}' is empty.")

    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        raise DatasetError(f"Invalid JSON format in '{source}'. Details: {e}") from e

    return from_object(raw, source)


def from_object(raw: Any, source: str = "<object>") -> ServiceTagData:
    """Validate an already-decoded JSON document."""
    if not isinstance(raw, dict):
        raise DatasetError(f"Expected a JSON object in '{source}', got {type(raw).__name__}.")

    data = ServiceTagData.from_dict(raw)
    if data.values is None:
        raise DatasetError("Deserialized JSON data or Values list is null.")
    if not data.values:
        raise DatasetError("No service tags found in the JSON data.")

    logger.debug(
        "Loaded %d service tags from %s (cloud=%s, changeNumber=%d)",
        len(data.values), source, data.cloud or "-", data.change_number,
    )
    return data


def load_file(path: Union[str, Path]) -> ServiceTagData:
    """
    Read and parse a service-tag JSON file.

    Raises:
        DatasetError: If the file does not exist or its content is invalid.
    """
    path = Path(path)
    logger.debug("Current working directory: %s", Path.cwd())
    if not path.is_file():
        raise DatasetError(f"The file '{path}' does not exist.")

    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetError(f"Could not read '{path}'. Details: {e}") from e
    return parse_json(content, source=str(path))


def iter_range_entries(service_tags: List[ServiceTag]) -> Iterator[Tuple[Any, RangeMetadata]]:
    """Yield (cidr, metadata) for every address prefix, in dataset order."""
    for tag in service_tags:
        props = tag.properties
        if props is None or not props.address_prefixes:
            logger.debug("Service tag %s has no address prefixes", tag.name or tag.id)
            continue
        metadata = RangeMetadata(
            service_name=props.system_service,
            region=props.region,
            tag_name=tag.name,
        )
        for cidr in props.address_prefixes:
            yield cidr, metadata
