"""Lookup engine that loads a dataset and answers address queries."""

import logging
from typing import List, Optional

from servicetag_lookup.config import Config
from servicetag_lookup.clients.service_tags import ServiceTagsClient
from servicetag_lookup.dataset.loader import from_object, iter_range_entries, load_file
from servicetag_lookup.dataset.models import ServiceTagData
from servicetag_lookup.ip.matcher import QueryResult, RangeTable, SkippedEntry, build_table

logger = logging.getLogger(__name__)


class LookupEngine:
    """Builds a RangeTable from the configured dataset and queries it."""

    def __init__(self, config: Config):
        self.config = config
        self.table: Optional[RangeTable] = None
        self.skipped: List[SkippedEntry] = []

    def fetch_dataset(self) -> ServiceTagData:
        """Read the dataset from the configured URL or file.

        Raises:
            DatasetError: If the dataset is missing or invalid.
            httpx.HTTPError: If the download fails.
        """
        if self.config.dataset_url:
            with ServiceTagsClient(timeout=self.config.timeout) as client:
                raw = client.fetch(self.config.dataset_url)
            return from_object(raw, source=self.config.dataset_url)
        return load_file(self.config.dataset_file)

    def load(self) -> RangeTable:
        """Load the dataset and build the range table.

        Returns:
            The built table. Entries that fail to parse are logged and
            kept in ``self.skipped``.
        """
        data = self.fetch_dataset()
        table, skipped = build_table(iter_range_entries(data.values or []))
        for entry in skipped:
            logger.warning("Failed to parse CIDR: %s", entry)

        logger.info(
            "Loaded %d ranges from %d service tags (%d skipped)",
            len(table), len(data.values or []), len(skipped),
        )
        self.table = table
        self.skipped = skipped
        return table

    def check(self, ip_address: str) -> QueryResult:
        """Query the loaded table.

        Raises:
            RuntimeError: If called before ``load``.
        """
        if self.table is None:
            raise RuntimeError("Range table not loaded; call load() first")
        return self.table.query(ip_address)
