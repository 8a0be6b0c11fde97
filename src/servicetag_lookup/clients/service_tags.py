"""
HTTP client for downloading service-tag datasets using httpx.
"""

import logging
from typing import Any

import httpx

from servicetag_lookup.dataset.loader import DatasetError

logger = logging.getLogger(__name__)


class ServiceTagsClient:
    """Downloads service-tag JSON documents."""

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout
        self.client = httpx.Client(timeout=timeout, follow_redirects=True)

    def __enter__(self) -> "ServiceTagsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    def fetch(self, url: str) -> Any:
        """Fetch and decode a JSON dataset.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
            DatasetError: If the body is not valid JSON.
        """
        logger.info("Downloading service tags from %s", url)
        resp = self.client.get(url)
        resp.raise_for_status()
        try:
            data = resp.json()
        except ValueError as e:
            raise DatasetError(f"Invalid JSON format in '{url}'. Details: {e}") from e
        logger.info(f"Downloaded {len(resp.content)} bytes from {url}")
        return data
