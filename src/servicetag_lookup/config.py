"""Configuration module for service-tag lookups."""

import os
import logging
from typing import Optional

DEFAULT_FILE = "AzureIPs.json"
DEFAULT_TIMEOUT = 30.0


class Config:
    """Application configuration."""

    def __init__(
        self,
        dataset_file: str = DEFAULT_FILE,
        dataset_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.dataset_file = dataset_file
        self.dataset_url = dataset_url
        self.timeout = timeout

    @classmethod
    def from_env(
        cls,
        dataset_file: Optional[str] = None,
        dataset_url: Optional[str] = None,
    ) -> "Config":
        """Create configuration from environment variables.

        Reads SERVICE_TAGS_FILE, SERVICE_TAGS_URL and SERVICE_TAGS_TIMEOUT.
        Explicit arguments take precedence over the environment.

        Raises:
            ValueError: If SERVICE_TAGS_TIMEOUT is not a positive number.
        """
        raw_timeout = os.getenv("SERVICE_TAGS_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"SERVICE_TAGS_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from None
            if timeout <= 0:
                raise ValueError(f"SERVICE_TAGS_TIMEOUT must be positive, got {raw_timeout!r}")

        return cls(
            dataset_file=dataset_file or os.getenv("SERVICE_TAGS_FILE") or DEFAULT_FILE,
            dataset_url=dataset_url or os.getenv("SERVICE_TAGS_URL") or None,
            timeout=timeout,
        )

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # Reduce noise from third-party libraries
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)

    def __repr__(self) -> str:
        return (
            f"Config(dataset_file={self.dataset_file!r}, "
            f"dataset_url={self.dataset_url!r}, "
            f"timeout={self.timeout})"
        )
