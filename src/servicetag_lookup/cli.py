"""CLI entry point for servicetag-lookup."""

import argparse
import logging
import sys

import httpx
from dotenv import load_dotenv

from servicetag_lookup import __version__
from servicetag_lookup.config import Config
from servicetag_lookup.dataset.loader import DatasetError
from servicetag_lookup.lookup.console import format_result, run_interactive
from servicetag_lookup.lookup.engine import LookupEngine

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list to parse (defaults to sys.argv[1:]).
    """
    parser = argparse.ArgumentParser(
        prog="servicetag-lookup",
        description="Check whether IP addresses fall within service-tag CIDR ranges",
    )
    parser.add_argument(
        "ips",
        nargs="*",
        metavar="IP",
        help="Addresses to check; omit to start the interactive prompt",
    )
    parser.add_argument(
        "--file",
        dest="dataset_file",
        help="Path to the service-tag JSON file (default: $SERVICE_TAGS_FILE or AzureIPs.json)",
    )
    parser.add_argument(
        "--url",
        dest="dataset_url",
        help="Download the service-tag JSON from this URL instead of reading a file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for servicetag-lookup CLI."""
    args = parse_args(argv)

    load_dotenv()

    try:
        config = Config.from_env(
            dataset_file=args.dataset_file,
            dataset_url=args.dataset_url,
        )
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    config.setup_logging()
    logger.debug("Config: %s", config)

    engine = LookupEngine(config)

    try:
        engine.load()
    except (DatasetError, httpx.HTTPError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.exception("Failed to load service tags")
        sys.exit(1)

    if args.ips:
        for ip in args.ips:
            for line in format_result(ip, engine.check(ip)):
                print(line)
        return

    run_interactive(engine.check)
