"""Interactive console for address lookups."""

import sys
from typing import Callable, List, Optional, TextIO

from servicetag_lookup.ip.matcher import QueryResult

PROMPT = "Enter an IP address to check (or 'exit' to quit):"


def format_result(ip_address: str, result: QueryResult) -> List[str]:
    """Render a query result as output lines."""
    if not result.matched:
        return [f"The IP address {ip_address} is not in the service tag ranges."]

    lines = [
        f"The IP address {ip_address} is in the service tag ranges.",
        "Matching service tags:",
    ]
    for meta in result.matches:
        if meta is None:
            lines.append("  - SystemService: , Region: Global")
        else:
            lines.append(f"  - SystemService: {meta.service_name}, Region: {meta.display_region}")
    return lines


def run_interactive(
    check: Callable[[str], QueryResult],
    read_line: Optional[Callable[[], str]] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Prompt for addresses until 'exit' or end of input.

    Args:
        check: Function answering a single query.
        read_line: Line reader (defaults to ``input``).
        out: Output stream (defaults to stdout).

    Returns:
        Number of addresses checked.
    """
    read_line = read_line or input
    out = out or sys.stdout
    checked = 0

    while True:
        print(f"\n{PROMPT}", file=out)
        try:
            line = read_line()
        except EOFError:
            break
        text = line.strip()

        if text.lower() == "exit":
            break
        if not text:
            print("Please enter a valid IP address.", file=out)
            continue

        for output_line in format_result(text, check(text)):
            print(output_line, file=out)
        checked += 1

    return checked
