"""Command-line interface for the operator console."""

import argparse
import asyncio
import json
import sys
from dataclasses import dataclass

import httpx

from api import ConsoleError, OperatorClient
from config import ConsoleConfig, parse_timeout
from constants import CONSOLE_VERSION, ENV_API_TIMEOUT, ENV_API_TOKEN, ENV_API_URL
from model import Operator
from ui.widgets import COLUMNS


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    api_url: str | None
    token: str | None
    timeout: float | None
    list_operators: bool
    as_json: bool
    show_version: bool


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class ConsoleHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "SMSC Console - manage the gateway's messaging operators.",
            f"Version: {CONSOLE_VERSION}",
            "",
            "Core:",
            "  smsc-console                          Open the operator console",
            "  smsc-console --list-operators         Print the operator list and exit",
            "  smsc-console --list-operators --json  Print the operator list as JSON",
            "  smsc-console --version                Print the version and exit",
            "",
            "Connection:",
            "  --api-url <url>                       API base URL (default: $" + ENV_API_URL + ")",
            "  --token <token>                       Bearer token (default: $" + ENV_API_TOKEN + ")",
            "  --timeout <seconds>                   Request timeout, 0 disables (default: $"
            + ENV_API_TIMEOUT + " or 30)",
            "",
            "Examples:",
            "",
            "  smsc-console --api-url http://gateway:8080/api/v1",
            "  SMSC_API_TOKEN=... smsc-console --list-operators",
        ]
        return "\n".join(lines) + "\n"


def _timeout_arg(value: str) -> float:
    try:
        parsed = parse_timeout(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}") from None
    # 0 means "no timeout"; with_overrides() maps it back to None
    return 0.0 if parsed is None else parsed


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the console CLI."""
    parser = argparse.ArgumentParser(
        prog="smsc-console",
        formatter_class=ConsoleHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--api-url", metavar="URL", help=argparse.SUPPRESS)
    parser.add_argument("--token", metavar="TOKEN", help=argparse.SUPPRESS)
    parser.add_argument("--timeout", metavar="SECONDS", type=_timeout_arg, help=argparse.SUPPRESS)
    parser.add_argument("--list-operators", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--json", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--version", action="store_true", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Returns:
        ParsedArgs with connection overrides and the requested action.
    """
    args = create_parser().parse_args(sys.argv[1:] if argv is None else argv)
    return ParsedArgs(
        api_url=args.api_url,
        token=args.token,
        timeout=args.timeout,
        list_operators=args.list_operators,
        as_json=args.json,
        show_version=args.version,
    )


def build_config(args: ParsedArgs, environ: dict[str, str] | None = None) -> ConsoleConfig:
    """Environment config with CLI flags applied on top.

    Raises:
        ValueError: If SMSC_API_TIMEOUT is not a number
    """
    return ConsoleConfig.from_env(environ).with_overrides(
        api_base_url=args.api_url,
        api_token=args.token,
        timeout=args.timeout,
    )


def format_operator_table(operators: list[Operator]) -> str:
    """Format operators as an aligned plain-text table."""
    rows = [list(COLUMNS)]
    for op in operators:
        rows.append([
            "" if op.id is None else str(op.id),
            op.name,
            str(op.priority),
            str(op.weight),
            str(op.max_tps),
            op.status,
        ])
    widths = [max(len(row[i]) for row in rows) for i in range(len(COLUMNS))]
    lines = ["  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows]
    if not operators:
        lines.append("(no operators)")
    return "\n".join(lines)


async def fetch_operators(
    config: ConsoleConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Operator]:
    """Fetch the operator list once, outside the TUI."""
    async with OperatorClient(config, transport=transport) as client:
        return await client.list_operators()


def list_operators(config: ConsoleConfig, as_json: bool = False) -> int:
    """Print the operator list, as a table or as JSON in server field names.

    Returns:
        The process exit status
    """
    try:
        operators = asyncio.run(fetch_operators(config))
    except ConsoleError as e:
        print_error_box(e.message, f"API: {config.api_base_url}")
        return 1
    if as_json:
        print(json.dumps([op.to_dict() for op in operators], indent=2))
    else:
        print(format_operator_table(operators))
    return 0


def main() -> None:
    """Main entry point."""
    args = parse_args()

    if args.show_version:
        print(f"smsc-console {CONSOLE_VERSION}")
        sys.exit(0)

    try:
        config = build_config(args)
    except ValueError as e:
        print_error_box("Invalid configuration", str(e))
        sys.exit(1)

    if args.list_operators:
        sys.exit(list_operators(config, as_json=args.as_json))

    from app import SmscConsoleApp

    app = SmscConsoleApp(config=config, version=CONSOLE_VERSION)
    app.run()


if __name__ == "__main__":
    main()
