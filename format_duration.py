from __future__ import annotations

import argparse
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from duration_formatter.errors import DurationFormatterError
from duration_formatter.formatter import DurationFormatter
from duration_formatter.log_utils import log_sync_call
from duration_formatter.logging_config import logger

# Консоль
console = Console()

load_dotenv()


def parse_seconds(value: str) -> int | float:
    """Read whole seconds as ``int`` so large values keep their precision."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Format a number of seconds as a readable duration.")
    parser.add_argument("seconds", type=parse_seconds, help="duration in seconds")
    parser.add_argument("--preset", default=None, help="preset name from config/formatter.yaml")
    parser.add_argument("--units", choices=["full", "day"], default=None, help="unit ordering")
    return parser


@log_sync_call
def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        formatter = DurationFormatter.from_preset(args.preset)
        text = formatter.format(args.seconds, args.units)
    except DurationFormatterError as exc:
        logger.debug("Formatting failed: %s", exc)
        console.print(f"[bold red]Error: {escape(str(exc))}[/bold red]")
        return 1
    console.print(text)
    return 0


if __name__ == "__main__":
    sys.exit(run())
