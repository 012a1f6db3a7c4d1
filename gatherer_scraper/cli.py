"""CLI interface for single-card Gatherer extraction."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from gatherer_scraper.config import AppConfig, load_config
from gatherer_scraper.errors import ExtractionError, TransportError
from gatherer_scraper.extractor import extract_card
from gatherer_scraper.fetcher import GathererFetcher, scrape_card
from gatherer_scraper.models import CardRecord

console = Console()
err_console = Console(stderr=True)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return

    args.func(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gatherer-scraper",
        description="Extract a structured card record from a Gatherer card page",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to config.yaml (default: config.yaml)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    extract_parser = subparsers.add_parser("extract", help="Extract one card record")
    extract_parser.add_argument(
        "url",
        help="Card page URL, e.g. http://gatherer.wizards.com/Pages/Card/Details.aspx?multiverseid=226755",
    )
    extract_parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Read page markup from a saved file instead of fetching the URL",
    )
    extract_parser.add_argument(
        "--format",
        choices=("json", "table"),
        default="json",
        help="Output format (default: json)",
    )
    extract_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write JSON output to a file instead of stdout (json format only)",
    )
    extract_parser.set_defaults(func=_cmd_extract)

    return parser


# ------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------


def _cmd_extract(args: argparse.Namespace) -> None:
    if args.format == "table" and args.output is not None:
        err_console.print("[red]--output only applies to --format json[/red]")
        sys.exit(2)

    config = load_config(args.config)

    try:
        if args.html is not None:
            markup = args.html.read_text(encoding="utf-8")
            record = extract_card(args.url, markup)
        else:
            record = asyncio.run(_run_fetch(config, args.url))
    except (ExtractionError, TransportError) as exc:
        err_console.print(f"[red]{type(exc).__name__}:[/red] {exc}")
        sys.exit(1)

    if args.format == "table":
        console.print(_record_table(record))
        return

    text = json.dumps(record.to_dict(), indent=config.output.indent, ensure_ascii=False)
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
        err_console.print(f"Wrote {record.name} to {args.output}")
    else:
        console.print_json(text, indent=config.output.indent)


async def _run_fetch(config: AppConfig, url: str) -> CardRecord:
    fc = config.fetch
    async with GathererFetcher(
        timeout=fc.timeout_s,
        max_retries=fc.max_retries,
        backoff_base=fc.backoff_base,
        user_agent=fc.user_agent,
        rate_limit_ms=fc.rate_limit_ms,
    ) as fetcher:
        return await scrape_card(url, fetcher)


def _record_table(record: CardRecord) -> Table:
    table = Table(title=record.name)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in record.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(key, "" if value is None else str(value))
    return table
