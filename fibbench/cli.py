"""CLI entry point for fibbench."""

from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fibbench.config import Settings, load_config, setup_logging
from fibbench.driver import RunRecord, run_benchmarks
from fibbench.engine.algorithms import count_recursive_calls
from fibbench.engine.errors import FibonacciError
from fibbench.engine.registry import RECURSIVE, AlgorithmRegistry, default_registry, verify_equivalence

logger = logging.getLogger(__name__)

console = Console()

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_INVALID = 2


def display_summary(records: list[RunRecord], registry: AlgorithmRegistry, console: Console) -> None:
    """Render a table comparing the benchmarked algorithms."""
    table = Table(title="Summary", padding=(0, 2))
    table.add_column("Algorithm")
    table.add_column("Time", style="dim")
    table.add_column("Space", style="dim")
    table.add_column("Value", justify="right")
    table.add_column("Elapsed (ms)", justify="right")
    table.add_column("Calls", justify="right")

    for record in records:
        algorithm = registry.get(record.name)
        calls = f"{count_recursive_calls(record.index):,}" if record.name == RECURSIVE else "-"
        table.add_row(
            record.name,
            algorithm.time_complexity if algorithm else "?",
            algorithm.space_complexity if algorithm else "?",
            str(record.value),
            f"{record.elapsed_ms:.4f}",
            calls,
        )

    console.print()
    console.print(table)


def run_verify(settings: Settings, registry: AlgorithmRegistry, console: Console) -> int:
    """Run the equivalence check and report the outcome."""
    mismatches = verify_equivalence(
        registry,
        upper=settings.verify.upper,
        recursive_cap=settings.verify.recursive_cap,
    )
    console.print()
    if mismatches:
        console.print(Panel(
            f"Algorithms disagree at n = {', '.join(map(str, mismatches))}",
            title="Verify",
            border_style="red",
        ))
        return EXIT_MISMATCH

    console.print(Panel(
        f"All {len(registry)} algorithms agree for 0 <= n <= {settings.verify.upper}",
        title="Verify",
        border_style="green",
    ))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fibbench",
        description="Benchmark four Fibonacci algorithms",
    )
    parser.add_argument("--config", default=None, help="Path to config YAML file")
    parser.add_argument("-n", "--index", type=int, default=None, help="Fibonacci index to compute")
    parser.add_argument(
        "--threshold", type=int, default=None, help="Run fib_recursive only below this index"
    )
    parser.add_argument(
        "--only",
        action="append",
        default=None,
        metavar="NAME",
        help="Benchmark only this algorithm (repeatable)",
    )
    parser.add_argument("--summary", action="store_true", help="Print a summary table")
    parser.add_argument("--verify", action="store_true", help="Check that all algorithms agree")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_config(args.config)
        if args.index is not None:
            settings.benchmark.target_index = args.index
        if args.threshold is not None:
            settings.benchmark.recursive_threshold = args.threshold
        if args.only:
            settings.benchmark.algorithms = args.only
        if args.verbose:
            settings.logging.level = "DEBUG"
        setup_logging(settings.logging)

        registry = default_registry()
        records = run_benchmarks(settings, registry)
    except (FibonacciError, ValidationError) as e:
        logger.debug("Run aborted", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return EXIT_INVALID

    if args.summary:
        display_summary(records, registry, console)

    if args.verify:
        return run_verify(settings, registry, console)

    return EXIT_OK
