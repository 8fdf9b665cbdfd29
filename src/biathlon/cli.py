"""Command line entry point.

Usage:
    biathlon-results --config config/config.json --events events
    python -m biathlon --config config.json --events events --summary --export
"""

import argparse
import logging
import sys

from biathlon.analysis import summarize
from biathlon.data import RaceDataLoader
from biathlon.engine import RaceProcessor, ReregistrationPolicy
from biathlon.errors import RaceError
from biathlon.output import ConsoleOutput, Exporter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biathlon-results",
        description="Reconstruct biathlon race results from an event log",
    )
    parser.add_argument("--config", "-c", required=True, help="Race configuration JSON file")
    parser.add_argument("--events", "-e", required=True, help="Event log file")
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Do not print per-event narration",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print race-wide statistics after the results",
    )
    parser.add_argument(
        "--reject-reregistration",
        action="store_true",
        help="Fail when a competitor registers twice (default: overwrite)",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Export results to CSV/JSON",
    )
    parser.add_argument(
        "--output-dir",
        default="output",
        help="Output directory for exports (default: output)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    policy = (
        ReregistrationPolicy.REJECT if args.reject_reregistration
        else ReregistrationPolicy.OVERWRITE
    )

    try:
        config, events = RaceDataLoader(args.config, args.events).load()
        outcome = RaceProcessor(config, policy=policy).process(events)
    except RaceError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        ConsoleOutput.print_narration(outcome.narration)
    ConsoleOutput.print_results(outcome.results)

    if args.summary:
        ConsoleOutput.print_summary(summarize(outcome.results))

    if args.export:
        exporter = Exporter(output_dir=args.output_dir)
        files = exporter.export_all(outcome.results)
        print("\nExported files:")
        for fmt, path in files.items():
            print(f"  {fmt}: {path}")

    return 0
