"""Command-line entry point for movement-recon."""

import argparse
import sys
from pathlib import Path

from movement_recon.config import ReconConfig
from movement_recon.exceptions import ConfigurationError
from movement_recon.generators import MovementGenerator, render_table
from movement_recon.logging import get_logger, setup_logging
from movement_recon.pipeline import ReconciliationPipeline

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="movement-recon",
        description="Reconcile deposits against withdrawals from a movement page",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Fetch the page and compute the remaining amount")
    source = run_parser.add_mutually_exclusive_group()
    source.add_argument("--url", type=str, help="Movement page URL (default: $MOVEMENT_URL)")
    source.add_argument("--file", type=Path, help="Read a saved page instead of fetching")
    run_parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    run_parser.add_argument("--log-level", type=str, help="Log level (default: $LOG_LEVEL or INFO)")
    run_parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        help="Log format (default: $LOG_FORMAT or standard)",
    )

    sample_parser = subparsers.add_parser("sample", help="Write a synthetic movement page")
    sample_parser.add_argument("--count", type=int, default=40, help="Number of rows (default: 40)")
    sample_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    sample_parser.add_argument(
        "--output",
        type=Path,
        default=Path("hareket.html"),
        help="Output file (default: hareket.html)",
    )
    return parser


def _apply_overrides(config: ReconConfig, args: argparse.Namespace) -> ReconConfig:
    if args.url:
        config.fetch.url = args.url
        config.source_file = None
    if args.file:
        config.source_file = args.file
    if args.timeout is not None:
        config.fetch.timeout_seconds = args.timeout
    if args.log_level:
        config.logging.level = args.log_level
    if args.log_format:
        config.logging.format_type = args.log_format
    return config


def cmd_run(args: argparse.Namespace) -> int:
    """Run the reconciliation pipeline."""
    try:
        config = ReconConfig.from_env()
    except ConfigurationError as e:
        setup_logging()
        logger.error("Error: %s", e)
        return 2

    config = _apply_overrides(config, args)
    setup_logging(level=config.logging.level, format_type=config.logging.format_type)
    ReconciliationPipeline(config=config, logger=get_logger("movement_recon")).run()
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    """Generate a sample movement page."""
    setup_logging()
    movements = MovementGenerator(seed=args.seed).generate_batch(args.count)
    args.output.write_text(render_table(movements), encoding="utf-8")
    logger.info("Saved %d movements to %s", len(movements), args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    if args.command == "sample":
        return cmd_sample(args)
    return cmd_run(args)


if __name__ == "__main__":
    sys.exit(main())
