"""Command-line interface for map generation."""

import argparse
import logging
import os
import sys
import time
import tomllib
from pathlib import Path

import structlog
from pydantic import ValidationError


def default_seed() -> int:
    """Seed from the current time and process id, folded into signed 64 bits."""
    seed = (time.time_ns() // 1_000_000 * os.getpid()) & ((1 << 64) - 1)
    return seed - (1 << 64) if seed >= (1 << 63) else seed


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog console output."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a Timberborn map archive"
    )
    parser.add_argument("output", type=str, help="Output map file (e.g. map.timber)")
    parser.add_argument(
        "--width", type=int, default=256, help="Map width (default: 256)"
    )
    parser.add_argument(
        "--height", type=int, default=256, help="Map height (default: 256)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed used for generation (default: derived from time and pid)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a TOML generator config (optional)",
    )
    parser.add_argument(
        "--stored",
        action="store_true",
        help="Store the document uncompressed inside the archive",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for map generation.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # Import here to avoid slow startup for --help
    from ..exceptions import MapGenError
    from .config import GeneratorConfig, MapOptions, load_config
    from .generator import Generator

    seed = args.seed if args.seed is not None else default_seed()
    print(f"Seed: {seed}")

    try:
        config = load_config(Path(args.config)) if args.config else GeneratorConfig()
        options = MapOptions(width=args.width, height=args.height, seed=seed)

        generator = Generator(config)
        generator.generate_and_save(Path(args.output), options, compressed=not args.stored)
    except (MapGenError, ValidationError, tomllib.TOMLDecodeError, OSError) as e:
        print(f"error: {e}")
        return 1

    print(f"Saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
