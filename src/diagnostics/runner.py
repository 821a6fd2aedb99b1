"""Command-line runner for inspecting generator streams.

Usage examples:
    texrand draws --generator park_miller --seed 1 --count 5
    texrand perm --generator method1 --seed 42 --length 10
    texrand checks --seed 7
    texrand hist --generator multiprime --count 100000 --out hist.png
    texrand draws --config gen.json --set seed=5

Output is JSON on stdout so streams can be diffed across runs and machines.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from core.config import (
    apply_overrides,
    build_generator,
    load_generator_config,
    parse_generator_config,
)
from core.logging import configure_logging, get_logger
from core.types import GeneratorConfig
from diagnostics.checks import draw_array, run_checks
from diagnostics.plotting import plot_histogram
from generators.registry import available_generators, resolve_name
from permutation.knuth import random_permutation

__all__ = ["parse_args", "main"]

logger = get_logger(__name__)

MODES = ("draws", "perm", "checks", "hist")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].
    """
    parser = argparse.ArgumentParser(
        prog="texrand",
        description="Dump reproducible draws and permutations from the legacy generators.",
    )
    parser.add_argument("mode", choices=MODES)
    parser.add_argument(
        "--generator",
        default="park_miller",
        help=f"Generator name or alias ({', '.join(available_generators())}, method1..3)",
    )
    parser.add_argument("--seed", type=int, default=1)
    parser.add_argument("--config", type=Path, default=None, help="JSON file with name/seed")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config value (repeatable)",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of draws")
    parser.add_argument("--length", type=int, default=10, help="Permutation length")
    parser.add_argument("--out", type=Path, default=Path("histogram.png"))
    parser.add_argument("--bins", type=int, default=50)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Resolve the generator config from --config/--set or --generator/--seed."""
    if args.config is not None:
        return load_generator_config(args.config, args.overrides)
    raw: dict[str, Any] = {"name": args.generator, "seed": args.seed}
    if args.overrides:
        raw = apply_overrides(raw, args.overrides)
    return parse_generator_config(raw)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the stream runner.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for a bad argument, 2 for checks failure).
    """
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = build_config(args)
        canonical = resolve_name(config.name)
    except (KeyError, ValueError, TypeError) as e:
        logger.error("invalid configuration: %s", e)
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        return 1

    payload: dict[str, Any] = {"generator": canonical, "seed": config.seed}
    exit_code = 0

    try:
        if args.mode == "draws":
            gen = build_generator(config)
            payload["draws"] = draw_array(gen, args.count).tolist()
        elif args.mode == "perm":
            gen = build_generator(config)
            payload["perm"] = random_permutation(gen, args.length).tolist()
        elif args.mode == "hist":
            gen = build_generator(config)
            written = plot_histogram(
                draw_array(gen, args.count), args.out, bins=args.bins, title=canonical
            )
            payload["histogram"] = str(args.out) if written else None
        else:  # checks mode
            summary = run_checks([canonical], seed=config.seed)
            payload["checks"] = summary.to_json()
            if not summary.passed:
                exit_code = 2
    except ValueError as e:
        logger.error("invalid argument: %s", e)
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        return 1

    print(json.dumps(payload))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
