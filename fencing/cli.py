"""fencing.cli
===============

Command-line entry point: load a grid file, price it, print both totals.
"""

from __future__ import annotations

import argparse
import sys

from .constants import DEFAULT_INPUT
from .grid_utils import GridFormatError, load_grid
from .logging_utils import log_malformed
from .pricing import FenceConfig, price_grid


def main(argv: list[str] | None = None, cfg: FenceConfig | None = None) -> int:
    """Parse CLI arguments and print ``Part 1`` / ``Part 2`` totals.

    Returns the process exit status: ``0`` on success, ``1`` when the input
    file is missing or malformed.
    """

    parser = argparse.ArgumentParser("fencing", description="Garden plot fence pricing")
    parser.add_argument(
        "infile",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Plain-text grid, one row per line (default: {DEFAULT_INPUT})",
    )
    args = parser.parse_args(argv)
    cfg = cfg or FenceConfig()

    try:
        grid = load_grid(args.infile)
    except (FileNotFoundError, GridFormatError) as exc:
        print(f"[ERROR] {args.infile}: {exc}", file=sys.stderr)
        log_malformed(args.infile, exc, cfg.fail_log)
        return 1

    report = price_grid(grid, cfg)
    print("Part 1:", report.perimeter_total)
    print("Part 2:", report.sides_total)
    return 0


__all__ = ["main"]
