"""fencing.pricing
===================

Aggregation: measure every region of a grid and total the two fence prices.
Metric A charges ``area * perimeter`` per region, metric B ``area * sides``.
Python integers do not overflow, so the totals are plain sums.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import FAIL_LOG
from .grid_utils import Grid
from .objects import extract_regions
from .perimeter import closed_form_perimeter, perimeter
from .sides import sides
from .types import FenceReport, Region, RegionPrice


@dataclass
class FenceConfig:
    """Configuration knobs for a pricing run."""

    verify_perimeter: bool = True
    fail_log: str = FAIL_LOG


def price_region(region: Region, cfg: FenceConfig | None = None) -> RegionPrice:
    """Measure ``region``.

    With ``cfg.verify_perimeter`` set, the edge count is checked against
    ``4 * area - 2 * internal pairs`` and a mismatch raises ``AssertionError``.
    """

    cfg = cfg or FenceConfig()
    edges = perimeter(region)
    if cfg.verify_perimeter:
        expected = closed_form_perimeter(region)
        if edges != expected:
            raise AssertionError(
                f"perimeter mismatch for region {region.symbol!r} at {region.anchor()}: "
                f"counted {edges}, closed form {expected}"
            )
    return RegionPrice(region=region, perimeter=edges, sides=sides(region))


def price_grid(grid: Grid, cfg: FenceConfig | None = None) -> FenceReport:
    """Price every region of ``grid``.

    Parameters
    ----------
    grid:
        Validated grid.
    cfg:
        Optional configuration; defaults to :class:`FenceConfig`.

    Returns
    -------
    FenceReport
        Region entries in discovery order plus both totals.
    """

    cfg = cfg or FenceConfig()
    report = FenceReport()
    for region in extract_regions(grid):
        entry = price_region(region, cfg)
        report.regions.append(entry)
        report.perimeter_total += entry.perimeter_price
        report.sides_total += entry.bulk_price
    return report


__all__ = ["FenceConfig", "price_region", "price_grid"]
