"""fencing.objects
===================

Region extraction: partition a grid into maximal 4-connected same-symbol
regions with a BFS flood fill, plus the vectorised internal-pair count behind
the closed-form perimeter check. Regions come back as frozen dataclasses so a
memoised result can be handed to any number of callers safely.
"""

from __future__ import annotations

from collections import deque
from functools import lru_cache
from typing import FrozenSet, List

import numpy as np

from .constants import DIRECTIONS
from .grid_utils import Grid, dims
from .types import Region


@lru_cache(maxsize=64)
def _cached_extract_regions(grid: Grid) -> tuple:
    """Return the regions of ``grid`` in discovery order.

    Parameters
    ----------
    grid:
        Hashable, immutable grid used directly as the cache key.

    Returns
    -------
    tuple[Region, ...]
        One entry per region, ordered by the row-major position of the cell
        that started its flood fill.
    """

    height, width = dims(grid)
    visited = np.zeros((height, width), dtype=bool)
    regions: List[Region] = []

    for y in range(height):
        for x in range(width):
            if visited[y, x]:
                continue
            symbol = grid.at(x, y)
            visited[y, x] = True
            queue = deque([(x, y)])
            cells = {(x, y)}
            while queue:
                cx, cy = queue.popleft()
                for dx, dy in DIRECTIONS:
                    nx, ny = cx + dx, cy + dy
                    if grid.in_bounds(nx, ny) and not visited[ny, nx] and grid.at(nx, ny) == symbol:
                        visited[ny, nx] = True
                        cells.add((nx, ny))
                        queue.append((nx, ny))
            regions.append(Region(symbol, frozenset(cells)))
    return tuple(regions)


def extract_regions(grid: Grid) -> List[Region]:
    """Regions of ``grid`` in discovery (row-major) order."""

    return list(_cached_extract_regions(grid))


def segment(grid: Grid) -> FrozenSet[Region]:
    """Partition ``grid`` into its regions.

    Every cell lands in exactly one region. The result is an unordered set;
    use :func:`extract_regions` when a stable order matters.
    """

    return frozenset(_cached_extract_regions(grid))


def internal_adjacent_pairs(region: Region) -> int:
    """Count unordered pairs of member cells that share an edge."""

    if not region.cells:
        return 0
    xs = [x for x, _ in region.cells]
    ys = [y for _, y in region.cells]
    x0, y0 = min(xs), min(ys)
    local = np.zeros((max(ys) - y0 + 1, max(xs) - x0 + 1), dtype=bool)
    local[[y - y0 for y in ys], [x - x0 for x in xs]] = True
    horizontal = np.count_nonzero(local[:, 1:] & local[:, :-1])
    vertical = np.count_nonzero(local[1:, :] & local[:-1, :])
    return int(horizontal + vertical)


__all__ = ["extract_regions", "segment", "internal_adjacent_pairs"]
