"""fencing.sides
=================

Side counting. A side is a maximal straight run of boundary edges facing the
same way. Cells are first bucketed by which of their four edges are exposed;
within one bucket, cells are merged only along the run direction of that
edge: vertically for left/right edges, horizontally for top/bottom edges.
Merging along the normal instead would join edges that sit on different
boundary lines.
"""

from __future__ import annotations

from typing import Dict, FrozenSet

from .constants import ORIENTATIONS
from .types import Cell, Orientation, Region
from .union_find import DisjointSet


def boundary_cells(region: Region, orientation: Orientation) -> FrozenSet[Cell]:
    """Member cells whose neighbour across the ``orientation`` edge is outside ``region``.

    Raises ``KeyError`` for an unknown orientation name.
    """

    (dx, dy), _ = ORIENTATIONS[orientation]
    cells = region.cells
    return frozenset((x, y) for x, y in cells if (x + dx, y + dy) not in cells)


def count_sides(cells: FrozenSet[Cell], orientation: Orientation) -> int:
    """Number of maximal runs among ``cells`` along ``orientation``'s run step.

    Parameters
    ----------
    cells:
        Boundary cells that all share an exposed edge of ``orientation``.
    orientation:
        One of ``left``, ``right``, ``top``, ``bottom``.

    Returns
    -------
    int
        Connected components after joining each cell with its run-step
        neighbour. An empty set has no sides.
    """

    if not cells:
        return 0
    _, (sx, sy) = ORIENTATIONS[orientation]
    groups = DisjointSet(cells)
    for x, y in cells:
        neighbour = (x + sx, y + sy)
        if neighbour in cells:
            groups.union((x, y), neighbour)
    return groups.component_count


def sides_by_orientation(region: Region) -> Dict[Orientation, int]:
    """Side count of ``region`` for each of the four orientations."""

    return {
        orientation: count_sides(boundary_cells(region, orientation), orientation)
        for orientation in ORIENTATIONS
    }


def sides(region: Region) -> int:
    """Total number of straight sides bounding ``region``."""

    return sum(sides_by_orientation(region).values())


__all__ = ["boundary_cells", "count_sides", "sides_by_orientation", "sides"]
