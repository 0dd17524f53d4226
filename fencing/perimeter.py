"""fencing.perimeter
=====================

Exposed-edge counting. A cell edge is exposed when the neighbour across it is
not a member of the same region, whether that neighbour lies outside the grid
or belongs to another region.
"""

from __future__ import annotations

from .constants import DIRECTIONS
from .objects import internal_adjacent_pairs
from .types import Region


def perimeter(region: Region) -> int:
    """Number of member-cell edges that border a non-member."""

    cells = region.cells
    return sum(
        1
        for x, y in cells
        for dx, dy in DIRECTIONS
        if (x + dx, y + dy) not in cells
    )


def closed_form_perimeter(region: Region) -> int:
    """``4 * area - 2 * internal pairs``; must equal :func:`perimeter`."""

    return 4 * region.area - 2 * internal_adjacent_pairs(region)


__all__ = ["perimeter", "closed_form_perimeter"]
