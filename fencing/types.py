"""fencing.types
=================

Type aliases and the small immutable records passed between the segmenter,
the boundary counters and the aggregator.

The module stays definitions-only so importing it never triggers runtime side
effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

# ---------------------------------------------------------------------------
# Core representations
# ---------------------------------------------------------------------------
Symbol = str
Cell = Tuple[int, int]
Orientation = str


@dataclass(frozen=True)
class Region:
    """Maximal 4-connected set of cells carrying the same symbol.

    Parameters
    ----------
    symbol:
        Plot label shared by every member cell.
    cells:
        ``(x, y)`` coordinates of the members. Membership tests elsewhere in
        the package use this set, never the symbol, because two disjoint
        regions may carry the same label.
    """

    symbol: Symbol
    cells: FrozenSet[Cell]

    @property
    def area(self) -> int:
        return len(self.cells)

    def anchor(self) -> Cell:
        """First member in row-major order."""

        y, x = min((y, x) for x, y in self.cells)
        return x, y


@dataclass(frozen=True)
class RegionPrice:
    """Boundary measures of one region and the two prices derived from them."""

    region: Region
    perimeter: int
    sides: int

    @property
    def area(self) -> int:
        return self.region.area

    @property
    def perimeter_price(self) -> int:
        return self.area * self.perimeter

    @property
    def bulk_price(self) -> int:
        return self.area * self.sides


@dataclass
class FenceReport:
    """Per-region prices plus the two reported totals."""

    regions: List[RegionPrice] = field(default_factory=list)
    perimeter_total: int = 0
    sides_total: int = 0


__all__ = [
    "Symbol",
    "Cell",
    "Orientation",
    "Region",
    "RegionPrice",
    "FenceReport",
]
