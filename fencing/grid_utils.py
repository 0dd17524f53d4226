"""fencing.grid_utils
======================

The immutable symbol grid and the helpers that build it from text. Everything
downstream (segmentation, perimeter, sides) reads cells through
:meth:`Grid.at`, so the bounds policy lives in exactly one place: outside
coordinates return :data:`~fencing.constants.EMPTY`, which never equals a real
symbol.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Sequence, Tuple


from .constants import EMPTY
from .encoders import DEFAULT_ENCODER, GridEncoder
from .types import Cell, Symbol


class GridFormatError(ValueError):
    """Raised when text input does not describe a rectangular grid."""


class Grid:
    """Rectangular, read-only matrix of single-character symbols.

    Parameters
    ----------
    rows:
        One string per row, top to bottom. All rows must be non-empty and of
        equal length.

    Raises
    ------
    GridFormatError
        If ``rows`` is empty, contains an empty row, or is ragged.
    """

    __slots__ = ("_rows", "width", "height")

    def __init__(self, rows: Sequence[str]) -> None:
        rows = tuple(rows)
        if not rows:
            raise GridFormatError("Grid input is empty")
        width = len(rows[0])
        if width == 0:
            raise GridFormatError("Grid row 0 is empty")
        mismatched = [idx for idx, row in enumerate(rows) if len(row) != width]
        if mismatched:
            detail = ", ".join(f"row {idx} has {len(rows[idx])}" for idx in mismatched)
            raise GridFormatError(
                f"Inconsistent row lengths: expected {width} columns (from row 0); {detail}"
            )
        self._rows: Tuple[str, ...] = rows
        self.width = width
        self.height = len(rows)

    def at(self, x: int, y: int) -> Symbol:
        if self.in_bounds(x, y):
            return self._rows[y][x]
        return EMPTY

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Cell]:
        """Yield every coordinate in row-major order."""

        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    @property
    def rows(self) -> Tuple[str, ...]:
        return self._rows

    def to_text(self, encoder: GridEncoder = DEFAULT_ENCODER) -> str:
        return encoder.to_text(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"


def dims(grid: Grid) -> Tuple[int, int]:
    """Return ``(height, width)`` of ``grid``."""

    return grid.height, grid.width


def parse_grid(text: str, encoder: GridEncoder = DEFAULT_ENCODER) -> Grid:
    """Build a :class:`Grid` from puzzle text.

    Parameters
    ----------
    text:
        Raw file contents, one row per line.
    encoder:
        Splits ``text`` into rows. Defaults to the plain one-char-per-cell
        format.

    Returns
    -------
    Grid
        Validated, immutable grid.
    """

    return Grid(encoder.to_rows(text))


def load_grid(path: str | Path, encoder: GridEncoder = DEFAULT_ENCODER) -> Grid:
    """Read ``path`` as UTF-8 and parse it. Missing files propagate ``FileNotFoundError``."""

    return parse_grid(Path(path).read_text(encoding="utf-8"), encoder)


__all__ = ["Grid", "GridFormatError", "dims", "parse_grid", "load_grid"]
