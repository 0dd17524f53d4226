"""fencing.encoders
====================

Textual encoding helpers for symbol grids. The loader and the CLI only ever
deal with rows of characters; keeping the text format here means the grid
class does not need to know how lines are split or joined.
"""

from __future__ import annotations

from typing import List, Protocol, Sequence


class GridEncoder(Protocol):
    """Interface for components converting symbol rows to and from text.

    Implementations should be stateless so callers can share instances.
    """

    def to_text(self, rows: Sequence[str]) -> str:
        """Serialise ``rows`` into a text snippet."""

    def to_rows(self, text: str) -> List[str]:
        """Split ``text`` back into symbol rows."""


class MinimalGridEncoder:
    """One line per row, one character per cell, no separators.

    This is the puzzle input format. Whitespace around the whole text is
    dropped and each line loses a trailing ``\\r`` from Windows line endings;
    rows are otherwise kept verbatim so ragged or blank rows reach the grid
    validation.
    """

    def to_text(self, rows: Sequence[str]) -> str:
        return "\n".join(rows)

    def to_rows(self, text: str) -> List[str]:
        stripped = text.strip()
        if not stripped:
            return []
        return [line.rstrip("\r") for line in stripped.split("\n")]


DEFAULT_ENCODER: GridEncoder = MinimalGridEncoder()
"""Encoder used by :func:`fencing.grid_utils.parse_grid` unless told otherwise."""


__all__ = ["GridEncoder", "MinimalGridEncoder", "DEFAULT_ENCODER"]
