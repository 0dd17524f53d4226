"""fencing.constants
=====================

Global constants shared by the segmentation and pricing modules. Keeping them
here avoids import cycles and gives a single place to look up direction
conventions.
"""

from __future__ import annotations

from typing import Dict, Tuple

DEFAULT_INPUT = "input.txt"
FAIL_LOG = "malformed_grids.jsonl"

# Returned by ``Grid.at`` outside the grid. Never equal to a real symbol.
EMPTY = ""

# (dx, dy) in screen coordinates: y grows downwards.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

# orientation -> (normal towards the outside neighbour, step along the side)
ORIENTATIONS: Dict[str, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    "left": ((-1, 0), (0, 1)),
    "right": ((1, 0), (0, 1)),
    "top": ((0, -1), (1, 0)),
    "bottom": ((0, 1), (1, 0)),
}

__all__ = ["DEFAULT_INPUT", "FAIL_LOG", "EMPTY", "DIRECTIONS", "ORIENTATIONS"]
