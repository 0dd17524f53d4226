"""Public package interface for fencing."""

from .cli import main
from .grid_utils import Grid, GridFormatError, load_grid, parse_grid
from .objects import segment
from .perimeter import perimeter
from .pricing import FenceConfig, price_grid
from .sides import sides

__all__ = [
    "main",
    "Grid",
    "GridFormatError",
    "load_grid",
    "parse_grid",
    "segment",
    "perimeter",
    "sides",
    "FenceConfig",
    "price_grid",
]
