"""
Hex lattice geometry.

This module builds the hexagon-shaped board and the cursor that walks it.

Available pieces:
- HexLattice: the board, its cells and the cursor
- InvalidSizeError: raised for a negative board size
- build_cells: ring-by-ring construction of the cell graph
"""

from .hexagon import HexLattice, InvalidSizeError
from .rings import build_cells, count_cells, ring_sizes

__all__ = [
    'HexLattice',
    'InvalidSizeError',
    'build_cells',
    'count_cells',
    'ring_sizes',
]
