"""
Core domain models for the hexboard package.

This module contains the fundamental abstractions:
- Direction: the six neighbour directions and the cursor step table
- Cell: a board node holding a payload and six neighbour slots
- HexLattice: the hexagon-shaped board with its walking cursor

Rendering lives in ``hexboard.visualization`` and builds on these.
"""

from .direction import Direction, STEP_DELTAS, step_delta, pivot_side
from .cell import Cell
from .lattice import (
    HexLattice,
    InvalidSizeError,
    build_cells,
    count_cells,
    ring_sizes,
)

__all__ = [
    # Directions
    'Direction',
    'STEP_DELTAS',
    'step_delta',
    'pivot_side',

    # Cells
    'Cell',

    # Lattice
    'HexLattice',
    'InvalidSizeError',
    'build_cells',
    'count_cells',
    'ring_sizes',
]
