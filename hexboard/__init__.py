"""
hexboard: Hexagon Board Package

A bounded, hexagon-shaped lattice of six-connected cells together with a
cursor that walks the lattice along its six directions while keeping a
``(row, col)`` coordinate in step with the walk.

Main Components
---------------
core : Direction, Cell, HexLattice
visualization : ASCII rendering and matplotlib plotting
cli : command-line harness (``python -m hexboard``)

Quick Start
-----------
>>> from hexboard import HexLattice, Direction
>>>
>>> board = HexLattice(2)
>>> board.step(Direction.UP_LEFT)
True
>>> board.set_current_payload('token')
>>> print(board)
"""

__version__ = "0.1.0"

from .core import (
    Direction,
    Cell,
    HexLattice,
    InvalidSizeError,
)

__all__ = [
    '__version__',
    'Direction',
    'Cell',
    'HexLattice',
    'InvalidSizeError',
]
