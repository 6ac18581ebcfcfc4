"""
Directions on the hex board.

The six principal directions are numbered clockwise starting at UP_RIGHT,
so that rotating by one sector is ``+1 (mod 6)`` and the opposite direction
is ``+3 (mod 6)``:

        UP_LEFT   UP_RIGHT
              \\   /
    MID_LEFT - O - MID_RIGHT
              /   \\
      DOWN_LEFT   DOWN_RIGHT

Row/column bookkeeping
----------------------
The board is stored row by row, rows ``0..2*size``. Rows grow by one cell
per row down to the widest (pivot) row ``size`` and shrink again after it,
so the column shift of a diagonal step depends on which side of the pivot
row the cursor starts from. ``STEP_DELTAS`` holds that rule as a table
indexed by ``[direction, side]`` where ``side = sign(row - size) + 1``.
"""

from enum import IntEnum
from typing import Tuple, Union

import numpy as np


class Direction(IntEnum):
    """The six neighbour directions, in clockwise order."""

    UP_RIGHT = 0
    MID_RIGHT = 1
    DOWN_RIGHT = 2
    DOWN_LEFT = 3
    MID_LEFT = 4
    UP_LEFT = 5

    @property
    def opposite(self) -> 'Direction':
        """Direction pointing back along the same edge."""
        return Direction((self + 3) % 6)

    def rotate(self, steps: int = 1) -> 'Direction':
        """Rotate clockwise by ``steps`` sectors (negative = anticlockwise)."""
        return Direction((self + steps) % 6)

    @property
    def alias(self) -> str:
        """Two-letter short name, e.g. ``'ul'`` for UP_LEFT."""
        vertical, horizontal = self.name.split('_')
        return (vertical[0] + horizontal[0]).lower()

    @classmethod
    def parse(cls, value: Union['Direction', int, str]) -> 'Direction':
        """
        Convert a name, alias or integer into a Direction.

        Parameters
        ----------
        value : Direction, int or str
            ``Direction.UP_LEFT``, ``5``, ``'UP_LEFT'``, ``'up-left'``
            and ``'ul'`` all give the same direction.

        Raises
        ------
        ValueError
            If the string or integer does not name a direction
        TypeError
            If ``value`` is of any other type
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().upper().replace('-', '_')
            if key in cls.__members__:
                return cls[key]
            for direction in cls:
                if direction.alias == key.lower():
                    return direction
            valid = ', '.join(d.alias for d in cls)
            raise ValueError(f"Unknown direction '{value}'. Valid aliases: {valid}")

        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            return cls(int(value))

        raise TypeError(f"Cannot interpret {type(value).__name__} as a Direction")


# (d_row, d_col) per direction and side of the pivot row.
# Side index: 0 = above (row < size), 1 = on (row == size), 2 = below (row > size)
STEP_DELTAS = np.array([
    # above     on         below
    [(-1, 0),  (-1, 0),  (-1, +1)],   # UP_RIGHT
    [(0, +1),  (0, +1),  (0, +1)],    # MID_RIGHT
    [(+1, +1), (+1, 0),  (+1, 0)],    # DOWN_RIGHT
    [(+1, 0),  (+1, -1), (+1, -1)],   # DOWN_LEFT
    [(0, -1),  (0, -1),  (0, -1)],    # MID_LEFT
    [(-1, -1), (-1, -1), (-1, 0)],    # UP_LEFT
], dtype=int)
STEP_DELTAS.setflags(write=False)


def pivot_side(row: int, size: int) -> int:
    """Column of ``STEP_DELTAS`` to use for a cursor on ``row``."""
    return int(np.sign(row - size)) + 1


def step_delta(direction: Direction, row: int, size: int) -> Tuple[int, int]:
    """
    Coordinate change for one step.

    Parameters
    ----------
    direction : Direction
        Direction of the step
    row : int
        Row of the cursor *before* the step
    size : int
        Board size (the pivot row index)

    Returns
    -------
    delta : Tuple[int, int]
        ``(d_row, d_col)`` to add to the cursor coordinates
    """
    d_row, d_col = STEP_DELTAS[direction, pivot_side(row, size)]
    return int(d_row), int(d_col)
