"""
Hexagon-shaped lattice with a walking cursor.

The board of size ``n`` looks like this for ``n = 2`` (rows on the left,
columns within each row on the right)::

        O - O - O              0 - 1 - 2
       / \\ / \\ / \\
      O - O - O - O          0 - 1 - 2 - 3
     / \\ / \\ / \\ / \\
    O - O - O - O - O      0 - 1 - 2 - 3 - 4      <- pivot row (row n)
     \\ / \\ / \\ / \\ /
      O - O - O - O          0 - 1 - 2 - 3
       \\ / \\ / \\ /
        O - O - O              0 - 1 - 2

Rows run ``0..2n`` and row ``r`` has ``n + 1 + min(r, 2n - r)`` cells.
The cursor starts on the centre cell, which sits at ``row = col = n``.
"""

from collections import deque
from typing import Any, Dict, Iterable, List, Union

import numpy as np

from ..cell import Cell
from ..direction import Direction, step_delta
from .rings import build_cells


class InvalidSizeError(ValueError):
    """Raised when a lattice is requested with a negative size."""


DirectionLike = Union[Direction, int, str]


class HexLattice:
    """
    Bounded hex lattice of six-connected cells with a cursor.

    All cells and links are built up front. Afterwards the only mutable state
    is the cursor ``(current cell, row, col)``, which moves one hop at a time
    with ``step``, and the payload stored in each cell.

    Parameters
    ----------
    size : int
        Number of rings around the centre cell (``size >= 0``)

    Attributes
    ----------
    size : int
        Board size (read-only)
    centre : int
        Index of the centre cell (always 0)
    current : int
        Index of the cell under the cursor
    row, col : int
        Coordinates of the cursor

    Raises
    ------
    InvalidSizeError
        If ``size`` is negative
    TypeError
        If ``size`` is not an integer

    Examples
    --------
    >>> board = HexLattice(1)
    >>> board.row, board.col
    (1, 1)
    >>> board.step(Direction.UP_LEFT)
    True
    >>> board.row, board.col
    (0, 0)
    >>> board.step('ml')
    False

    Notes
    -----
    A step toward a missing neighbour is not an error: ``step`` returns
    False and leaves the cursor where it was. Cells are only reachable
    through the cursor; there is no ``(row, col)`` lookup.
    """

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"size must be an integer, got {type(size).__name__}")
        if size < 0:
            raise InvalidSizeError(f"HexLattice size must be at least 0, got {size}")

        self._size = int(size)
        self._cells: List[Cell] = build_cells(self._size)
        self._centre = 0

        self._current = self._centre
        self._row = self._size
        self._col = self._size

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def centre(self) -> int:
        return self._centre

    @property
    def current(self) -> int:
        return self._current

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def num_cells(self) -> int:
        return len(self._cells)

    @property
    def num_rows(self) -> int:
        return 2 * self._size + 1

    def row_length(self, row: int) -> int:
        """
        Number of cells in ``row``.

        Raises
        ------
        ValueError
            If ``row`` is outside ``0..2*size``
        """
        if not 0 <= row <= 2 * self._size:
            raise ValueError(f"row must be in 0..{2 * self._size}, got {row}")
        return self._size + 1 + min(row, 2 * self._size - row)

    # ------------------------------------------------------------------
    # Payloads
    # ------------------------------------------------------------------

    def get_current_payload(self) -> Any:
        return self._cells[self._current].payload

    def set_current_payload(self, payload: Any) -> None:
        self._cells[self._current].payload = payload

    def get_centre_payload(self) -> Any:
        return self._cells[self._centre].payload

    def set_centre_payload(self, payload: Any) -> None:
        self._cells[self._centre].payload = payload

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def can_step(self, direction: DirectionLike) -> bool:
        """Whether ``step(direction)`` would currently succeed."""
        return self._cells[self._current].has_neighbor(Direction.parse(direction))

    def step(self, direction: DirectionLike) -> bool:
        """
        Move the cursor one hop in ``direction``.

        Parameters
        ----------
        direction : Direction, int or str
            Anything ``Direction.parse`` accepts

        Returns
        -------
        moved : bool
            True if the cursor moved, False if the current cell has no
            neighbour in that direction (cursor unchanged)
        """
        direction = Direction.parse(direction)
        target = self._cells[self._current].neighbor(direction)
        if target is None:
            return False

        d_row, d_col = step_delta(direction, self._row, self._size)
        self._current = target
        self._row += d_row
        self._col += d_col
        return True

    def walk(self, directions: Iterable[DirectionLike]) -> List[bool]:
        """Apply ``step`` for each direction in turn and collect the results."""
        return [self.step(direction) for direction in directions]

    def reset_to_centre(self) -> None:
        """Put the cursor back on the centre cell (``row = col = size``)."""
        self._current = self._centre
        self._row = self._size
        self._col = self._size

    # ------------------------------------------------------------------
    # Whole-lattice views
    # ------------------------------------------------------------------

    def neighbor_table(self) -> np.ndarray:
        """
        Neighbour indices of every cell.

        Returns
        -------
        table : np.ndarray, shape (num_cells, 6)
            ``table[i, d]`` is the index of the neighbour of cell ``i`` in
            ``Direction(d)``, or -1 if there is none. The array is a
            read-only copy.
        """
        table = np.array(
            [[-1 if n is None else n for n in cell.neighbors()] for cell in self._cells],
            dtype=np.int64,
        ).reshape(len(self._cells), len(Direction))
        table.setflags(write=False)
        return table

    def degrees(self) -> np.ndarray:
        """Number of neighbours of every cell, shape (num_cells,)."""
        return np.array([cell.degree() for cell in self._cells], dtype=np.int64)

    def coordinates(self) -> np.ndarray:
        """
        ``(row, col)`` of every cell.

        Derived by breadth-first search from the centre with the same step
        rule the cursor uses, so it agrees with any walk the cursor makes.

        Returns
        -------
        coords : np.ndarray, shape (num_cells, 2)
            ``coords[i]`` is the ``(row, col)`` of cell ``i``
        """
        coords = np.full((len(self._cells), 2), -1, dtype=np.int64)
        coords[self._centre] = (self._size, self._size)
        queue = deque([self._centre])

        while queue:
            index = queue.popleft()
            row, col = coords[index]
            for direction in Direction:
                target = self._cells[index].neighbor(direction)
                if target is None or coords[target, 0] >= 0:
                    continue
                d_row, d_col = step_delta(direction, row, self._size)
                coords[target] = (row + d_row, col + d_col)
                queue.append(target)

        return coords

    def to_dict(self) -> Dict:
        """
        Serialize board shape and cursor position.

        Returns
        -------
        data : Dict
            Keys ``type``, ``size``, ``num_cells``, ``row``, ``col``
        """
        return {
            'type': 'hexagon',
            'size': self._size,
            'num_cells': self.num_cells,
            'row': self._row,
            'col': self._col,
        }

    def render(self) -> str:
        """ASCII drawing of the board with the cursor marked ``*``."""
        from ...visualization.text import render_ascii
        return render_ascii(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"HexLattice(size={self._size}, cells={self.num_cells}, "
                f"cursor=({self._row}, {self._col}))")
