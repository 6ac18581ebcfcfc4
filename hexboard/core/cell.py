"""
A single cell of the hex board.

Cells hold an opaque payload and six neighbour slots. Neighbours are
referenced by their index in the owning lattice's cell list, never by a
direct reference, so a cell never owns another cell.
"""

from typing import Any, List, Optional

from .direction import Direction


class Cell:
    """
    Node of the hex lattice.

    Parameters
    ----------
    index : int
        Position of this cell in the lattice's cell list
    payload : Any, optional
        Caller-supplied item (default: None)

    Notes
    -----
    ``set_neighbor`` is a one-way write: it does NOT set the reciprocal slot
    on the target. Keeping ``A.neighbor(D) == B`` and
    ``B.neighbor(D.opposite) == A`` in sync is the job of whoever wires the
    cells together (see ``hexboard.core.lattice.rings``).
    """

    __slots__ = ('index', 'payload', '_neighbors')

    def __init__(self, index: int, payload: Any = None):
        self.index = index
        self.payload = payload
        self._neighbors: List[Optional[int]] = [None] * len(Direction)

    def neighbor(self, direction: Direction) -> Optional[int]:
        """Index of the neighbour in ``direction``, or None at the boundary."""
        return self._neighbors[direction]

    def set_neighbor(self, direction: Direction, index: Optional[int]) -> None:
        """Point the ``direction`` slot at cell ``index`` (None clears it)."""
        self._neighbors[direction] = index

    def has_neighbor(self, direction: Direction) -> bool:
        return self._neighbors[direction] is not None

    def neighbors(self) -> List[Optional[int]]:
        """All six slots in ``Direction`` order."""
        return list(self._neighbors)

    def degree(self) -> int:
        """Number of populated neighbour slots."""
        return sum(n is not None for n in self._neighbors)

    def __repr__(self) -> str:
        return f"Cell(index={self.index}, degree={self.degree()}, payload={self.payload!r})"
