"""
Ring-by-ring construction of a hexagon-shaped lattice.

Layout
------
Ring ``i`` (``i = 1..size``) holds the ``6*i`` cells at graph distance ``i``
from the centre. It is laid out clockwise in six sectors ``k = 0..5``, one
per ``Direction`` in clockwise order ``D_0 = UP_RIGHT, ..., D_5 = UP_LEFT``.
Sector ``k`` starts with a corner cell (``i`` steps from the centre along
``D_k``) followed by ``i - 1`` edge cells, each one step along ``D_{k+2}``
from the previous one::

    ring position p = k*i + j,   j = 0 (corner) .. i-1

Links installed for the cell at ``(k, j)`` of ring ``i``:

- inward along ``D_{k+3}`` to position ``k*(i-1) + j`` of ring ``i-1``
  (the centre when ``i == 1``);
- edge cells only (``j >= 1``): inward along ``D_{k+4}`` to position
  ``k*(i-1) + j - 1`` of ring ``i-1``;
- sideways to the previous cell of the ring along ``D_{s+2}``, where ``s``
  is the sector of that previous cell. The last cell is stitched back to the
  first corner the same way, closing the ring.

Every link is written on both ends at once, and every (cell, direction) slot
is written at most once. Corners therefore get one inward link and edges
two, which leaves outer corners with degree 3, outer edges with degree 4
and every other cell with degree 6 once the next ring is built.
"""

import logging
from typing import List

from ..cell import Cell
from ..direction import Direction

logger = logging.getLogger(__name__)

CLOCKWISE = tuple(Direction)


def ring_sizes(size: int) -> List[int]:
    """Number of cells in rings ``0..size``."""
    return [1] + [6 * i for i in range(1, size + 1)]


def count_cells(size: int) -> int:
    """Total number of cells on a board of ``size`` (``3n(n+1) + 1``)."""
    return 3 * size * (size + 1) + 1


def link(cells: List[Cell], source: int, direction: Direction, target: int) -> None:
    """Connect two cells in both directions."""
    cells[source].set_neighbor(direction, target)
    cells[target].set_neighbor(direction.opposite, source)


def build_ring(cells: List[Cell], inner: List[int], radius: int) -> List[int]:
    """
    Append ring ``radius`` to ``cells`` and wire it to the ring inside it.

    Parameters
    ----------
    cells : List[Cell]
        Cell store, extended in place
    inner : List[int]
        Cell indices of ring ``radius - 1`` in clockwise order starting at
        its UP_RIGHT corner (``[centre]`` for ``radius == 1``)
    radius : int
        Ring number, at least 1

    Returns
    -------
    ring : List[int]
        Cell indices of the new ring, same ordering convention as ``inner``
    """
    ring: List[int] = []
    inner_count = len(inner)

    for k, corner_direction in enumerate(CLOCKWISE):
        for j in range(radius):
            index = len(cells)
            cells.append(Cell(index))

            link(cells, index, corner_direction.rotate(3),
                 inner[(k * (radius - 1) + j) % inner_count])
            if j > 0:
                link(cells, index, corner_direction.rotate(4),
                     inner[k * (radius - 1) + j - 1])

            if ring:
                previous_sector = (len(ring) - 1) // radius
                link(cells, ring[-1], CLOCKWISE[previous_sector].rotate(2), index)

            ring.append(index)

    # close the ring: last edge of the UP_LEFT sector -> UP_RIGHT corner
    link(cells, ring[-1], CLOCKWISE[-1].rotate(2), ring[0])
    return ring


def build_cells(size: int) -> List[Cell]:
    """
    Create and wire every cell of a board of ``size``.

    Returns
    -------
    cells : List[Cell]
        Cell store; index 0 is the centre, followed by ring 1, ring 2, ...
    """
    cells = [Cell(0)]
    ring = [0]

    for radius in range(1, size + 1):
        ring = build_ring(cells, ring, radius)
        logger.debug("Built ring %d: %d cells (total %d)", radius, len(ring), len(cells))

    logger.debug("Hex lattice of size %d built with %d cells", size, len(cells))
    return cells
