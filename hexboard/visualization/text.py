"""
ASCII rendering of a hex board.

Format (size 1, cursor on the centre)::

      O - O
     / \\ / \\
    O - * - O
     \\ / \\ /
      O - O

Cells are ``O``, the cursor cell is ``*``. A board of size 0 renders as a
single ``*``.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..core.lattice import HexLattice

CELL_GLYPH = 'O'
CURSOR_GLYPH = '*'
UPPER_LINK = '/ \\'
LOWER_LINK = '\\ /'


def _vertex_line(lattice: 'HexLattice', row: int, indent: int) -> str:
    glyphs = [
        CURSOR_GLYPH if (row, col) == (lattice.row, lattice.col) else CELL_GLYPH
        for col in range(lattice.row_length(row))
    ]
    return ' ' * indent + ' - '.join(glyphs) + '\n'


def _link_line(glyph: str, count: int, indent: int) -> str:
    return ' ' * indent + ' '.join([glyph] * count) + '\n'


def render_ascii(lattice: 'HexLattice') -> str:
    """
    Draw the board row by row.

    Parameters
    ----------
    lattice : HexLattice
        Board to draw; its cursor position is marked with ``*``

    Returns
    -------
    text : str
        Multi-line drawing ending in a newline
    """
    size = lattice.size
    if size == 0:
        return CURSOR_GLYPH + '\n'

    lines: List[str] = []
    for row in range(lattice.num_rows):
        length = lattice.row_length(row)
        offset = abs(row - size)

        if row < size:
            lines.append(_vertex_line(lattice, row, 2 * offset))
            lines.append(_link_line(UPPER_LINK, length, 2 * offset - 1))
        elif row == size:
            lines.append(_vertex_line(lattice, row, 0))
        else:
            lines.append(_link_line(LOWER_LINK, length, 2 * offset - 1))
            lines.append(_vertex_line(lattice, row, 2 * offset))

    return ''.join(lines)
