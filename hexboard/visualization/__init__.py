"""
Visualization tools for hex boards.

- render_ascii: fixed-format text drawing (used by ``HexLattice.__str__``)
- LatticePlotter: matplotlib drawing of cells, links and the cursor
"""

from .text import render_ascii
from .plotter import LatticePlotter

__all__ = [
    'render_ascii',
    'LatticePlotter',
]
