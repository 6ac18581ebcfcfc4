import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.lattice import HexLattice

cell_color = '#2E86AB'
cursor_color = '#EC9A29'
link_color = 'lightgray'


class LatticePlotter:
    def __init__(self):
        pass

    @staticmethod
    def cell_positions(lattice: 'HexLattice') -> np.ndarray:
        """Cartesian (x, y) of every cell, shape (num_cells, 2)."""
        coords = lattice.coordinates()
        rows = coords[:, 0].astype(float)
        cols = coords[:, 1].astype(float)
        x = cols + np.abs(rows - lattice.size) / 2.0
        y = -rows * np.sqrt(3) / 2.0
        return np.column_stack([x, y])

    @staticmethod
    def draw_links(ax, lattice: 'HexLattice', positions: np.ndarray):
        table = lattice.neighbor_table()
        # each undirected edge once: only the right-hand half of the directions
        for source, targets in enumerate(table[:, :3]):
            for target in targets[targets >= 0]:
                start, end = positions[source], positions[target]
                ax.plot([start[0], end[0]], [start[1], end[1]],
                        color=link_color, linewidth=1.0, zorder=1)

    @staticmethod
    def plot(lattice: 'HexLattice',
             ax=None,
             show_links: bool = True,
             annotate: bool = False,
             title: Optional[str] = None):
        """
        Draw the board, cursor highlighted.

        Parameters
        ----------
        lattice : HexLattice
            Board to draw
        ax : matplotlib Axes, optional
            Axes to draw into; a new figure is created if None
        show_links : bool
            Draw the edges between neighbouring cells
        annotate : bool
            Label every cell with its ``(row, col)``
        title : str, optional
            Axes title (default: "Hex board (size n)")

        Returns
        -------
        ax : matplotlib Axes
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(6, 6))

        positions = LatticePlotter.cell_positions(lattice)

        if show_links:
            LatticePlotter.draw_links(ax, lattice, positions)

        ax.scatter(positions[:, 0], positions[:, 1],
                   color=cell_color, s=120, zorder=2)
        cursor = positions[lattice.current]
        ax.scatter([cursor[0]], [cursor[1]],
                   color=cursor_color, marker='*', s=300, zorder=3)

        if annotate:
            for (x, y), (row, col) in zip(positions, lattice.coordinates()):
                ax.annotate(f"{row},{col}", (x, y), textcoords="offset points",
                            xytext=(0, 8), ha='center', fontsize=7)

        ax.set_title(title or f"Hex board (size {lattice.size})")
        ax.set_aspect('equal')
        ax.set_axis_off()
        return ax
