"""
Unit tests for LatticePlotter (non-interactive backend).
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from hexboard.core import Direction
from hexboard.core.lattice import HexLattice
from hexboard.visualization import LatticePlotter


class TestLatticePlotter:
    """Test positions and drawn artists."""

    def test_positions_are_hexagonal(self):
        """Test neighbouring cells are one unit apart."""
        lattice = HexLattice(2)
        positions = LatticePlotter.cell_positions(lattice)
        table = lattice.neighbor_table()

        for source, targets in enumerate(table):
            for target in targets[targets >= 0]:
                distance = np.linalg.norm(positions[source] - positions[target])
                assert np.isclose(distance, 1.0)

    def test_centre_position(self):
        """Test the centre sits at x = size on the pivot row."""
        lattice = HexLattice(3)
        positions = LatticePlotter.cell_positions(lattice)

        assert np.allclose(positions[lattice.centre], [3.0, -3 * np.sqrt(3) / 2])

    @pytest.mark.parametrize("size", [0, 1, 3])
    def test_plot_draws_every_cell_and_link(self, size):
        """Test one scatter point per cell and one line per edge."""
        lattice = HexLattice(size)

        ax = LatticePlotter.plot(lattice)

        cells, cursor = ax.collections
        assert len(cells.get_offsets()) == lattice.num_cells
        assert len(cursor.get_offsets()) == 1
        assert len(ax.lines) == int(lattice.degrees().sum()) // 2
        plt.close(ax.figure)

    def test_plot_without_links(self):
        """Test show_links=False draws no lines and honours the title."""
        lattice = HexLattice(2)
        lattice.step(Direction.MID_LEFT)

        ax = LatticePlotter.plot(lattice, show_links=False, annotate=True, title="board")

        assert len(ax.lines) == 0
        assert len(ax.texts) == lattice.num_cells
        assert ax.get_title() == "board"
        plt.close(ax.figure)

    def test_plot_into_existing_axes(self):
        """Test drawing into a caller-supplied Axes."""
        fig, ax = plt.subplots()

        returned = LatticePlotter.plot(HexLattice(1), ax=ax)

        assert returned is ax
        plt.close(fig)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
