"""
Unit tests for Cell.

Tests:
- Payload storage
- One-way neighbour writes
- Degree counting
"""

import pytest
from hexboard.core import Cell, Direction


class TestCellPayload:
    """Test payload accessors."""

    def test_payload_starts_empty(self):
        """Test a new cell has no payload."""
        assert Cell(0).payload is None

    def test_payload_replace(self):
        """Test payload can be set and replaced."""
        cell = Cell(3, payload='a')
        cell.payload = {'b': 1}

        assert cell.payload == {'b': 1}


class TestCellNeighbors:
    """Test neighbour slots."""

    def test_new_cell_is_isolated(self):
        """Test all six slots start empty."""
        cell = Cell(0)

        assert cell.neighbors() == [None] * 6
        assert cell.degree() == 0
        for direction in Direction:
            assert not cell.has_neighbor(direction)

    def test_set_neighbor_is_one_way(self):
        """Test set_neighbor does not touch the target cell."""
        a, b = Cell(0), Cell(1)
        a.set_neighbor(Direction.MID_RIGHT, b.index)

        assert a.neighbor(Direction.MID_RIGHT) == 1
        assert b.neighbor(Direction.MID_LEFT) is None

    def test_clear_neighbor(self):
        """Test None clears a slot."""
        cell = Cell(0)
        cell.set_neighbor(Direction.UP_LEFT, 4)
        cell.set_neighbor(Direction.UP_LEFT, None)

        assert cell.degree() == 0

    def test_neighbors_returns_copy(self):
        """Test mutating the returned list leaves the cell unchanged."""
        cell = Cell(0)
        slots = cell.neighbors()
        slots[0] = 99

        assert cell.neighbor(Direction.UP_RIGHT) is None

    def test_degree(self):
        """Test degree counts populated slots."""
        cell = Cell(0)
        for index, direction in enumerate([Direction.UP_LEFT, Direction.MID_LEFT, Direction.DOWN_LEFT]):
            cell.set_neighbor(direction, index + 1)

        assert cell.degree() == 3

    def test_repr(self):
        """Test __repr__ output."""
        cell = Cell(7, payload='x')
        cell.set_neighbor(Direction.UP_RIGHT, 1)

        repr_str = repr(cell)

        assert "Cell" in repr_str
        assert "index=7" in repr_str
        assert "degree=1" in repr_str
        assert "'x'" in repr_str


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
