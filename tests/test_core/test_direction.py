"""
Unit tests for Direction and the cursor step table.

Tests:
- Opposite directions and rotation
- Parsing names, aliases and integers
- Step deltas on each side of the pivot row
"""

import numpy as np
import pytest
from hexboard.core import Direction, STEP_DELTAS, step_delta, pivot_side


class TestDirectionGeometry:
    """Test opposites and rotation."""

    @pytest.mark.parametrize("direction, opposite", [
        (Direction.UP_LEFT, Direction.DOWN_RIGHT),
        (Direction.UP_RIGHT, Direction.DOWN_LEFT),
        (Direction.MID_LEFT, Direction.MID_RIGHT),
    ])
    def test_opposite_pairs(self, direction, opposite):
        """Test the three opposite pairs in both directions."""
        assert direction.opposite is opposite
        assert opposite.opposite is direction

    def test_clockwise_order(self):
        """Test rotating UP_RIGHT clockwise visits every direction once."""
        visited = [Direction.UP_RIGHT.rotate(k) for k in range(6)]

        assert visited == [
            Direction.UP_RIGHT, Direction.MID_RIGHT, Direction.DOWN_RIGHT,
            Direction.DOWN_LEFT, Direction.MID_LEFT, Direction.UP_LEFT,
        ]

    def test_rotate_negative(self):
        """Test anticlockwise rotation wraps around."""
        assert Direction.UP_RIGHT.rotate(-1) is Direction.UP_LEFT


class TestDirectionParse:
    """Test conversion from user input."""

    @pytest.mark.parametrize("value", [
        Direction.UP_LEFT, 5, np.int64(5), 'UP_LEFT', 'up_left', 'up-left', 'ul', ' UL ',
    ])
    def test_parse_up_left(self, value):
        """Test every accepted spelling of UP_LEFT."""
        assert Direction.parse(value) is Direction.UP_LEFT

    def test_aliases_are_unique(self):
        """Test the two-letter aliases."""
        aliases = [d.alias for d in Direction]

        assert aliases == ['ur', 'mr', 'dr', 'dl', 'ml', 'ul']

    def test_unknown_name_raises(self):
        """Test that an unknown name raises ValueError."""
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.parse('north')

    def test_out_of_range_int_raises(self):
        """Test that integers outside 0..5 raise ValueError."""
        with pytest.raises(ValueError):
            Direction.parse(6)

    @pytest.mark.parametrize("value", [1.0, None, True])
    def test_wrong_type_raises(self, value):
        """Test that non-int, non-str values raise TypeError."""
        with pytest.raises(TypeError, match="Direction"):
            Direction.parse(value)


class TestStepDeltas:
    """Test the (d_row, d_col) table."""

    def test_table_is_read_only(self):
        """Test that the shared table cannot be modified."""
        with pytest.raises(ValueError):
            STEP_DELTAS[0, 0, 0] = 5

    def test_pivot_side(self):
        """Test side index above, on and below the pivot row."""
        assert pivot_side(0, 2) == 0
        assert pivot_side(2, 2) == 1
        assert pivot_side(4, 2) == 2

    def test_row_deltas(self):
        """Test rows: up -1, mid 0, down +1 regardless of side."""
        for row in range(5):
            assert step_delta(Direction.UP_LEFT, row, 2)[0] == -1
            assert step_delta(Direction.UP_RIGHT, row, 2)[0] == -1
            assert step_delta(Direction.MID_LEFT, row, 2)[0] == 0
            assert step_delta(Direction.MID_RIGHT, row, 2)[0] == 0
            assert step_delta(Direction.DOWN_LEFT, row, 2)[0] == 1
            assert step_delta(Direction.DOWN_RIGHT, row, 2)[0] == 1

    @pytest.mark.parametrize("direction, above, on, below", [
        (Direction.UP_LEFT, -1, -1, 0),
        (Direction.UP_RIGHT, 0, 0, 1),
        (Direction.MID_LEFT, -1, -1, -1),
        (Direction.MID_RIGHT, 1, 1, 1),
        (Direction.DOWN_LEFT, 0, -1, -1),
        (Direction.DOWN_RIGHT, 1, 0, 0),
    ])
    def test_column_deltas(self, direction, above, on, below):
        """Test column shift flips at the pivot row."""
        size = 3
        assert step_delta(direction, 1, size)[1] == above
        assert step_delta(direction, 3, size)[1] == on
        assert step_delta(direction, 5, size)[1] == below

    def test_opposite_steps_cancel(self):
        """Test a step followed by its opposite from the landing row cancels."""
        size = 3
        for row in range(2 * size + 1):
            for direction in Direction:
                d_row, d_col = step_delta(direction, row, size)
                if not 0 <= row + d_row <= 2 * size:
                    continue
                back_row, back_col = step_delta(direction.opposite, row + d_row, size)
                assert (d_row + back_row, d_col + back_col) == (0, 0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
