"""
Hex board demo

This example walks through the core abstractions:
- HexLattice (board construction, cursor, payloads)
- Direction (the six neighbour directions)
- Visualization (ASCII drawing and matplotlib plot)
"""

import numpy as np
import sys
from pathlib import Path

# Add hexboard to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexboard import HexLattice, Direction
from hexboard.visualization import LatticePlotter


def example_construction():
    """Example 1: Build boards and inspect their graph."""
    print("=" * 60)
    print("Example 1: Board construction")
    print("=" * 60)

    for size in range(4):
        board = HexLattice(size)
        degrees = board.degrees()
        counts = {int(d): int((degrees == d).sum()) for d in np.unique(degrees)}
        print(f"\n{board!r}")
        print(f"  degree census: {counts}")
        print(f"  row lengths:   {[board.row_length(r) for r in range(board.num_rows)]}")


def example_cursor():
    """Example 2: Walk the cursor across the pivot row."""
    print("\n" + "=" * 60)
    print("Example 2: Cursor walk")
    print("=" * 60)

    board = HexLattice(2)
    print(f"\nStart at (row, col) = ({board.row}, {board.col})")

    for direction in [Direction.UP_LEFT, Direction.UP_LEFT, Direction.UP_LEFT,
                      Direction.DOWN_RIGHT, Direction.DOWN_RIGHT, Direction.DOWN_RIGHT]:
        moved = board.step(direction)
        print(f"  {direction.name:<10s} {'moved ' if moved else 'blocked'} "
              f"-> ({board.row}, {board.col})")

    print()
    print(board)


def example_payloads():
    """Example 3: Store items on cells."""
    print("=" * 60)
    print("Example 3: Payloads")
    print("=" * 60)

    board = HexLattice(1)
    board.set_centre_payload("home")
    for direction in Direction:
        board.step(direction)
        board.set_current_payload(direction.alias)
        board.reset_to_centre()

    print(f"\nCentre holds: {board.get_centre_payload()!r}")
    for direction in Direction:
        board.step(direction)
        print(f"  {direction.name:<10s} holds {board.get_current_payload()!r}")
        board.reset_to_centre()


def example_plot(show: bool = False):
    """Example 4: Draw the board with matplotlib."""
    import matplotlib.pyplot as plt

    board = HexLattice(3)
    board.walk(['ur', 'mr', 'dr'])
    ax = LatticePlotter.plot(board, annotate=True)

    output = Path(__file__).parent / "hex_board.png"
    ax.figure.savefig(output, dpi=120, bbox_inches='tight')
    print(f"\nSaved plot to {output}")
    if show:
        plt.show()
    plt.close(ax.figure)


if __name__ == '__main__':
    example_construction()
    example_cursor()
    example_payloads()
    example_plot()
