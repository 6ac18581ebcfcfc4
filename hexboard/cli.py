"""
Command-line harness for hex boards.

Examples
--------
Build a size-2 board, walk it and print the result::

    $ python -m hexboard 2 --moves ul,ul,mr
    ul: moved -> (1, 1)
    ul: moved -> (0, 0)
    mr: moved -> (0, 1)
        O - * - O
    ...

Run the built-in checks of every board operation::

    $ python -m hexboard 3 --self-test
"""

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional, Tuple

from .core import Direction, HexLattice, InvalidSizeError

logger = logging.getLogger(__name__)

Check = Tuple[str, Callable[[], bool]]


def _parse_moves(text: str) -> List[Direction]:
    return [Direction.parse(token) for token in text.split(',') if token.strip()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexboard",
        description="Build a hexagon-shaped board, walk its cursor and print it.",
    )
    parser.add_argument(
        "size",
        type=int,
        help="Number of rings around the centre cell (>= 0)",
    )
    parser.add_argument(
        "--moves",
        type=str,
        default="",
        help="Comma-separated directions to step, e.g. 'ul,mr,dr' "
             "(aliases: " + ", ".join(d.alias for d in Direction) + ")",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final board state as JSON instead of a drawing",
    )
    parser.add_argument(
        "--self-test",
        action="store_true",
        help="Run the built-in checks of every board operation",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v: INFO, -vv: DEBUG)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _raises_invalid_size() -> bool:
    try:
        HexLattice(-1)
    except InvalidSizeError:
        return True
    return False


def _single_cell_checks() -> List[Check]:
    board = HexLattice(0)

    def payload_round_trip() -> bool:
        board.set_centre_payload("centre")
        first = board.get_current_payload() == "centre"
        board.set_current_payload("current")
        return first and board.get_centre_payload() == "current"

    return [
        ("size 0 has one cell", lambda: board.num_cells == 1),
        ("size 0 cursor at (0, 0)", lambda: (board.row, board.col) == (0, 0)),
        ("size 0 payload starts empty", lambda: board.get_current_payload() is None),
        ("size 0 cannot step anywhere",
         lambda: not any(board.can_step(d) or board.step(d) for d in Direction)),
        ("size 0 centre and current payload are shared", payload_round_trip),
    ]


def _size_one_checks() -> List[Check]:
    board = HexLattice(1)

    def corner_walk() -> bool:
        board.reset_to_centre()
        if not board.step(Direction.UP_LEFT) or (board.row, board.col) != (0, 0):
            return False
        blocked = [board.step(d) for d in
                   (Direction.MID_LEFT, Direction.UP_LEFT, Direction.UP_RIGHT)]
        if any(blocked) or (board.row, board.col) != (0, 0):
            return False
        return board.step(Direction.DOWN_RIGHT) and board.current == board.centre

    def centre_has_all_neighbours() -> bool:
        board.reset_to_centre()
        return all(board.can_step(d) for d in Direction)

    return [
        ("size 1 has seven cells", lambda: board.num_cells == 7),
        ("size 1 cursor starts at (1, 1)", lambda: (board.row, board.col) == (1, 1)),
        ("size 1 centre has six neighbours", centre_has_all_neighbours),
        ("size 1 corner walk", corner_walk),
    ]


def _size_two_checks() -> List[Check]:
    board = HexLattice(2)
    perimeter = [
        (Direction.UP_LEFT, (0, 0)),
        (Direction.MID_RIGHT, (0, 2)),
        (Direction.DOWN_RIGHT, (2, 4)),
        (Direction.DOWN_LEFT, (4, 2)),
        (Direction.MID_LEFT, (4, 0)),
        (Direction.UP_LEFT, (2, 0)),
        (Direction.UP_RIGHT, (0, 0)),
    ]

    def perimeter_walk() -> bool:
        board.reset_to_centre()
        for direction, corner in perimeter:
            if board.walk([direction, direction]) != [True, True]:
                return False
            if (board.row, board.col) != corner:
                return False
        return True

    def reset_returns_home() -> bool:
        board.walk([Direction.DOWN_LEFT, Direction.DOWN_LEFT])
        board.reset_to_centre()
        return (board.current, board.row, board.col) == (board.centre, 2, 2)

    return [
        ("size 2 has nineteen cells", lambda: board.num_cells == 19),
        ("size 2 perimeter walk", perimeter_walk),
        ("size 2 reset to centre", reset_returns_home),
    ]


def self_test(size: int) -> int:
    """
    Run the built-in checks and print one line per check.

    Returns
    -------
    failures : int
        Number of failed checks
    """
    checks: List[Check] = [("negative size rejected", _raises_invalid_size)]
    checks += _single_cell_checks() + _size_one_checks() + _size_two_checks()

    board = HexLattice(size)
    degrees = board.degrees()
    checks.append((f"size {size} degree census",
                   lambda: size == 0 or (
                       int((degrees == 3).sum()) == 6
                       and int((degrees == 4).sum()) == 6 * (size - 1)
                   )))

    failures = 0
    for name, check in checks:
        passed = check()
        failures += not passed
        print(f"[{'OK' if passed else 'FAIL'}] {name}")

    print(f"\nDone. Passed: {len(checks) - failures}, Failed: {failures}")
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        board = HexLattice(args.size)
        moves = _parse_moves(args.moves)
    except (TypeError, ValueError) as exc:
        parser.error(str(exc))

    logger.info("Built %r", board)

    if args.self_test:
        return 0 if self_test(args.size) == 0 else 1

    for direction in moves:
        moved = board.step(direction)
        outcome = "moved" if moved else "blocked"
        print(f"{direction.alias}: {outcome} -> ({board.row}, {board.col})")

    if args.json:
        print(json.dumps(board.to_dict(), indent=2))
    else:
        sys.stdout.write(board.render())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
