"""
Move legality for Network.

An ADD move is legal when the target is on the board, not a corner, empty,
outside the opponent's goal edges, and does not form a cluster.

A STEP move is legal when both ends are on the board, not corners and outside
the opponent's goal edges, the source holds one of the mover's pieces, the
destination is empty, and the piece does not form a cluster once it has left
its source.

Whether a side may ADD or STEP depends only on that side's own move count.
"""

import logging
from typing import List, Tuple

from netgame.core.constants import ADD_MOVES, EMPTY
from netgame.engine.board import Board
from netgame.models.enums import MoveKind
from netgame.schemas.move_schema import Move

logger = logging.getLogger(__name__)


def move_kind_for(moves_made: int) -> MoveKind:
    """ADD for a side's first ADD_MOVES moves, STEP afterwards."""
    return MoveKind.ADD if moves_made < ADD_MOVES else MoveKind.STEP


def adjacent(board: Board, color: int, x: int, y: int) -> List[Tuple[int, int]]:
    """All `color` pieces in the 8 cells around (x, y)."""
    found = []
    for i in range(x - 1, x + 2):
        for j in range(y - 1, y + 2):
            if (i, j) == (x, y) or not board.on_board(i, j):
                continue
            if board.piece(i, j) == color:
                found.append((i, j))
    return found


def would_cluster(board: Board, color: int, x: int, y: int) -> bool:
    """
    Would a `color` piece at the empty cell (x, y) make 3 adjacent pieces?
    Two neighbours always do. A single neighbour does if it has a
    neighbour of its own.
    """
    neighbours = adjacent(board, color, x, y)
    if len(neighbours) >= 2:
        return True
    if not neighbours:
        return False
    nx, ny = neighbours[0]
    return len(adjacent(board, color, nx, ny)) > 0


def is_legal(board: Board, color: int, move: Move, moves_made: int) -> bool:
    """
    Checks `move` for the side playing `color`, who has made `moves_made` moves.
    The board is left exactly as it was found.
    """
    if not isinstance(move, Move):
        logger.error(f"Expected a Move, got {type(move).__name__}")
        raise TypeError(f"Expected a Move, got {type(move).__name__}")

    if move.kind == MoveKind.QUIT:
        return False
    if move.kind not in (MoveKind.ADD, MoveKind.STEP):
        logger.error(f"Unexpected move kind: {move.kind!r}")
        raise ValueError(f"Unexpected move kind: {move.kind!r}")

    # Phase check: ADD and STEP are never interchangeable
    if move.kind != move_kind_for(moves_made):
        return False

    x1, y1 = move.x1, move.y1
    if not board.on_board(x1, y1) or board.is_corner(x1, y1):
        return False
    if board.piece(x1, y1) != EMPTY:
        return False
    if board.in_forbidden_home_row(color, x1, y1):
        return False

    if move.kind == MoveKind.ADD:
        return not would_cluster(board, color, x1, y1)

    x2, y2 = move.x2, move.y2
    if not board.on_board(x2, y2) or board.is_corner(x2, y2):
        return False
    if board.piece(x2, y2) != color:
        return False
    if board.in_forbidden_home_row(color, x2, y2):
        return False

    # Lift the piece for the cluster check, then put it back
    board.remove(x2, y2)
    try:
        cluster = would_cluster(board, color, x1, y1)
    finally:
        board.add(color, x2, y2)
    return not cluster
