# netgame/engine/network.py
from typing import List, Optional, Tuple

from netgame.core.constants import BOARD_SIZE, LAST_INDEX, BLACK, MIN_NETWORK_LENGTH
from netgame.models.enums import Direction
from netgame.engine.board import Board

class Network:
    """An ordered chain of same-color pieces, front first."""

    def __init__(self, coordinates: Optional[List[Tuple[int, int]]] = None):
        self.coordinates: List[Tuple[int, int]] = list(coordinates or [])

    def add_to_start(self, coordinate: Tuple[int, int]):
        self.coordinates.insert(0, coordinate)

    def add_to_end(self, coordinate: Tuple[int, int]):
        self.coordinates.append(coordinate)

    def __len__(self) -> int:
        return len(self.coordinates)

    def is_game_winning(self) -> bool:
        """
        At least MIN_NETWORK_LENGTH pieces, starting on index 0 and ending on
        index 7 of the same axis. Only the endpoints are checked, in order.
        """
        if len(self.coordinates) < MIN_NETWORK_LENGTH:
            return False
        first_x, first_y = self.coordinates[0]
        last_x, last_y = self.coordinates[-1]
        if first_x == 0 and last_x == LAST_INDEX:
            return True
        if first_y == 0 and last_y == LAST_INDEX:
            return True
        return False

    def __str__(self) -> str:
        return "[" + ", ".join(f"({x}, {y})" for x, y in self.coordinates) + "]"


def direction_to(x1: int, y1: int, x2: int, y2: int) -> Direction:
    """Direction of the hop from (x1, y1) to (x2, y2). Assumes the cells are collinear."""
    if y2 < y1 and x2 > x1:
        return Direction.NORTHEAST
    if y2 > y1 and x2 > x1:
        return Direction.SOUTHEAST
    if y2 > y1 and x2 < x1:
        return Direction.SOUTHWEST
    if y2 < y1 and x2 < x1:
        return Direction.NORTHWEST
    if y2 < y1:
        return Direction.NORTH
    if x2 > x1:
        return Direction.EAST
    if y2 > y1:
        return Direction.SOUTH
    if x2 < x1:
        return Direction.WEST
    return Direction.NONE


def networks_from_start(x: int, y: int, color: int, board: Board) -> List[Network]:
    """
    Returns every maximal network starting at (x, y).
    Each network ends on a piece with no further way to extend it.
    Assumes a `color` piece sits at (x, y).
    """
    visited = [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    return _extend(x, y, color, board, visited, Direction.NONE)


def _extend(x: int, y: int, color: int, board: Board,
            visited: List[List[bool]], previous: Direction) -> List[Network]:
    visited[x][y] = True
    networks: List[Network] = []

    for nx, ny in board.connections(color, x, y):
        direction = direction_to(x, y, nx, ny)
        # No revisits, and never two hops in the same direction
        if visited[nx][ny] or direction == previous:
            continue
        for network in _extend(nx, ny, color, board, visited, direction):
            network.add_to_start((x, y))
            networks.append(network)

    # Dead end: the network is just this piece
    if not networks:
        networks.append(Network([(x, y)]))

    visited[x][y] = False
    return networks


def start_cells(color: int) -> List[Tuple[int, int]]:
    """Non-corner cells of the goal edge a network of `color` starts from."""
    if color == BLACK:
        return [(x, 0) for x in range(1, LAST_INDEX)]
    return [(0, y) for y in range(1, LAST_INDEX)]


def has_won(board: Board, color: int) -> bool:
    """True if `color` has a game winning network on the board."""
    for x, y in start_cells(color):
        if board.piece(x, y) != color:
            continue
        for network in networks_from_start(x, y, color, board):
            if network.is_game_winning():
                return True
    return False
