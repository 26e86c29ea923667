from typing import List, Tuple

from netgame.core.constants import (
    BOARD_SIZE, LAST_INDEX, EMPTY, GOAL_AXIS, SYMBOLS, opposite
)

# Ray scan order: N, S, W, E, NE, SE, SW, NW. North is decreasing y.
RAYS = [(0, -1), (0, 1), (-1, 0), (1, 0), (1, -1), (1, 1), (-1, 1), (-1, -1)]

class Board:
    def __init__(self):
        """
        Board uses (x, y) indexing: x is the column, y is the row.
        Row 0 is the TOP of the board, column 0 the LEFT.
        Values: 0=Empty, 1=Black, 2=White
        """
        self.grid = [[EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]

    def clear(self):
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                self.grid[x][y] = EMPTY

    def add(self, color: int, x: int, y: int):
        self.grid[x][y] = color

    def remove(self, x: int, y: int):
        self.grid[x][y] = EMPTY

    def piece(self, x: int, y: int) -> int:
        return self.grid[x][y]

    def snapshot(self) -> List[List[int]]:
        """Returns a copy of the cell array."""
        return [column[:] for column in self.grid]

    # --- Coordinate Predicates ---

    def on_board(self, x: int, y: int) -> bool:
        return 0 <= x <= LAST_INDEX and 0 <= y <= LAST_INDEX

    def is_corner(self, x: int, y: int) -> bool:
        return x in (0, LAST_INDEX) and y in (0, LAST_INDEX)

    def in_left_home_row(self, x: int, y: int) -> bool:
        return x == 0

    def in_right_home_row(self, x: int, y: int) -> bool:
        return x == LAST_INDEX

    def in_top_home_row(self, x: int, y: int) -> bool:
        return y == 0

    def in_bottom_home_row(self, x: int, y: int) -> bool:
        return y == LAST_INDEX

    def in_forbidden_home_row(self, color: int, x: int, y: int) -> bool:
        """True if (x, y) lies on one of the opponent's goal edges."""
        index = (x, y)[GOAL_AXIS[opposite(color)]]
        return index in (0, LAST_INDEX)

    # --- Connectivity ---

    def connections(self, color: int, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Returns the same-color pieces directly visible from (x, y).
        Assumes a piece of `color` already sits at (x, y).

        - A piece on the bottom row or right column has no connections:
          a network cannot extend past its goal edge.
        - Each ray stops at the first piece it meets. A same-color piece is
          recorded, an opposing piece blocks the ray.
        - Rays never enter row 0 or column 0, so a network can never be
          pulled back onto a starting edge. This also rules out the
          vertical rays from column 0 and the horizontal rays from row 0.
        """
        if self.in_bottom_home_row(x, y) or self.in_right_home_row(x, y):
            return []

        found = []
        for dx, dy in RAYS:
            i, j = x + dx, y + dy
            while 0 < i <= LAST_INDEX and 0 < j <= LAST_INDEX:
                cell = self.grid[i][j]
                if cell == color:
                    found.append((i, j))
                    break
                if cell != EMPTY:
                    break
                i += dx
                j += dy
        return found

    def count_connections(self, color: int) -> int:
        """Total number of connections over every `color` piece."""
        total = 0
        for x in range(BOARD_SIZE):
            for y in range(BOARD_SIZE):
                if self.grid[x][y] == color:
                    total += len(self.connections(color, x, y))
        return total

    # --- Formatting for Diagnostics ---

    def __str__(self) -> str:
        """One line per row, one character per column ('B', 'W' or '0')."""
        rows_str = []
        for y in range(BOARD_SIZE):
            rows_str.append("".join(SYMBOLS[self.grid[x][y]] for x in range(BOARD_SIZE)))
        return "".join(row + "\n" for row in rows_str)
