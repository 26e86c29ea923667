import unittest
from netgame.core.constants import BLACK, WHITE, EMPTY
from netgame.engine.board import Board

# Reference position used across the connectivity tests
BLACK_PIECES = [(1, 0), (5, 0), (6, 2), (1, 3), (4, 3), (4, 4), (2, 6), (4, 6), (4, 7), (6, 7)]
WHITE_PIECES = [(3, 1), (5, 1), (2, 2), (5, 2), (0, 4), (2, 4), (7, 4), (5, 5), (1, 6), (6, 6)]

def reference_board() -> Board:
    board = Board()
    for x, y in BLACK_PIECES:
        board.add(BLACK, x, y)
    for x, y in WHITE_PIECES:
        board.add(WHITE, x, y)
    return board

class TestBoard(unittest.TestCase):
    def setUp(self):
        self.board = reference_board()

    def test_predicates(self):
        for x, y in [(0, 0), (7, 0), (0, 7), (7, 7)]:
            self.assertTrue(self.board.is_corner(x, y))
        self.assertFalse(self.board.is_corner(0, 3))
        self.assertTrue(self.board.on_board(7, 7))
        self.assertFalse(self.board.on_board(8, 0))
        self.assertFalse(self.board.on_board(0, -1))

    def test_forbidden_home_rows(self):
        """Black stays off the left/right columns, White off the top/bottom rows."""
        self.assertTrue(self.board.in_forbidden_home_row(BLACK, 0, 3))
        self.assertTrue(self.board.in_forbidden_home_row(BLACK, 7, 3))
        self.assertFalse(self.board.in_forbidden_home_row(BLACK, 3, 0))
        self.assertTrue(self.board.in_forbidden_home_row(WHITE, 3, 0))
        self.assertTrue(self.board.in_forbidden_home_row(WHITE, 3, 7))
        self.assertFalse(self.board.in_forbidden_home_row(WHITE, 0, 3))

    def test_clear_and_remove(self):
        self.board.remove(1, 0)
        self.assertEqual(self.board.piece(1, 0), EMPTY)
        self.board.clear()
        self.assertTrue(all(cell == EMPTY for column in self.board.grid for cell in column))

    def test_connections_from_top_edge(self):
        """
        Scenario: Black at (1,0) on its starting row.
        No horizontal rays from row 0. (5,0) is on the same row and is not visible.
        """
        self.assertEqual(self.board.connections(BLACK, 1, 0), [(1, 3), (4, 3)])
        self.assertNotIn((5, 0), self.board.connections(BLACK, 1, 0))

    def test_connections_along_starting_row_on_empty_board(self):
        """
        Scenario: empty board with Black only at (1,0) and (5,0).
        Neither sees the other along row 0.
        """
        board = Board()
        board.add(BLACK, 1, 0)
        board.add(BLACK, 5, 0)
        self.assertEqual(board.connections(BLACK, 1, 0), [])
        self.assertEqual(board.connections(BLACK, 5, 0), [])

        board.add(BLACK, 1, 4)
        self.assertEqual(board.connections(BLACK, 1, 0), [(1, 4)])

    def test_connections_blocked(self):
        """Black at (5,0): straight down is blocked by White at (5,1)."""
        self.assertEqual(self.board.connections(BLACK, 5, 0), [])

    def test_connections_ray_order(self):
        """Scenario: Black at (4,4) sees N, S, NE and SW. W, E, SE and NW are blocked or empty."""
        self.assertEqual(
            self.board.connections(BLACK, 4, 4),
            [(4, 3), (4, 6), (6, 2), (2, 6)]
        )

    def test_connections_from_left_edge(self):
        """White at (0,4): only the east ray finds a piece, the diagonals hit Black first."""
        self.assertEqual(self.board.connections(WHITE, 0, 4), [(2, 4)])

    def test_terminal_edges_have_no_connections(self):
        for color, (x, y) in [(BLACK, (4, 7)), (BLACK, (6, 7)), (WHITE, (7, 4))]:
            self.assertEqual(self.board.connections(color, x, y), [])

        # Holds on every cell of row 7 and column 7
        board = Board()
        for i in range(1, 7):
            board.add(BLACK, i, 6)
        for i in range(1, 7):
            board.add(BLACK, i, 7)
            self.assertEqual(board.connections(BLACK, i, 7), [])
        for j in range(1, 7):
            board.add(WHITE, 7, j)
            self.assertEqual(board.connections(WHITE, 7, j), [])

    def test_connections_never_reach_starting_edges(self):
        """No connection from any occupied cell lands on row 0 or column 0."""
        for x in range(8):
            for y in range(8):
                color = self.board.piece(x, y)
                if color == EMPTY:
                    continue
                for cx, cy in self.board.connections(color, x, y):
                    self.assertNotEqual(cx, 0)
                    self.assertNotEqual(cy, 0)

    def test_connections_ignore_row_zero_target(self):
        """Scenario: Black at (3,3) with Black at (3,0) straight north. (3,0) is never a target."""
        board = Board()
        board.add(BLACK, 3, 3)
        board.add(BLACK, 3, 0)
        self.assertEqual(board.connections(BLACK, 3, 3), [])
        self.assertEqual(board.connections(BLACK, 3, 0), [(3, 3)])

    def test_count_connections(self):
        board = Board()
        board.add(WHITE, 0, 3)
        board.add(WHITE, 2, 3)
        self.assertEqual(board.count_connections(WHITE), 1)
        self.assertEqual(board.count_connections(BLACK), 0)

    def test_text_form(self):
        text = str(self.board)
        rows = text.split("\n")
        self.assertTrue(text.endswith("\n"))
        self.assertEqual(len(rows), 9)
        self.assertEqual(rows[0], "0B000B00")
        self.assertEqual(rows[4], "W0W0B00W")
        self.assertTrue(all(len(row) == 8 for row in rows[:8]))

    def test_snapshot_is_a_copy(self):
        snapshot = self.board.snapshot()
        self.board.add(WHITE, 3, 3)
        self.assertEqual(snapshot[3][3], EMPTY)

if __name__ == '__main__':
    unittest.main()
