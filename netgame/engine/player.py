# netgame/engine/player.py
import logging
import math
from typing import List, NamedTuple, Optional

from netgame.core.constants import (
    BOARD_SIZE, EMPTY, BLACK, WHITE, MAX_SCORE, MIN_SCORE, opposite
)
from netgame.core.settings import settings
from netgame.engine.board import Board
from netgame.engine.network import has_won
from netgame.engine.rules import is_legal, move_kind_for
from netgame.models.enums import MoveKind
from netgame.schemas.move_schema import Move

logger = logging.getLogger(__name__)

class Best(NamedTuple):
    move: Optional[Move]
    score: float

class MachinePlayer:
    """
    An automatic Network player.
    Keeps its own board, records moves made by both sides, and picks
    moves for itself with a fixed-depth alpha-beta search.
    WHITE is always the maximizing side and BLACK the minimizing side.
    """

    def __init__(self, color: int, search_depth: Optional[int] = None):
        if color not in (BLACK, WHITE):
            raise ValueError(f"Unsupported color: {color}")
        self.color = color
        self.opponent_color = opposite(color)
        if search_depth is None:
            search_depth = settings.get().search_depth
        self.search_depth = search_depth
        self.board = Board()
        self.moves = 0
        self.opponent_moves = 0
        self.nodes = 0

    def get_color(self) -> int:
        return self.color

    # --- Driver Protocol ---

    def choose_move(self) -> Move:
        """
        Root Entry Point.
        Picks a move for this player and records it on the internal board.
        A game that is already decided still gets the first legal move.
        Returns Move.quit() only when no legal move exists.
        """
        self.nodes = 0
        best = self.search(self.color, -math.inf, math.inf, self.search_depth)
        move = best.move
        if move is None:
            candidates = self.all_valid_moves(self.color)
            move = candidates[0] if candidates else Move.quit()

        if not move.is_quit():
            self.force_move(move)
        logger.debug(f"Chose {move} (score {best.score}, {self.nodes} nodes)")
        return move

    def opponent_move(self, move: Move) -> bool:
        """Records a legal opponent move. Illegal moves change nothing."""
        if not self.is_valid_move(self.opponent_color, move):
            logger.debug(f"Rejected opponent move {move}")
            return False
        self.apply_move(self.opponent_color, move)
        return True

    def force_move(self, move: Move) -> bool:
        """Records a legal move by this player. Illegal moves change nothing."""
        if not self.is_valid_move(self.color, move):
            logger.debug(f"Rejected forced move {move}")
            return False
        self.apply_move(self.color, move)
        return True

    def moves_made(self, color: int) -> int:
        return self.moves if color == self.color else self.opponent_moves

    def next_move_type(self, color: int) -> MoveKind:
        return move_kind_for(self.moves_made(color))

    def is_valid_move(self, color: int, move: Move) -> bool:
        return is_legal(self.board, color, move, self.moves_made(color))

    def has_won_game(self, color: int) -> bool:
        return has_won(self.board, color)

    # --- Board Mutation ---

    def apply_move(self, color: int, move: Move):
        """Applies a move already known to be legal and counts it for `color`."""
        if move.kind == MoveKind.STEP:
            self.board.remove(move.x2, move.y2)
        self.board.add(color, move.x1, move.y1)
        self._count(color, 1)

    def undo_move(self, color: int, move: Move):
        """Exact inverse of apply_move."""
        self.board.remove(move.x1, move.y1)
        if move.kind == MoveKind.STEP:
            self.board.add(color, move.x2, move.y2)
        self._count(color, -1)

    def _count(self, color: int, delta: int):
        if color == self.color:
            self.moves += delta
        else:
            self.opponent_moves += delta

    # --- Search ---

    def evaluate_board(self) -> int:
        """White connections minus black connections."""
        return self.board.count_connections(WHITE) - self.board.count_connections(BLACK)

    def all_valid_moves(self, color: int) -> List[Move]:
        """Every legal move for `color`, in board scan order."""
        moves_made = self.moves_made(color)
        candidates = []

        if move_kind_for(moves_made) == MoveKind.ADD:
            for x in range(BOARD_SIZE):
                for y in range(BOARD_SIZE):
                    if self.board.piece(x, y) == EMPTY:
                        candidates.append(Move.add(x, y))
        else:
            for sx in range(BOARD_SIZE):
                for sy in range(BOARD_SIZE):
                    if self.board.piece(sx, sy) != color:
                        continue
                    for x in range(BOARD_SIZE):
                        for y in range(BOARD_SIZE):
                            if self.board.piece(x, y) == EMPTY:
                                candidates.append(Move.step(x, y, sx, sy))

        return [m for m in candidates if is_legal(self.board, color, m, moves_made)]

    def _terminal_score(self, winner: int, depth: int) -> int:
        # Remaining depth is higher the sooner the win comes
        return MAX_SCORE + depth if winner == WHITE else MIN_SCORE - depth

    def search(self, color: int, alpha: float, beta: float, depth: int) -> Best:
        """
        Alpha-beta search with `color` to move.
        The board and both move counters are restored before returning.
        """
        self.nodes += 1
        other = opposite(color)

        # 1. Terminal positions
        # A single move can complete networks for both sides, so check both.
        if self.has_won_game(color):
            return Best(None, self._terminal_score(color, depth))
        if self.has_won_game(other):
            return Best(None, self._terminal_score(other, depth))

        # 2. Depth cut-off
        if depth == 0:
            return Best(None, self.evaluate_board())

        # 3. Recursive Search
        maximizing = color == WHITE
        candidates = self.all_valid_moves(color)
        best_move = None
        best_score = alpha if maximizing else beta

        for move in candidates:
            self.apply_move(color, move)
            reply = self.search(other, alpha, beta, depth - 1)
            self.undo_move(color, move)

            if maximizing and reply.score > best_score:
                best_move, best_score = move, reply.score
                alpha = reply.score
            elif not maximizing and reply.score < best_score:
                best_move, best_score = move, reply.score
                beta = reply.score

            if alpha >= beta:
                break # Cutoff

        # Nothing improved on the window: fall back to the first candidate
        if best_move is None:
            best_move = candidates[0] if candidates else Move.quit()
        return Best(best_move, best_score)
