"""Backtracking solver that completes a number grid."""

from __future__ import annotations

from typing import Tuple

from ..utils.logger import get_logger
from .number_grid import NumberGridBoard

LOGGER = get_logger(__name__)


class NumberGridSolver:
    """Fill every available slot of a board by column-major backtracking.

    Slots are visited top to bottom inside a column, then left to right across
    columns. Candidates are tried in ``legal_symbols`` order, so the outcome is
    fully determined by the board handed in; randomness comes from the
    caller's seeding.
    """

    def __init__(self) -> None:
        self.nodes = 0
        self.backtracks = 0

    def solve(self, board: NumberGridBoard) -> bool:
        """Complete ``board`` in place. Returns ``False`` if no completion exists."""

        self.nodes = 0
        self.backtracks = 0
        if board.board_full():
            return True
        solved = self._solve_from(board, 0, 0)
        LOGGER.debug(
            "Solver %s after %d nodes and %d backtracks",
            "succeeded" if solved else "failed",
            self.nodes,
            self.backtracks,
        )
        return solved

    def _solve_from(self, board: NumberGridBoard, row: int, col: int) -> bool:
        if not board.in_range(row, col):
            return False
        self.nodes += 1
        next_row, next_col = self._next_slot(board, row, col)

        if not board.is_slot_available(row, col):
            return self._solve_from(board, next_row, next_col)

        for symbol in board.legal_symbols:
            if not board.is_valid_move(row, col, symbol):
                continue
            board.make_move(row, col, symbol, True)
            if board.board_full():
                return True
            if self._solve_from(board, next_row, next_col):
                return True
            board.make_slot_empty(row, col)
            self.backtracks += 1
        return False

    @staticmethod
    def _next_slot(board: NumberGridBoard, row: int, col: int) -> Tuple[int, int]:
        if row == board.rows - 1:
            return 0, col + 1
        return row + 1, col
