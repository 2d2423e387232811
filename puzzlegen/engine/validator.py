"""Deterministic rule validation for generated boards."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.constants import ALPHABET, CLUE_RATIO
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .matcher import WordMatcher
from .number_grid import NumberGridBoard
from .search_grid import SearchGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class NumberGridValidator:
    """Runs deterministic validation over a number-grid puzzle."""

    def __init__(self, clue_ratio: Optional[float] = CLUE_RATIO) -> None:
        self.clue_ratio = clue_ratio

    def validate(
        self,
        board: NumberGridBoard,
        solution: Optional[NumberGridBoard] = None,
        check_completable: bool = False,
        timeout: float = 10.0,
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_clue_cells(board)
            self._check_no_conflicts(board)
            if self.clue_ratio is not None:
                self._check_clue_count(board)
            if solution is not None:
                self._check_solution(board, solution)
            if check_completable:
                self._check_completable(board, timeout)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_clue_cells(self, board: NumberGridBoard) -> None:
        for row, col in board.coordinates():
            value = board.cells[row][col]
            if value is not None and not board.is_legal_symbol(value):
                raise ValidationError(f"Illegal symbol {value!r} at ({row},{col})")
            if not board.mutable[row][col] and value is None:
                raise ValidationError(f"Clue cell at ({row},{col}) is empty")

    def _check_no_conflicts(self, board: NumberGridBoard) -> None:
        for label, cells in self._units(board):
            seen: Dict[str, Tuple[int, int]] = {}
            for row, col in cells:
                value = board.cells[row][col]
                if value is None:
                    continue
                if value in seen:
                    raise ValidationError(
                        f"Symbol {value!r} repeated in {label} at {seen[value]} and {(row, col)}"
                    )
                seen[value] = (row, col)

    def _check_clue_count(self, board: NumberGridBoard) -> None:
        expected = board.shape.clue_target(self.clue_ratio)
        actual = board.clue_count()
        if actual != expected:
            raise ValidationError(f"Expected {expected} clue cells, found {actual}")

    def _check_solution(self, board: NumberGridBoard, solution: NumberGridBoard) -> None:
        if solution.shape != board.shape:
            raise ValidationError("Solution shape differs from the puzzle shape")
        if not solution.board_full():
            raise ValidationError("Solution board is not full")
        self._check_no_conflicts(solution)
        for row, col in board.coordinates():
            value = board.cells[row][col]
            if value is not None and solution.cells[row][col] != value:
                raise ValidationError(f"Clue at ({row},{col}) disagrees with the solution")

    def _check_completable(self, board: NumberGridBoard, timeout: float) -> None:
        from .cpsat import complete_number_grid

        if complete_number_grid(board, timeout=timeout) is None:
            raise ValidationError("Clues admit no valid completion")

    @staticmethod
    def _units(board: NumberGridBoard) -> Iterable[Tuple[str, List[Tuple[int, int]]]]:
        for row in range(board.rows):
            yield f"row {row}", [(row, col) for col in range(board.columns)]
        for col in range(board.columns):
            yield f"column {col}", [(row, col) for row in range(board.rows)]
        for top in range(0, board.rows, board.box_height):
            for left in range(0, board.columns, board.box_width):
                yield f"box ({top},{left})", list(board.box_cells(top, left))


class WordSearchValidator:
    """Runs deterministic validation over a finished word search."""

    def validate(self, grid: SearchGrid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters(grid)
            self._check_placements(grid)
            self._check_words_accounted(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters(self, grid: SearchGrid) -> None:
        for row, col in grid.coordinates():
            letter = grid.letter(row, col)
            if len(letter) != 1 or letter not in ALPHABET:
                raise ValidationError(f"Invalid letter {letter!r} at ({row},{col})")

    def _check_placements(self, grid: SearchGrid) -> None:
        for placement, found in WordMatcher(grid).verify_placements():
            if not found:
                raise ValidationError(
                    f"Word '{placement.word}' does not read from ({placement.row},{placement.col})"
                )

    def _check_words_accounted(self, grid: SearchGrid) -> None:
        handled = Counter(grid.placed_words) + Counter(grid.skipped_words)
        if handled != Counter(grid.words):
            raise ValidationError("Placed and skipped words do not match the requested list")
