"""Number-grid puzzle generation.

Three steps:
  1. Seed the first column of an empty board with a random permutation.
  2. Complete the board with :class:`NumberGridSolver` (the answer key).
  3. Reveal a fixed share of the answer key as non-mutable clues.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.constants import CLUE_RATIO
from ..core.exceptions import PuzzleError, UnsolvableBoardError, ValidationError
from ..core.models import BoardShape
from ..utils.logger import get_logger
from .number_grid import NumberGridBoard
from .solver import NumberGridSolver
from .validator import NumberGridValidator

LOGGER = get_logger(__name__)


@dataclass
class NumberGridConfig:
    seed: Optional[int] = None
    clue_ratio: float = CLUE_RATIO
    validate: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.clue_ratio <= 1.0:
            raise ValueError(f"clue_ratio must lie in [0, 1], got {self.clue_ratio}")


@dataclass
class NumberGridResult:
    puzzle: NumberGridBoard
    solution: NumberGridBoard
    seed: Optional[int] = None


class NumberGridGenerator:
    """Builds playable number-grid puzzles from a shape."""

    def __init__(
        self,
        config: Optional[NumberGridConfig] = None,
        rng: Optional[random.Random] = None,
        solver: Optional[NumberGridSolver] = None,
    ) -> None:
        self.config = config or NumberGridConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.solver = solver or NumberGridSolver()
        self.validator = NumberGridValidator(clue_ratio=self.config.clue_ratio)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, shape: BoardShape) -> NumberGridBoard:
        return self.build(shape).puzzle

    def build(self, shape: BoardShape) -> NumberGridResult:
        LOGGER.info(
            "Generating %sx%s number grid (box %sx%s)",
            shape.rows,
            shape.columns,
            shape.box_width,
            shape.box_height,
        )
        puzzle = NumberGridBoard(shape)
        solution = puzzle.copy()

        self._seed_first_column(solution)
        if not self.solver.solve(solution):
            raise UnsolvableBoardError(
                f"No completion exists for the seeded {shape.rows}x{shape.columns} board"
            )
        solution.freeze()

        self._reveal_clues(puzzle, solution)
        puzzle.freeze()

        if self.config.validate:
            validation = self.validator.validate(puzzle, solution=solution)
            if not validation.ok:
                raise ValidationError(f"Number grid validation failed: {validation.messages}")

        LOGGER.info(
            "Number grid ready: %d clues, %d empty cells",
            puzzle.clue_count(),
            puzzle.empty_count(),
        )
        return NumberGridResult(puzzle=puzzle, solution=solution, seed=self.config.seed)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def _seed_first_column(self, board: NumberGridBoard) -> None:
        permutation = list(board.legal_symbols)
        self.rng.shuffle(permutation)
        for row in range(board.rows):
            board.make_move(row, 0, permutation[row], True)
        LOGGER.debug("Seeded first column with %s", permutation[: board.rows])

    def _reveal_clues(self, puzzle: NumberGridBoard, solution: NumberGridBoard) -> None:
        keep_count = puzzle.shape.clue_target(self.config.clue_ratio)
        coordinates = list(puzzle.coordinates())
        self.rng.shuffle(coordinates)

        revealed = 0
        for row, col in coordinates:
            if revealed >= keep_count:
                break
            if not puzzle.is_slot_available(row, col):
                continue
            if not puzzle.make_move(row, col, solution.cells[row][col], False):
                raise PuzzleError(f"Answer key rejected at ({row},{col})")
            revealed += 1
        LOGGER.debug("Revealed %d/%d clue cells", revealed, keep_count)


def generate_number_grid(
    rows: int,
    columns: int,
    box_width: int,
    box_height: int,
    legal_symbols: Sequence[str],
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> NumberGridBoard:
    """Generate a playable number-grid puzzle of the given shape."""

    shape = BoardShape(
        rows=rows,
        columns=columns,
        box_width=box_width,
        box_height=box_height,
        legal_symbols=tuple(legal_symbols),
    )
    generator = NumberGridGenerator(NumberGridConfig(seed=seed), rng=rng)
    return generator.generate(shape)
