"""Shared constants and enumerations for the puzzle generators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SENTINEL = "_"
MIN_GRID_SIZE = 4
CLUE_RATIO = 0.5


class WordDirection(str, Enum):
    """The six directions a word-search entry may run in."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    DIAGONAL = "DIAGONAL"
    HORIZONTAL_INVERSE = "HORIZONTAL_INVERSE"
    VERTICAL_INVERSE = "VERTICAL_INVERSE"
    DIAGONAL_INVERSE = "DIAGONAL_INVERSE"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


DIRECTION_STEPS = {
    WordDirection.HORIZONTAL: (0, 1),
    WordDirection.VERTICAL: (1, 0),
    WordDirection.DIAGONAL: (1, 1),
    WordDirection.HORIZONTAL_INVERSE: (0, -1),
    WordDirection.VERTICAL_INVERSE: (-1, 0),
    WordDirection.DIAGONAL_INVERSE: (-1, -1),
}


class BoardProfile(str, Enum):
    """Caller-level presets for common number-grid shapes."""

    SIX_BY_SIX = "6x6"
    NINE_BY_NINE = "9x9"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
