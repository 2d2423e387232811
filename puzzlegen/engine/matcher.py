"""Post-generation word lookup on finalized search grids."""

from __future__ import annotations

from typing import List, Tuple

from ..core.constants import WordDirection
from ..core.models import WordPlacement
from .search_grid import SearchGrid


class WordMatcher:
    """Answers "does this word start here?" for gameplay collaborators.

    Lookups are pure functions of the grid contents and compare the word
    exactly as given, with the same rules :meth:`SearchGrid.reads` applies
    during placement. Every direction is checked independently with strict
    bounds, bailing out at the first mismatched letter.
    """

    def __init__(self, grid: SearchGrid) -> None:
        self.grid = grid

    def is_word_correct(self, start_row: int, start_col: int, word: str) -> bool:
        return bool(self.matching_directions(start_row, start_col, word))

    def matching_directions(self, start_row: int, start_col: int, word: str) -> List[WordDirection]:
        if not word:
            return []
        return [
            direction
            for direction in WordDirection
            if self.grid.reads(start_row, start_col, word, direction)
        ]

    def find(self, word: str) -> List[WordPlacement]:
        """Every start cell and direction from which ``word`` can be read."""

        if not word:
            return []
        found: List[WordPlacement] = []
        for row, col in self.grid.coordinates():
            if self.grid.letter(row, col) != word[0]:
                continue
            for direction in WordDirection:
                if self.grid.reads(row, col, word, direction):
                    found.append(WordPlacement(word=word, row=row, col=col, direction=direction))
        return found

    def count_occurrences(self, word: str) -> int:
        return len(self.find(word))

    def verify_placements(self) -> List[Tuple[WordPlacement, bool]]:
        return [
            (placement, self.is_word_correct(placement.row, placement.col, placement.word))
            for placement in self.grid.placements
        ]
