"""Letter grid used by the word-search generator and matcher."""

from __future__ import annotations

import random
from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, MIN_GRID_SIZE, SENTINEL, Bounds, WordDirection
from ..core.exceptions import InvalidGridSizeError, PuzzleError
from ..core.models import WordPlacement

ROW_SEPARATOR = "\r\n"


class SearchGrid:
    """Square character matrix plus the words meant to be found in it."""

    def __init__(
        self,
        size: int,
        words: Optional[Sequence[str]] = None,
        min_size: int = MIN_GRID_SIZE,
    ) -> None:
        if not isinstance(size, int) or isinstance(size, bool) or size < min_size:
            raise InvalidGridSizeError(f"Grid must be at least {min_size}x{min_size}, got {size!r}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.words: List[str] = list(words or [])
        self.cells: List[List[str]] = [[SENTINEL for _ in range(size)] for _ in range(size)]
        self.placements: List[WordPlacement] = []
        self.skipped_words: List[str] = []
        self._frozen = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    def in_bounds(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def letter(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        for row in range(self.size):
            for col in range(self.size):
                yield row, col

    def spans(self, row: int, col: int, length: int, direction: WordDirection) -> bool:
        """Whether ``length`` cells starting at ``(row, col)`` stay inside the grid."""

        if length <= 0 or not self.in_bounds(row, col):
            return False
        dr, dc = direction.step
        return self.in_bounds(row + dr * (length - 1), col + dc * (length - 1))

    def fits(self, row: int, col: int, word: str, direction: WordDirection) -> bool:
        """Bounds and conflict check for writing ``word`` from ``(row, col)``.

        Sentinel cells accept any letter; filled cells only accept the same
        letter, which lets words cross.
        """

        if not self.spans(row, col, len(word), direction):
            return False
        dr, dc = direction.step
        for index, char in enumerate(word):
            existing = self.cells[row + dr * index][col + dc * index]
            if existing != SENTINEL and existing != char:
                return False
        return True

    def reads(self, row: int, col: int, word: str, direction: WordDirection) -> bool:
        """Whether ``word`` reads off exactly from ``(row, col)`` in ``direction``."""

        if not self.spans(row, col, len(word), direction):
            return False
        dr, dc = direction.step
        for index, char in enumerate(word):
            if self.cells[row + dr * index][col + dc * index] != char:
                return False
        return True

    def is_word_correct(self, start_row: int, start_col: int, word: str) -> bool:
        return any(self.reads(start_row, start_col, word, direction) for direction in WordDirection)

    def is_complete(self) -> bool:
        return all(cell != SENTINEL for row in self.cells for cell in row)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def write(self, row: int, col: int, word: str, direction: WordDirection) -> WordPlacement:
        if self._frozen:
            raise PuzzleError("Cannot write into a finalized search grid")
        placement = WordPlacement(word=word, row=row, col=col, direction=direction)
        for (r, c), char in zip(placement.cells, word):
            self.cells[r][c] = char
        self.placements.append(placement)
        return placement

    def fill_remaining(self, rng: random.Random) -> int:
        """Replace every sentinel cell with a random letter. Returns the count."""

        filled = 0
        for row, col in self.coordinates():
            if self.cells[row][col] == SENTINEL:
                self.cells[row][col] = rng.choice(ALPHABET)
                filled += 1
        return filled

    def freeze(self) -> None:
        self._frozen = True

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_text(self) -> str:
        return "".join(" ".join(row) + " " + ROW_SEPARATOR for row in self.cells)

    @staticmethod
    def convert_to_character_matrix(text: str, size: int) -> List[List[str]]:
        """Parse the delimited grid text into a ``size`` x ``size`` matrix."""

        rows = [line for line in text.split(ROW_SEPARATOR) if line.strip()]
        if len(rows) != size:
            raise InvalidGridSizeError(f"Expected {size} grid rows, found {len(rows)}")
        matrix: List[List[str]] = []
        for line in rows:
            letters = line.split()
            if len(letters) != size:
                raise InvalidGridSizeError(f"Expected {size} letters per row, found {len(letters)}")
            matrix.append([token[0] for token in letters])
        return matrix

    @classmethod
    def from_text(cls, text: str, size: int, words: Optional[Sequence[str]] = None) -> "SearchGrid":
        grid = cls(size, words)
        grid.cells = cls.convert_to_character_matrix(text, size)
        return grid

    def to_jsonable(self) -> dict:
        return {
            "grid": self.to_text(),
            "grid_size": self.size,
            "cells": [list(row) for row in self.cells],
            "words": list(self.words),
            "placements": [placement.to_jsonable() for placement in self.placements],
            "skipped_words": list(self.skipped_words),
        }

    @classmethod
    def from_jsonable(cls, payload: dict) -> "SearchGrid":
        size = int(payload["grid_size"])
        if "cells" in payload:
            grid = cls(size, payload.get("words", []))
            cells = payload["cells"]
            if len(cells) != size or any(len(row) != size for row in cells):
                raise InvalidGridSizeError("Serialized cells do not match the grid size")
            grid.cells = [list(row) for row in cells]
        else:
            grid = cls.from_text(payload["grid"], size, payload.get("words", []))
        grid.placements = [WordPlacement.from_jsonable(item) for item in payload.get("placements", [])]
        grid.skipped_words = list(payload.get("skipped_words", []))
        return grid

    def __repr__(self) -> str:
        return (
            f"SearchGrid({self.size}x{self.size}, words={len(self.words)}, "
            f"placed={len(self.placements)}, skipped={len(self.skipped_words)})"
        )
