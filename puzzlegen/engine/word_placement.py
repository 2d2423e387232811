"""Word-search generation: randomized placement followed by random fill."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import MIN_GRID_SIZE, WordDirection
from ..core.exceptions import InvalidWordError, ValidationError
from ..core.models import WordPlacement
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .search_grid import SearchGrid
from .validator import WordSearchValidator

LOGGER = get_logger(__name__)


@dataclass
class WordSearchConfig:
    seed: Optional[int] = None
    min_size: int = MIN_GRID_SIZE
    validate: bool = True


class WordPlacementEngine:
    """Places words one by one at shuffled coordinates and directions.

    Words keep their input order. For every word the full coordinate list is
    reshuffled, and for every coordinate the six directions are reshuffled;
    the first pair that fits wins. Words that fit nowhere are skipped and
    reported on the returned grid.
    """

    def __init__(
        self,
        config: Optional[WordSearchConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or WordSearchConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.validator = WordSearchValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, size: int, words: Sequence[str]) -> SearchGrid:
        cleaned = self.normalize_words(words)
        grid = SearchGrid(size, cleaned, min_size=self.config.min_size)
        LOGGER.info("Generating %sx%s word search with %d words", size, size, len(cleaned))

        coordinates = list(grid.coordinates())
        for word in cleaned:
            placement = self._place_word(grid, word, coordinates)
            if placement is None:
                grid.skipped_words.append(word)
                LOGGER.warning("Word '%s' does not fit in a %sx%s grid; skipped", word, size, size)
            else:
                LOGGER.debug(
                    "Placed '%s' at (%s,%s) %s",
                    word,
                    placement.row,
                    placement.col,
                    placement.direction.value,
                )

        filled = grid.fill_remaining(self.rng)
        grid.freeze()

        if self.config.validate:
            validation = self.validator.validate(grid)
            if not validation.ok:
                raise ValidationError(f"Word search validation failed: {validation.messages}")

        LOGGER.info(
            "Word search ready: %d placed, %d skipped, %d random letters",
            len(grid.placements),
            len(grid.skipped_words),
            filled,
        )
        return grid

    @staticmethod
    def normalize_words(words: Sequence[str]) -> List[str]:
        if isinstance(words, str):
            raise InvalidWordError("Expected a list of words, got a single string")
        if not words:
            raise InvalidWordError("Word list is empty")
        cleaned: List[str] = []
        for raw in words:
            word = clean_word(raw)
            if not word:
                raise InvalidWordError(f"Word {raw!r} contains no letters")
            cleaned.append(word)
        return cleaned

    # ------------------------------------------------------------------
    # Placement search
    # ------------------------------------------------------------------
    def _place_word(
        self,
        grid: SearchGrid,
        word: str,
        coordinates: List[Tuple[int, int]],
    ) -> Optional[WordPlacement]:
        self.rng.shuffle(coordinates)
        for row, col in coordinates:
            direction = self._direction_for_fit(grid, word, row, col)
            if direction is not None:
                return grid.write(row, col, word, direction)
        return None

    def _direction_for_fit(
        self, grid: SearchGrid, word: str, row: int, col: int
    ) -> Optional[WordDirection]:
        directions = list(WordDirection)
        self.rng.shuffle(directions)
        for direction in directions:
            if grid.fits(row, col, word, direction):
                return direction
        return None


def generate_word_search(
    size: int,
    words: Sequence[str],
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> SearchGrid:
    """Generate a filled word-search grid; see ``SearchGrid.placements``."""

    engine = WordPlacementEngine(WordSearchConfig(seed=seed), rng=rng)
    return engine.generate(size, words)
