"""Puzzle generators for number grids (Sudoku-style) and word searches.

This package exposes the public API surface via:

- ``puzzlegen.engine.number_generator``: ``NumberGridGenerator`` and
  ``generate_number_grid`` build playable number-grid puzzles.
- ``puzzlegen.engine.word_placement``: ``WordPlacementEngine`` and
  ``generate_word_search`` build filled word-search grids.
- ``puzzlegen.engine.matcher.WordMatcher``: verifies words on finished grids.
"""

from .core.models import BoardShape, WordPlacement
from .engine.matcher import WordMatcher
from .engine.number_generator import (NumberGridConfig, NumberGridGenerator,
                                      generate_number_grid)
from .engine.number_grid import NumberGridBoard
from .engine.search_grid import SearchGrid
from .engine.word_placement import WordPlacementEngine, WordSearchConfig, generate_word_search

__all__ = [
    "BoardShape",
    "WordPlacement",
    "NumberGridBoard",
    "NumberGridConfig",
    "NumberGridGenerator",
    "generate_number_grid",
    "SearchGrid",
    "WordMatcher",
    "WordPlacementEngine",
    "WordSearchConfig",
    "generate_word_search",
]

__version__ = "0.1.0"
