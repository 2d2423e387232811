"""Data models shared by the number-grid and word-search generators."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .constants import CLUE_RATIO, BoardProfile, WordDirection
from .exceptions import InvalidShapeError


@dataclass(frozen=True)
class BoardShape:
    """Dimensions, box layout and symbol set of a number grid.

    A cell ``(row, col)`` belongs to the box
    ``(row // box_height, col // box_width)``, so ``box_height`` must divide
    ``rows`` and ``box_width`` must divide ``columns``.
    """

    rows: int
    columns: int
    box_width: int
    box_height: int
    legal_symbols: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "legal_symbols", tuple(self.legal_symbols))
        self.validate()

    def validate(self) -> None:
        for name in ("rows", "columns", "box_width", "box_height"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise InvalidShapeError(f"{name} must be a positive integer, got {value!r}")
        if self.rows % self.box_height != 0:
            raise InvalidShapeError(
                f"box height {self.box_height} does not divide {self.rows} rows"
            )
        if self.columns % self.box_width != 0:
            raise InvalidShapeError(
                f"box width {self.box_width} does not divide {self.columns} columns"
            )
        if self.rows != self.columns:
            raise InvalidShapeError(
                f"Constraint grid must be square, got {self.rows}x{self.columns}"
            )
        if self.box_width * self.box_height != self.rows:
            raise InvalidShapeError(
                f"Box {self.box_width}x{self.box_height} must hold exactly {self.rows} cells"
            )
        if len(self.legal_symbols) != self.rows:
            raise InvalidShapeError(
                f"Expected {self.rows} legal symbols, got {len(self.legal_symbols)}"
            )
        for symbol in self.legal_symbols:
            if not isinstance(symbol, str) or not symbol:
                raise InvalidShapeError(f"Legal symbols must be non-empty strings, got {symbol!r}")
        if len(set(self.legal_symbols)) != len(self.legal_symbols):
            raise InvalidShapeError("Legal symbols must be distinct")

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    def clue_target(self, clue_ratio: float = CLUE_RATIO) -> int:
        """Number of clue cells a puzzle of this shape reveals: ``floor(ratio * rows * rows)``."""

        return min(math.floor(clue_ratio * self.rows * self.rows), self.cell_count)

    @classmethod
    def from_profile(cls, profile: BoardProfile | str) -> "BoardShape":
        profile = BoardProfile(profile)
        if profile == BoardProfile.SIX_BY_SIX:
            return cls(6, 6, box_width=3, box_height=2, legal_symbols=_digits(6))
        return cls(9, 9, box_width=3, box_height=3, legal_symbols=_digits(9))

    @classmethod
    def square(
        cls,
        size: int,
        box_width: int,
        box_height: int,
        legal_symbols: Optional[Sequence[str]] = None,
    ) -> "BoardShape":
        symbols = tuple(legal_symbols) if legal_symbols is not None else _digits(size)
        return cls(size, size, box_width=box_width, box_height=box_height, legal_symbols=symbols)


def _digits(count: int) -> Tuple[str, ...]:
    return tuple(str(value) for value in range(1, count + 1))


@dataclass
class WordPlacement:
    """A word written into a search grid."""

    word: str
    row: int
    col: int
    direction: WordDirection
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            dr, dc = self.direction.step
            self._cells = [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]
        return self._cells

    @property
    def end(self) -> Tuple[int, int]:
        return self.cells[-1]

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "start": [self.row, self.col],
            "direction": self.direction.value,
        }

    @classmethod
    def from_jsonable(cls, payload: dict) -> "WordPlacement":
        row, col = payload["start"]
        return cls(
            word=payload["word"],
            row=int(row),
            col=int(col),
            direction=WordDirection(payload["direction"]),
        )
