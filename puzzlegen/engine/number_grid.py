"""Number-grid board representation and move primitives."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..core.constants import Bounds
from ..core.exceptions import InvalidShapeError
from ..core.models import BoardShape


class NumberGridBoard:
    """Cells, mutability flags and the row/column/box rule of a number grid.

    Empty cells hold ``None``. Mutation primitives never raise on a rejected
    move: they return ``False`` so search code can move on to the next
    candidate.
    """

    def __init__(self, shape: BoardShape) -> None:
        self.shape = shape
        self.bounds = Bounds(rows=shape.rows, cols=shape.columns)
        self.cells: List[List[Optional[str]]] = [
            [None for _ in range(shape.columns)] for _ in range(shape.rows)
        ]
        self.mutable: List[List[bool]] = [
            [True for _ in range(shape.columns)] for _ in range(shape.rows)
        ]
        self._symbols = frozenset(shape.legal_symbols)
        self._filled_count = 0
        self._frozen = False

    # ------------------------------------------------------------------
    # Shape accessors
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self.shape.rows

    @property
    def columns(self) -> int:
        return self.shape.columns

    @property
    def box_width(self) -> int:
        return self.shape.box_width

    @property
    def box_height(self) -> int:
        return self.shape.box_height

    @property
    def legal_symbols(self) -> Tuple[str, ...]:
        return self.shape.legal_symbols

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_range(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def value(self, row: int, col: int) -> Optional[str]:
        if not self.in_range(row, col):
            return None
        return self.cells[row][col]

    def is_mutable(self, row: int, col: int) -> bool:
        return self.in_range(row, col) and self.mutable[row][col]

    def is_legal_symbol(self, value: Optional[str]) -> bool:
        return value in self._symbols

    def in_row(self, row: int, value: str) -> bool:
        return value in self.cells[row]

    def in_column(self, col: int, value: str) -> bool:
        return any(self.cells[row][col] == value for row in range(self.rows))

    def in_box(self, row: int, col: int, value: str) -> bool:
        return any(self.cells[r][c] == value for r, c in self.box_cells(row, col))

    def box_cells(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        start_row = (row // self.box_height) * self.box_height
        start_col = (col // self.box_width) * self.box_width
        for r in range(start_row, start_row + self.box_height):
            for c in range(start_col, start_col + self.box_width):
                yield r, c

    def is_valid_move(self, row: int, col: int, value: str) -> bool:
        if not self.in_range(row, col):
            return False
        return (
            not self.in_row(row, value)
            and not self.in_column(col, value)
            and not self.in_box(row, col, value)
        )

    def is_slot_available(self, row: int, col: int) -> bool:
        return (
            self.in_range(row, col)
            and self.cells[row][col] is None
            and self.mutable[row][col]
        )

    def board_full(self) -> bool:
        return self._filled_count == self.shape.cell_count

    def clue_count(self) -> int:
        return sum(1 for row in self.mutable for flag in row if not flag)

    def filled_count(self) -> int:
        return self._filled_count

    def empty_count(self) -> int:
        return self.shape.cell_count - self._filled_count

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        for row in range(self.rows):
            for col in range(self.columns):
                yield row, col

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def make_move(self, row: int, col: int, value: str, mark_mutable: bool) -> bool:
        """Place ``value`` when it is legal, fits the rules and the slot is mutable.

        Returns ``True`` if the board changed. Rejected moves are no-ops.
        """

        if self._frozen:
            return False
        if not self.is_legal_symbol(value):
            return False
        if not self.is_valid_move(row, col, value):
            return False
        if not self.mutable[row][col]:
            return False
        if self.cells[row][col] is None:
            self._filled_count += 1
        self.cells[row][col] = value
        self.mutable[row][col] = mark_mutable
        return True

    def make_slot_empty(self, row: int, col: int) -> None:
        """Clear a cell regardless of its mutability (backtracking undo)."""

        if self._frozen or not self.in_range(row, col):
            return
        if self.cells[row][col] is not None:
            self._filled_count -= 1
        self.cells[row][col] = None

    def freeze(self) -> None:
        self._frozen = True

    def copy(self) -> "NumberGridBoard":
        """Return an unfrozen deep copy of the board."""

        clone = NumberGridBoard(self.shape)
        clone.cells = [list(row) for row in self.cells]
        clone.mutable = [list(row) for row in self.mutable]
        clone._filled_count = self._filled_count
        return clone

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> dict:
        return {
            "board": [[value or "" for value in row] for row in self.cells],
            "mutable": [list(row) for row in self.mutable],
            "rows": self.rows,
            "columns": self.columns,
            "box_width": self.box_width,
            "box_height": self.box_height,
            "legal_symbols": list(self.legal_symbols),
        }

    @classmethod
    def from_jsonable(cls, payload: dict) -> "NumberGridBoard":
        shape = BoardShape(
            rows=payload["rows"],
            columns=payload["columns"],
            box_width=payload["box_width"],
            box_height=payload["box_height"],
            legal_symbols=tuple(payload["legal_symbols"]),
        )
        board = cls(shape)
        cells = payload["board"]
        mutable = payload["mutable"]
        if len(cells) != shape.rows or any(len(row) != shape.columns for row in cells):
            raise InvalidShapeError("Serialized board does not match its declared dimensions")
        if len(mutable) != shape.rows or any(len(row) != shape.columns for row in mutable):
            raise InvalidShapeError("Serialized mutability flags do not match the board")
        for row, col in board.coordinates():
            raw = cells[row][col]
            if raw:
                if not board.is_legal_symbol(raw):
                    raise InvalidShapeError(f"Illegal symbol {raw!r} at ({row},{col})")
                board.cells[row][col] = raw
                board._filled_count += 1
            board.mutable[row][col] = bool(mutable[row][col])
        return board

    def __repr__(self) -> str:
        return (
            f"NumberGridBoard({self.rows}x{self.columns}, box {self.box_width}x{self.box_height}, "
            f"filled={self._filled_count}, clues={self.clue_count()})"
        )
