"""Pretty-print helpers for generated boards."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.number_grid import NumberGridBoard
    from ..engine.search_grid import SearchGrid


EMPTY_SYMBOL = "."


def format_number_grid(board: NumberGridBoard) -> str:
    """Render the board with box separators; empty cells show as ``.``."""

    width = max(len(symbol) for symbol in board.legal_symbols)
    lines = []
    for row in range(board.rows):
        if row and row % board.box_height == 0:
            segment = "-" * ((width + 1) * board.box_width - 1)
            lines.append("-+-".join(segment for _ in range(board.columns // board.box_width)))
        parts = []
        for left in range(0, board.columns, board.box_width):
            values = [
                f"{board.cells[row][col] or EMPTY_SYMBOL:>{width}}"
                for col in range(left, left + board.box_width)
            ]
            parts.append(" ".join(values))
        lines.append(" | ".join(parts))
    return "\n".join(lines)


def format_search_grid(grid: SearchGrid) -> str:
    header_cells = [f"{c:>2}" for c in range(grid.size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * grid.size - 1))
    for r in range(grid.size):
        row_render = " ".join(f"{grid.letter(r, c):>2}" for c in range(grid.size))
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_number_grid_stats(board: NumberGridBoard, *, stream=None) -> None:
    """Print the puzzle followed by clue statistics."""

    stream = stream or sys.stdout
    print(format_number_grid(board), file=stream)
    total = board.shape.cell_count
    clues = board.clue_count()
    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Size:          {board.rows} x {board.columns} ({total} cells)", file=stream)
    print(f"  Box:           {board.box_width} x {board.box_height}", file=stream)
    print(f"  Clues:         {clues} ({clues / total * 100:.0f}%)", file=stream)
    print(f"  Empty:         {board.empty_count()}", file=stream)


def print_word_search_stats(grid: SearchGrid, *, stream=None) -> None:
    """Print the grid followed by placement statistics."""

    stream = stream or sys.stdout
    print(format_search_grid(grid), file=stream)
    directions = Counter(placement.direction.value for placement in grid.placements)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Requested:     {len(grid.words)}", file=stream)
    print(f"  Placed:        {len(grid.placements)}", file=stream)
    for placement in grid.placements:
        print(
            f"    {placement.word:<12} ({placement.row},{placement.col}) {placement.direction.value}",
            file=stream,
        )
    if directions:
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
    if grid.skipped_words:
        print(f"  Skipped:       {', '.join(grid.skipped_words)}", file=stream)
