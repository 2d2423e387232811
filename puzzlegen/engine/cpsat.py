"""CP-SAT completion check for number grids using OR-Tools."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ortools.sat.python import cp_model

from ..utils.logger import get_logger
from .number_grid import NumberGridBoard

LOGGER = get_logger(__name__)


def complete_number_grid(
    board: NumberGridBoard,
    timeout: float = 10.0,
) -> Optional[List[List[str]]]:
    """Find any completion of ``board`` that respects its filled cells.

    Each cell becomes an index into ``legal_symbols``; rows, columns and
    boxes get an AllDifferent constraint. The board is not modified.

    Returns:
        The completed grid as symbols, or None if the clues are contradictory
        or the solver ran out of time.
    """

    symbols = board.legal_symbols
    index_of = {symbol: index for index, symbol in enumerate(symbols)}
    model = cp_model.CpModel()

    cell_vars: Dict[Tuple[int, int], cp_model.IntVar] = {}
    for row, col in board.coordinates():
        value = board.cells[row][col]
        if value is None:
            cell_vars[(row, col)] = model.new_int_var(0, len(symbols) - 1, f"C_{row}_{col}")
        else:
            fixed = index_of[value]
            cell_vars[(row, col)] = model.new_int_var(fixed, fixed, f"C_{row}_{col}")

    for row in range(board.rows):
        model.add_all_different([cell_vars[(row, col)] for col in range(board.columns)])
    for col in range(board.columns):
        model.add_all_different([cell_vars[(row, col)] for row in range(board.rows)])
    for top in range(0, board.rows, board.box_height):
        for left in range(0, board.columns, board.box_width):
            model.add_all_different([cell_vars[cell] for cell in board.box_cells(top, left)])

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 4

    LOGGER.debug(
        "CP-SAT: %d cells, %d open, solving (timeout=%0.1fs)...",
        len(cell_vars),
        board.empty_count(),
        timeout,
    )
    status = solver.solve(model)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no completion found (status=%s)", solver.status_name(status))
        return None

    LOGGER.debug("CP-SAT: completion found in %.2fs", solver.wall_time)
    return [
        [symbols[solver.value(cell_vars[(row, col)])] for col in range(board.columns)]
        for row in range(board.rows)
    ]
