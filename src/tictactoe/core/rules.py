from __future__ import annotations
from typing import Optional, Sequence, Tuple

from tictactoe.types import Cell, Mark

Line = Tuple[int, int, int]

LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # Columns
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # Diagonals
    (0, 4, 8), (2, 4, 6),
)


def winning_line(cells: Sequence[Cell], mark: Mark) -> Optional[Line]:
    for line in LINES:
        a, b, c = line
        if cells[a] == mark and cells[b] == mark and cells[c] == mark:
            return line
    return None
