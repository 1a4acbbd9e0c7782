# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from tictactoe.config import CELLS, SIZE, MSG_BAD_MOVE, mark_of
from tictactoe.core.rules import winning_line
from tictactoe.types import Cell, Player, Move

ROW_RULE = "-" * (SIZE * 4 - 1)


class InvalidMove(ValueError):
    """Raised when a move targets a cell that is out of range or taken."""

    def __init__(self, message: str = MSG_BAD_MOVE) -> None:
        super().__init__(message)


def _symbol(cell: Cell) -> str:
    return " " if cell is None else cell


@dataclass(slots=True)
class Board:
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None for _ in range(CELLS)]
        if len(self.cells) != CELLS:
            raise ValueError(f"Board needs exactly {CELLS} cells.")

    def empty_cells(self) -> List[Move]:
        return [Move(i) for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def has_won(self, player: Player) -> bool:
        return winning_line(self.cells, mark_of(player)) is not None

    def apply_move(self, index: Move, player: Player) -> None:
        # bool is an int subclass but never a cell index
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidMove()
        if index < 0 or index >= CELLS:
            raise InvalidMove()
        if self.cells[index] is not None:
            raise InvalidMove()
        self.cells[index] = mark_of(player)

    def render(self) -> str:
        """Row-major 3x3 grid: cells joined by "|", rows split by a rule."""
        rows = []
        for r in range(SIZE):
            row = self.cells[r * SIZE:(r + 1) * SIZE]
            rows.append("|".join(f" {_symbol(cell)} " for cell in row))
        return f"\n{ROW_RULE}\n".join(rows)
