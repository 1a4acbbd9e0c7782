from __future__ import annotations
from typing import Callable

from tictactoe.config import SIZE
from tictactoe.core.board import Board, ROW_RULE


def _legend() -> str:
    rows = []
    for r in range(SIZE):
        rows.append("|".join(f" {r * SIZE + c} " for c in range(SIZE)))
    return f"\n{ROW_RULE}\n".join(rows)


LEGEND = _legend()


def screen(board: Board, status: str = "") -> str:
    parts = [LEGEND, "", board.render(), ""]
    if status:
        parts.append(status)
    return "\n".join(parts)


def render(board: Board, status: str = "", write: Callable[[str], None] = print) -> None:
    write(screen(board, status))
