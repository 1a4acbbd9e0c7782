from __future__ import annotations
from typing import Iterable, List

from tictactoe.core.board import Board
from tictactoe.game.state import GameState
from tictactoe.types import Move


def board_from(xs: Iterable[int] = (), os: Iterable[int] = ()) -> Board:
    b = Board()
    for i in xs:
        b.cells[i] = "X"
    for i in os:
        b.cells[i] = "O"
    return b


def reader(lines: Iterable[str]):
    """read_line stand-in; raises EOFError once the script runs out."""
    it = iter(lines)
    prompts: List[str] = []

    def read_line(prompt: str = "") -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError("no more input") from None

    read_line.prompts = prompts  # type: ignore[attr-defined]
    return read_line


class ScriptedAgent:
    name = "Scripted"

    def __init__(self, moves: Iterable[int]) -> None:
        self.moves = [Move(m) for m in moves]
        self.seen: List[List[Move]] = []

    def choose_move(self, state: GameState) -> Move:
        self.seen.append(state.board.empty_cells())
        return self.moves.pop(0)
