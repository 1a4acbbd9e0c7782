from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from tictactoe.config import HUMAN, MSG_HUMAN_WINS, MSG_COMPUTER_WINS, MSG_DRAW
from tictactoe.core.board import Board
from tictactoe.types import Player


@dataclass(frozen=True, slots=True)
class Outcome:
    winner: Optional[Player]    # None means draw

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @property
    def message(self) -> str:
        if self.is_draw:
            return MSG_DRAW
        return MSG_HUMAN_WINS if self.winner == HUMAN else MSG_COMPUTER_WINS


def outcome_after(board: Board, mover: Player) -> Optional[Outcome]:
    """
    Terminal check after `mover` has just played.
    Only the mover can have completed a line on this move.
    """
    if board.has_won(mover):
        return Outcome(winner=mover)
    if board.is_full():
        return Outcome(winner=None)
    return None
