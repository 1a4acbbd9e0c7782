from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from tictactoe.config import HUMAN
from tictactoe.core.board import Board
from tictactoe.game.results import Outcome
from tictactoe.types import Player


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = HUMAN
    outcome: Optional[Outcome] = None
    last_status: str = ""

    @property
    def is_over(self) -> bool:
        return self.outcome is not None
