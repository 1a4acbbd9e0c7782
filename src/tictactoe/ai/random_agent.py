from __future__ import annotations
import random
from typing import Optional

from tictactoe.game.state import GameState
from tictactoe.types import Move


class RandomAgent:
    name = "Random AI"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.empty_cells()
        if not moves:
            raise ValueError("No valid moves.")
        return self.rng.choice(moves)
