# src/tictactoe/config.py

from __future__ import annotations

from tictactoe.types import Mark, Player

SIZE = 3
CELLS = SIZE * SIZE

HUMAN: Player = "Human"
COMPUTER: Player = "Computer"

# Fixed for the whole game
MARKS: dict[Player, Mark] = {HUMAN: "X", COMPUTER: "O"}

# Largest number accepted as input; bigger ones are unparsable, not out of range
MAX_INDEX_INPUT = 2**64 - 1

# User-facing text
PROMPT = "Enter your move (0-8):"
MSG_BAD_INPUT = f"Invalid input. Please enter a number between 0 and {CELLS - 1}."
MSG_BAD_MOVE = "Invalid move. Please try again."
MSG_HUMAN_WINS = "You win!"
MSG_COMPUTER_WINS = "Computer wins!"
MSG_DRAW = "It's a draw!"

# Logging goes to stderr; stdout is reserved for the board
LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(levelname)s] %(message)s"


def mark_of(player: Player) -> Mark:
    return MARKS[player]
