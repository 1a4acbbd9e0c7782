from __future__ import annotations

from tictactoe.config import MSG_BAD_INPUT, MAX_INDEX_INPUT
from tictactoe.types import Move


class ParseError(ValueError):
    def __init__(self, message: str = MSG_BAD_INPUT) -> None:
        super().__init__(message)


def parse_move(raw: str) -> Move:
    """
    Accept a base-10 unsigned integer with an optional leading "+", up to
    MAX_INDEX_INPUT. Range and occupancy are the board's call
    (Board.apply_move raises InvalidMove).
    """
    s = raw.strip()
    digits = s[1:] if s.startswith("+") else s
    # str.isdigit() alone also accepts things like "²"
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError()
    # Checked before int() so huge inputs never hit the int/str size limit
    if len(digits.lstrip("0")) > len(str(MAX_INDEX_INPUT)):
        raise ParseError()
    idx = int(digits)
    if idx > MAX_INDEX_INPUT:
        raise ParseError()
    return Move(idx)


class InputClosed(RuntimeError):
    """The move could not be read at all (stdin closed or failing)."""
