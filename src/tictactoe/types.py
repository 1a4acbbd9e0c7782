# src/tictactoe/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Mark = Literal["X", "O"]
Cell = Optional[Mark]
Player = Literal["Human", "Computer"]
Move = NewType("Move", int)   # cell index 0..8
