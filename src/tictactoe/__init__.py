"""Terminal tic-tac-toe: you (X) against a computer (O) that plays at random."""

__version__ = "0.1.0"
