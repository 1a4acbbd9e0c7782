from __future__ import annotations

import logging

from tictactoe.config import LOG_LEVEL, LOG_FORMAT
from tictactoe.game.controller import run_game
from tictactoe.ui.prompts import InputClosed

log = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    try:
        run_game()
    except InputClosed as e:
        # No way to keep playing without input
        log.error("Failed to read input: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
