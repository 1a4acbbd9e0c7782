from __future__ import annotations

import logging
from typing import Callable, Optional

from tictactoe.ai.base import Agent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.config import HUMAN, COMPUTER, PROMPT
from tictactoe.game.results import Outcome, outcome_after
from tictactoe.game.state import GameState
from tictactoe.ui.prompts import InputClosed, parse_move
from tictactoe.ui.render import render
from tictactoe.types import Player, Move

log = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def other(player: Player) -> Player:
    return COMPUTER if player == HUMAN else HUMAN


def _finish_move(state: GameState, move: Move, player: Player) -> None:
    log.debug("%s played %d", player, move)
    state.outcome = outcome_after(state.board, player)
    if state.outcome is None:
        state.current = other(player)
    else:
        log.debug("game over: %s", state.outcome)


def human_turn(state: GameState, raw: str) -> Move:
    """
    Parse and apply one line of human input.
    Raises ParseError / InvalidMove (both ValueError) without touching state.
    """
    move = parse_move(raw)
    state.board.apply_move(move, HUMAN)
    _finish_move(state, move, HUMAN)
    return move


def computer_turn(state: GameState, agent: Agent) -> Move:
    # Only reachable with at least one empty cell, so any failure is a bug.
    try:
        move = agent.choose_move(state)
        state.board.apply_move(move, COMPUTER)
    except ValueError as e:
        raise RuntimeError(f"{agent.name} failed to make a legal move: {e}") from e

    _finish_move(state, move, COMPUTER)
    return move


def take_turn(state: GameState, agent: Agent, read_line: ReadLine, write: Write) -> None:
    if state.current == HUMAN:
        try:
            raw = read_line(PROMPT + "\n")
        except (EOFError, OSError) as e:
            raise InputClosed(str(e) or "stdin closed") from e

        try:
            human_turn(state, raw)
            state.last_status = ""
        except ValueError as e:
            log.info("rejected input %r: %s", raw, e)
            write(str(e))
        return

    move = computer_turn(state, agent)
    state.last_status = f"Computer played {int(move)}."


def run_game(
    agent: Optional[Agent] = None,
    read_line: ReadLine = input,
    write: Write = print,
    state: Optional[GameState] = None,
) -> Outcome:
    if agent is None:
        agent = RandomAgent()
    if state is None:
        state = GameState()

    while not state.is_over:
        render(state.board, state.last_status, write=write)
        take_turn(state, agent, read_line, write)

    render(state.board, write=write)
    write(state.outcome.message)
    return state.outcome
