"""Headless match where both sides are played by the targeting heuristic."""

from __future__ import annotations

import logging
import random

from planestrike.game.ai.strategy import HuntTrackAI
from planestrike.game.core.fleet import random_fleet
from planestrike.game.core.models import GameStatus
from planestrike.game.core.rules import (
    GameState,
    ai_take_turn,
    new_setup,
    player_fire,
    start_game,
    with_player_fleet,
)

logger = logging.getLogger(__name__)


def run_autoplay(
    rng: random.Random, *, max_turns: int = 400, fleet_max_attempts: int = 10_000
) -> GameState:
    """Play a full game with a heuristic stand-in for the human side."""
    player_fleet = random_fleet(rng, max_attempts=fleet_max_attempts)
    ai_fleet = random_fleet(rng, max_attempts=fleet_max_attempts)
    state = start_game(with_player_fleet(new_setup(), player_fleet), ai_fleet)
    stand_in = HuntTrackAI(rng)

    for turn_index in range(max_turns):
        if state.status is not GameStatus.PLAYING:
            break
        target = stand_in.choose_shot(state.ai_board)
        outcome = player_fire(state, target)
        if outcome.result is None:
            raise RuntimeError(f"Stand-in shot at ({target.x}, {target.y}) was refused.")
        stand_in.notify_result(target, outcome.result.status)
        state = outcome.state
        if state.status is not GameStatus.PLAYING:
            break
        state = ai_take_turn(state, rng).state
        logger.debug("autoplay_turn index=%d turn=%s", turn_index, state.turn.value)

    logger.info("autoplay_finished status=%s", state.status.value)
    return state
