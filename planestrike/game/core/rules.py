"""Turn order and game lifecycle over immutable game state."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace

from planestrike.game.ai.targeting import next_ai_shot, update_pending_hits
from planestrike.game.core.attack import AttackResult, resolve_attack
from planestrike.game.core.board import BoardData
from planestrike.game.core.fleet import validate_fleet
from planestrike.game.core.models import Fleet, GameStatus, Point, Turn

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameState:
    """Snapshot of one game. Every transition returns a new value."""

    player_board: BoardData = field(default_factory=BoardData.empty)
    ai_board: BoardData = field(default_factory=BoardData.empty)
    player_fleet: Fleet = field(default_factory=Fleet)
    ai_fleet: Fleet = field(default_factory=Fleet)
    turn: Turn = Turn.PLAYER
    status: GameStatus = GameStatus.SETUP
    ai_pending_hits: tuple[Point, ...] = ()


@dataclass(frozen=True, slots=True)
class TurnOutcome:
    """State after a turn plus the resolved shot, or ``None`` if it was refused."""

    state: GameState
    result: AttackResult | None = None

    @property
    def accepted(self) -> bool:
        return self.result is not None


def new_setup() -> GameState:
    """Create a fresh game in the setup phase."""
    return GameState()


def with_player_fleet(state: GameState, fleet: Fleet) -> GameState:
    """Replace the player's fleet while still in setup."""
    if state.status is not GameStatus.SETUP:
        raise ValueError("Fleet can only be changed during setup.")
    return replace(state, player_fleet=fleet)


def start_game(state: GameState, ai_fleet: Fleet) -> GameState:
    """Leave setup with both fleets deployed. The player fires first."""
    if state.status is not GameStatus.SETUP:
        raise ValueError("Game already started.")
    for side, fleet in (("player", state.player_fleet), ("ai", ai_fleet)):
        valid, reason = validate_fleet(fleet)
        if not valid:
            raise ValueError(f"Invalid {side} fleet: {reason}")
    logger.info("game_started player_planes=%d ai_planes=%d", len(state.player_fleet), len(ai_fleet))
    return replace(
        state,
        player_board=BoardData.empty(),
        ai_board=BoardData.empty(),
        ai_fleet=ai_fleet,
        turn=Turn.PLAYER,
        status=GameStatus.PLAYING,
        ai_pending_hits=(),
    )


def player_fire(state: GameState, target: Point) -> TurnOutcome:
    """Resolve the player's shot at the AI board."""
    if not _can_act(state, Turn.PLAYER):
        return TurnOutcome(state)

    result = resolve_attack(target, state.ai_board, state.ai_fleet)
    if not result.applied:
        return TurnOutcome(state)

    logger.debug("player_fire x=%d y=%d status=%s", target.x, target.y, result.status.name)
    next_state = replace(state, ai_board=result.board, ai_fleet=result.fleet)
    return TurnOutcome(_finish_turn(next_state, Turn.PLAYER, result), result)


def ai_fire(state: GameState, target: Point) -> TurnOutcome:
    """Resolve the AI's shot at the player board and update its hit tracking."""
    if not _can_act(state, Turn.AI):
        return TurnOutcome(state)

    result = resolve_attack(target, state.player_board, state.player_fleet)
    if not result.applied:
        return TurnOutcome(state)

    logger.debug("ai_fire x=%d y=%d status=%s", target.x, target.y, result.status.name)
    next_state = replace(
        state,
        player_board=result.board,
        player_fleet=result.fleet,
        ai_pending_hits=update_pending_hits(state.ai_pending_hits, target, result.status),
    )
    return TurnOutcome(_finish_turn(next_state, Turn.AI, result), result)


def ai_take_turn(state: GameState, rng: random.Random) -> TurnOutcome:
    """Choose the AI shot with the hunt/track heuristic and fire it."""
    if not _can_act(state, Turn.AI):
        return TurnOutcome(state)
    target = next_ai_shot(state.player_board, state.ai_pending_hits, rng)
    return ai_fire(state, target)


def winner(state: GameState) -> Turn | None:
    if state.status is GameStatus.PLAYER_WON:
        return Turn.PLAYER
    if state.status is GameStatus.AI_WON:
        return Turn.AI
    return None


def _can_act(state: GameState, side: Turn) -> bool:
    return state.status is GameStatus.PLAYING and state.turn is side


def _finish_turn(state: GameState, attacker: Turn, result: AttackResult) -> GameState:
    if result.fleet_destroyed:
        status = GameStatus.PLAYER_WON if attacker is Turn.PLAYER else GameStatus.AI_WON
        logger.info("game_over winner=%s", attacker.value)
        return replace(state, status=status)
    next_turn = Turn.AI if attacker is Turn.PLAYER else Turn.PLAYER
    return replace(state, turn=next_turn)
