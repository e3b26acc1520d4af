import random

import pytest

from planestrike.game.core.models import CellStatus, Fleet, GameStatus, Point, Turn
from planestrike.game.core.rules import (
    GameState,
    ai_fire,
    ai_take_turn,
    new_setup,
    player_fire,
    start_game,
    winner,
    with_player_fleet,
)


def _playing(fleet: Fleet) -> GameState:
    return start_game(with_player_fleet(new_setup(), fleet), fleet)


def test_start_game_requires_complete_fleets(valid_fleet: Fleet) -> None:
    with pytest.raises(ValueError):
        start_game(with_player_fleet(new_setup(), valid_fleet.without("alpha")), valid_fleet)
    with pytest.raises(ValueError):
        start_game(with_player_fleet(new_setup(), valid_fleet), Fleet())
    state = _playing(valid_fleet)
    assert state.status is GameStatus.PLAYING
    assert state.turn is Turn.PLAYER
    with pytest.raises(ValueError):
        start_game(state, valid_fleet)
    with pytest.raises(ValueError):
        with_player_fleet(state, valid_fleet)


def test_player_shot_passes_turn_and_is_refused_out_of_turn(valid_fleet: Fleet) -> None:
    state = _playing(valid_fleet)
    outcome = player_fire(state, Point(5, 5))
    assert outcome.accepted
    assert outcome.result is not None and outcome.result.status is CellStatus.MISS
    assert outcome.state.turn is Turn.AI
    assert outcome.state.ai_board.status_at(Point(5, 5)) is CellStatus.MISS
    assert state.ai_board.status_at(Point(5, 5)) is CellStatus.EMPTY

    refused = player_fire(outcome.state, Point(6, 6))
    assert not refused.accepted
    assert refused.state is outcome.state


def test_repeat_shot_keeps_turn(valid_fleet: Fleet) -> None:
    state = player_fire(_playing(valid_fleet), Point(5, 5)).state
    state = ai_fire(state, Point(5, 5)).state
    assert state.turn is Turn.PLAYER
    repeat = player_fire(state, Point(5, 5))
    assert not repeat.accepted
    assert repeat.state.turn is Turn.PLAYER


def test_ai_pending_hits_follow_hits_and_kills(valid_fleet: Fleet) -> None:
    state = _playing(valid_fleet)
    state = player_fire(state, Point(5, 5)).state
    state = ai_fire(state, Point(0, 1)).state
    assert state.ai_pending_hits == (Point(0, 1),)

    state = player_fire(state, Point(5, 6)).state
    state = ai_fire(state, Point(9, 9)).state
    assert state.ai_pending_hits == (Point(0, 1),)

    state = player_fire(state, Point(5, 7)).state
    outcome = ai_fire(state, Point(2, 0))
    assert outcome.result is not None and outcome.result.status is CellStatus.KILL
    assert outcome.state.ai_pending_hits == ()
    assert outcome.state.player_board.status_at(Point(0, 1)) is CellStatus.KILL
    alpha = outcome.state.player_fleet.by_id("alpha")
    assert alpha is not None and alpha.is_destroyed


def test_player_wins_after_all_heads(valid_fleet: Fleet) -> None:
    state = _playing(valid_fleet)
    heads = [plane.head for plane in valid_fleet]
    for index, head in enumerate(heads):
        state = player_fire(state, head).state
        if index < len(heads) - 1:
            state = ai_fire(state, Point(index, 4)).state
    assert state.status is GameStatus.PLAYER_WON
    assert winner(state) is Turn.PLAYER
    assert not player_fire(state, Point(9, 9)).accepted
    assert not ai_fire(state, Point(9, 9)).accepted


def test_ai_take_turn_fires_once(valid_fleet: Fleet) -> None:
    state = player_fire(_playing(valid_fleet), Point(5, 5)).state
    outcome = ai_take_turn(state, random.Random(8))
    assert outcome.accepted
    assert outcome.state.player_board.count(CellStatus.EMPTY) == 99
    assert outcome.state.turn is Turn.PLAYER
    assert not ai_take_turn(outcome.state, random.Random(8)).accepted


def test_winner_is_none_while_playing(valid_fleet: Fleet) -> None:
    assert winner(new_setup()) is None
    assert winner(_playing(valid_fleet)) is None
