import random

from planestrike.game.ai.strategy import AIStrategy, HuntTrackAI
from planestrike.game.core.board import BoardData
from planestrike.game.core.models import CellStatus, Point


def test_hunt_track_ai_follows_hit_then_resets_on_kill() -> None:
    ai = HuntTrackAI(random.Random(4))
    assert isinstance(ai, AIStrategy)
    board = BoardData.empty()

    first = ai.choose_shot(board)
    assert board.is_empty(first)

    ai.notify_result(Point(5, 5), CellStatus.HIT)
    board = board.with_updates({Point(5, 5): CellStatus.HIT})
    assert ai.pending_hits == (Point(5, 5),)
    assert ai.choose_shot(board) in {Point(6, 5), Point(4, 5), Point(5, 6), Point(5, 4)}

    ai.notify_result(Point(5, 4), CellStatus.KILL)
    assert ai.pending_hits == ()


def test_hunt_track_ai_keeps_hits_on_miss() -> None:
    ai = HuntTrackAI(random.Random(4))
    ai.notify_result(Point(2, 2), CellStatus.HIT)
    ai.notify_result(Point(3, 2), CellStatus.MISS)
    assert ai.pending_hits == (Point(2, 2),)
