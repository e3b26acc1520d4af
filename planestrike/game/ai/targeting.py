"""Stateless hunt/track shot selection."""

from __future__ import annotations

import random
from collections.abc import Sequence

from planestrike.game.core.board import BoardData
from planestrike.game.core.models import CellStatus, Point


def next_ai_shot(board: BoardData, pending_hits: Sequence[Point], rng: random.Random) -> Point:
    """Pick the next cell to fire at on the opponent board.

    Track mode probes the EMPTY orthogonal neighbours of the most recent
    pending hit. Hunt mode, used when there is nothing to track or no such
    neighbour is left, draws random cells until an EMPTY one comes up.
    """
    if pending_hits:
        neighbors = track_candidates(board, pending_hits[-1])
        if neighbors:
            return rng.choice(neighbors)
    return hunt_shot(board, rng)


def track_candidates(board: BoardData, base: Point) -> list[Point]:
    """Return in-bounds EMPTY neighbours of ``base`` (right, left, down, up)."""
    candidates = (
        Point(base.x + 1, base.y),
        Point(base.x - 1, base.y),
        Point(base.x, base.y + 1),
        Point(base.x, base.y - 1),
    )
    return [cell for cell in candidates if board.is_empty(cell)]


def hunt_shot(board: BoardData, rng: random.Random) -> Point:
    """Draw random coordinates until one is EMPTY."""
    if board.count(CellStatus.EMPTY) == 0:
        raise ValueError("No EMPTY cells left to target.")
    while True:
        candidate = Point(rng.randrange(board.size), rng.randrange(board.size))
        if board.is_empty(candidate):
            return candidate


def update_pending_hits(
    pending_hits: Sequence[Point], target: Point, status: CellStatus
) -> tuple[Point, ...]:
    """Track hits on the plane currently being hunted.

    HIT appends, KILL clears, anything else leaves the history as is. Only one
    plane is tracked at a time.
    """
    if status is CellStatus.HIT:
        return (*pending_hits, target)
    if status is CellStatus.KILL:
        return ()
    return tuple(pending_hits)
