"""AI strategy interface and the hunt/track implementation."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from planestrike.game.ai.targeting import next_ai_shot, update_pending_hits
from planestrike.game.core.board import BoardData
from planestrike.game.core.models import CellStatus, Point


class AIStrategy(ABC):
    """Shot selection contract for a computer-controlled side."""

    @abstractmethod
    def choose_shot(self, board: BoardData) -> Point:
        """Return next coordinate to fire at on ``board``."""

    @abstractmethod
    def notify_result(self, target: Point, status: CellStatus) -> None:
        """Update strategy state with shot result."""


class HuntTrackAI(AIStrategy):
    """Hunt at random, then probe around the latest unresolved hit."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._pending_hits: tuple[Point, ...] = ()

    @property
    def pending_hits(self) -> tuple[Point, ...]:
        return self._pending_hits

    def choose_shot(self, board: BoardData) -> Point:
        return next_ai_shot(board, self._pending_hits, self._rng)

    def notify_result(self, target: Point, status: CellStatus) -> None:
        self._pending_hits = update_pending_hits(self._pending_hits, target, status)
